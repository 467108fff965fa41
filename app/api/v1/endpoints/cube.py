from fastapi import APIRouter, Depends

from app.models.schemas import (
    CubeState,
    ErrorResponse,
    ShuffleRequest,
    SolveRequest,
    TwistRequest,
    TwistResponse,
)
from app.services.cube_service import CubeService, get_cube_service
from app.utils.error_handlers import bad_request_error
from app.utils.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


@router.get("", response_model=CubeState)
async def get_cube(service: CubeService = Depends(get_cube_service)):
    """
    Current cube state: flags, queued and executed twists, face grids
    and cubelet ids by address
    """
    return service.get_state()


@router.post("/twists",
             response_model=TwistResponse,
             responses={
                 400: {"model": ErrorResponse, "description": "No valid twist in notation"}
             })
async def add_twists(
    request: TwistRequest,
    service: CubeService = Depends(get_cube_service)
):
    """
    Queue twists from notation such as 'RUr45u'.
    Unrecognized characters are ignored; at least one twist must remain.
    """
    twists = service.add_twists(request.notation, settle=request.settle)
    if not twists:
        logger.warning("Rejected notation", notation=request.notation)
        raise bad_request_error(f"No valid twist in {request.notation!r}")

    return TwistResponse(
        accepted=[str(t) for t in twists],
        state=CubeState(**service.get_state())
    )


@router.post("/shuffle", response_model=TwistResponse)
async def shuffle_cube(
    request: ShuffleRequest,
    service: CubeService = Depends(get_cube_service)
):
    """Queue random twists drawn from the configured shuffle alphabet"""
    twists = service.shuffle(request.count, settle=request.settle)
    return TwistResponse(
        accepted=[str(t) for t in twists],
        state=CubeState(**service.get_state())
    )


@router.post("/solve", response_model=CubeState)
async def solve_cube(
    request: SolveRequest,
    service: CubeService = Depends(get_cube_service)
):
    """Start solving by unwinding the twist history"""
    service.solve(settle=request.settle)
    return service.get_state()


@router.post("/reset", response_model=CubeState)
async def reset_cube(service: CubeService = Depends(get_cube_service)):
    """Replace the cube with a fresh solved one"""
    service.reset()
    return service.get_state()
