# Pydantic schemas for API request/response models (DTOs)
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime


class BaseSchema(BaseModel):
    class Config:
        from_attributes = True
        use_enum_values = True


# Request schemas
class TwistRequest(BaseSchema):
    notation: str = Field(..., min_length=1, max_length=1000, description="Twist notation such as 'RUr45u'")
    settle: bool = Field(default=False, description="Run every queued twist before responding")

    @field_validator("notation")
    @classmethod
    def strip_notation(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("notation must not be blank")
        return v


class ShuffleRequest(BaseSchema):
    count: int = Field(default=20, ge=1, le=500)
    settle: bool = False


class SolveRequest(BaseSchema):
    settle: bool = False


# Response schemas
class CubeState(BaseSchema):
    is_solved: bool
    is_ready: bool
    is_shuffling: bool
    is_rotating: bool
    is_solving: bool
    is_tweening: bool
    queued: List[str] = []
    history: List[str] = []
    faces: Dict[str, List[List[str]]] = {}
    cubelets: List[int] = []


class TwistResponse(BaseSchema):
    accepted: List[str]
    state: CubeState


class HealthCheck(BaseSchema):
    status: str
    version: str
    timestamp: datetime
    services: Dict[str, str] = {}


# Error schemas
class ErrorResponse(BaseSchema):
    detail: str
    error_code: Optional[str] = None
    timestamp: float
    error_id: Optional[str] = None
