"""
Custom exceptions for cube operations
"""

from typing import Optional


class CuberError(Exception):
    """Base error for the cube model"""
    def __init__(self, message: str, error_type: Optional[str] = None, details: Optional[dict] = None):
        self.message = message
        self.error_type = error_type or "CuberError"
        self.details = details or {}
        super().__init__(self.message)


class InvalidTwistError(CuberError):
    """Raised when a twist command letter is not recognized"""
    def __init__(self, command, details: Optional[dict] = None):
        self.command = command
        super().__init__(f"Invalid twist command {command!r}", "InvalidTwistError", details)


class PermutationError(CuberError):
    """Raised when a slot permutation would lose or duplicate a Cubelet"""
    def __init__(self, message: str, command: Optional[str] = None, details: Optional[dict] = None):
        self.command = command
        super().__init__(message, "PermutationError", details)
