from .errors import KobanaError, ValidationFailed, UnauthorizedError, ApiError

__all__ = [
    "KobanaError",
    "ValidationFailed",
    "UnauthorizedError",
    "ApiError",
]
