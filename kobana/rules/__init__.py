from .base import BaseValidator, ValidationResult
from .charge_pix.validator import ChargePixValidator, validate_charge_pix

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ChargePixValidator",
    "validate_charge_pix",
]
