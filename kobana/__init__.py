# kobana/__init__.py
"""
SDK Python da API Kobana para cobranças PIX.

O SDK não configura o logging da aplicação: o logger "kobana" só recebe um
NullHandler e o nível definido em LOG_LEVEL.
"""
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

from kobana.config import Settings, configure, settings
from kobana.rules import ChargePixValidator, ValidationResult, validate_charge_pix
from kobana.services import ChargePixService, CreatePixAccountService
from kobana.utils import ApiError, KobanaError, UnauthorizedError, ValidationFailed

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "settings",
    "configure",
    "ChargePixValidator",
    "ValidationResult",
    "validate_charge_pix",
    "ChargePixService",
    "CreatePixAccountService",
    "KobanaError",
    "ValidationFailed",
    "UnauthorizedError",
    "ApiError",
]
