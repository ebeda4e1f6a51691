from kobana.services.base import BaseService
from kobana.services.charge_pix_service import ChargePixService
from kobana.services.create_pix_account_service import CreatePixAccountService
from kobana.services.registry import REQUEST_KINDS, RequestKind, get_request_kind

__all__ = [
    "BaseService",
    "ChargePixService",
    "CreatePixAccountService",
    "REQUEST_KINDS",
    "RequestKind",
    "get_request_kind",
]
