# kobana/services/charge_pix_service.py
from kobana.services.base import BaseService


class ChargePixService(BaseService):
    """Cria uma cobrança PIX (POST /v2/charge/pix)."""
    request_kind = "charge_pix"
