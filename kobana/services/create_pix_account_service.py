# kobana/services/create_pix_account_service.py
from kobana.services.base import BaseService


class CreatePixAccountService(BaseService):
    """Cria uma conta PIX (POST /v2/charge/pix_accounts). Não há validação local."""
    request_kind = "create_pix_account"
