# kobana/services/base.py

import logging
from typing import Any, Dict, Optional

import requests

from kobana.config.settings import settings
from kobana.rules.base import ValidationResult
from kobana.services.registry import RequestKind, get_request_kind
from kobana.utils.error_handlers import handle_response
from kobana.utils.errors import KobanaError, ValidationFailed

logger = logging.getLogger(__name__)


class BaseService:
    """
    Serviço base para chamadas à API Kobana.
    Orquestra o fluxo de uma requisição: valida o payload (quando o endpoint
    tem validador), traduz para o corpo da API e faz o POST autenticado.
    """
    request_kind: Optional[str] = None

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_kind: Optional[str] = None,
    ):
        self.data = data if data is not None else {}
        self.api_key = (api_key or settings.KOBANA_API_KEY or "").strip()
        if not self.api_key:
            raise ValueError("API key is required")
        self.session = session
        self.kind: RequestKind = get_request_kind(request_kind or self.request_kind)

    def validate(self) -> ValidationResult:
        """Executa apenas a validação local, sem chamada HTTP."""
        if self.kind.validator is None:
            return ValidationResult(origin=self.kind.name)
        return self.kind.validator().validate(self.data)

    def translate(self) -> Dict[str, Any]:
        return self.kind.translator(self.data).call()

    def call(self) -> Dict[str, Any]:
        """
        Valida, traduz e envia o payload.

        Returns:
            Dict[str, Any]: O corpo JSON da resposta da API.

        Raises:
            ValidationFailed: Payload inválido (nenhuma requisição é feita) ou resposta 400/422.
            UnauthorizedError: Resposta 401.
            ApiError: Qualquer outra resposta fora da faixa 2xx.
            KobanaError: Falha de rede.
        """
        result = self.validate()
        if not result.ok:
            logger.info(f"Payload de '{self.kind.name}' rejeitado localmente: {result.error_messages}")
            raise ValidationFailed(result.errors)

        body = self.translate()
        return self._post(body)

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _post(self, body: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{settings.base_uri}{self.kind.path}"
        post = self.session.post if self.session is not None else requests.post
        logger.info(f"Enviando requisição '{self.kind.name}' para {url}")
        try:
            response = post(url, headers=self._headers(), json=body, timeout=settings.KOBANA_TIMEOUT)
        except requests.RequestException as e:
            logger.error(f"Erro de rede ao chamar {url}: {e}", exc_info=True)
            raise KobanaError(f"Network error: {e}", code=500) from e
        return handle_response(response)
