# kobana/utils/error_handlers.py
import logging
from typing import Any, Dict

import requests

from kobana.utils.errors import ApiError, UnauthorizedError, ValidationFailed

logger = logging.getLogger(__name__)


def parse_response_body(response: requests.Response) -> Dict[str, Any]:
    """Decodifica o corpo JSON da resposta. Corpo vazio ou inválido vira um dicionário vazio."""
    try:
        body = response.json()
    except ValueError:
        logger.warning(f"Resposta da API com corpo não JSON (status {response.status_code}).")
        return {}
    return body if isinstance(body, dict) else {"data": body}


def handle_response(response: requests.Response) -> Dict[str, Any]:
    """
    Converte a resposta HTTP da API em resultado ou exceção do SDK.
    Essa função encapsula a lógica comum de tratamento de erros da API.
    """
    body = parse_response_body(response)
    status_code = response.status_code

    if 200 <= status_code < 300:
        return body

    if status_code in (400, 422):
        error_message = body.get("errors") or body.get("message") or body.get("error") or "Validation error"
        logger.error(f"Erro de validação retornado pela API: [Código: {status_code}] - {error_message}")
        raise ValidationFailed(error_message)

    if status_code == 401:
        logger.error("Requisição não autorizada pela API. Verifique a API Key.")
        raise UnauthorizedError()

    logger.error(f"Erro da API: [Código: {status_code}] - {response.reason}. Detalhes: {body or 'N/A'}")
    raise ApiError(response, body)
