# kobana/utils/errors.py
from typing import Any, Iterable, List, Optional, Union


class KobanaError(Exception):
    """
    Erro base do SDK. Carrega o código HTTP (quando houver) e detalhes adicionais.
    """
    def __init__(self, message: Optional[str] = None, code: Optional[int] = None, details: Any = None):
        self.code = code
        self.details = details
        super().__init__(message or "An unexpected error occurred")

    @property
    def message(self) -> str:
        return self.args[0]


class ValidationFailed(KobanaError):
    """
    Falha de validação: carrega a lista ordenada de mensagens de regra violada.
    Usado tanto para a validação local (antes da chamada HTTP) quanto para
    respostas 400/422 da API.
    """
    def __init__(self, errors: Union[str, Iterable[str], None]):
        if errors is None:
            self.errors: List[str] = []
        elif isinstance(errors, str):
            self.errors = [errors]
        else:
            self.errors = list(errors)
        super().__init__(f"Validation failed: {', '.join(str(e) for e in self.errors)}", code=422, details=self.errors)


class UnauthorizedError(KobanaError):
    def __init__(self):
        super().__init__("Unauthorized request. Check your API key or permissions.", code=401)


class ApiError(KobanaError):
    """
    Erro genérico retornado pela API (qualquer status não tratado especificamente).
    """
    def __init__(self, response: Any, body: Optional[dict] = None):
        self.response = response
        body = body if isinstance(body, dict) else {}
        message = body.get("error") or body.get("message") or "Unexpected API error"
        super().__init__(message, code=getattr(response, "status_code", None), details=body)
