# kobana/services/registry.py
from typing import Dict, NamedTuple, Optional, Type

from kobana.rules.base import BaseValidator
from kobana.rules.charge_pix.validator import ChargePixValidator
from kobana.translators.base import BaseTranslator
from kobana.translators.charge_pix import ChargePixTranslator
from kobana.translators.create_pix_account import CreatePixAccountTranslator


class RequestKind(NamedTuple):
    """Endpoint da API e as classes que preparam o corpo enviado a ele."""
    name: str
    path: str
    validator: Optional[Type[BaseValidator]]
    translator: Type[BaseTranslator]


# Tipos de requisição suportados, mapeando o nome para endpoint, validador e tradutor
REQUEST_KINDS: Dict[str, RequestKind] = {
    "charge_pix": RequestKind(
        name="charge_pix",
        path="/v2/charge/pix",
        validator=ChargePixValidator,
        translator=ChargePixTranslator,
    ),
    "create_pix_account": RequestKind(
        name="create_pix_account",
        path="/v2/charge/pix_accounts",
        validator=None,
        translator=CreatePixAccountTranslator,
    ),
}


def get_request_kind(name: Optional[str]) -> RequestKind:
    """
    Busca o tipo de requisição pelo nome.

    Raises:
        ValueError: Se o nome não corresponde a nenhum endpoint conhecido.
    """
    kind = REQUEST_KINDS.get(name) if isinstance(name, str) else None
    if kind is None:
        raise ValueError(f"Invalid endpoint: {name}")
    return kind
