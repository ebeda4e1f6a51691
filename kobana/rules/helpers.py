# kobana/rules/helpers.py
"""Predicados de formato compartilhados pelas regras de validação."""

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

UUID_REGEX = re.compile(r'[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}', re.IGNORECASE)

BRAZILIAN_STATES = frozenset({
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES",
    "GO", "MA", "MT", "MS", "MG", "PA", "PB", "PR",
    "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC",
    "SP", "SE", "TO",
})

CEP_LENGTH = 8


def only_digits(value: Any) -> str:
    """Remove todos os caracteres que não são dígitos (0-9)."""
    if value is None:
        return ""
    return re.sub(r'[^0-9]', '', str(value))


def is_blank(value: Any) -> bool:
    """None, string vazia ou só com espaços."""
    return value is None or not str(value).strip()


def is_empty(value: Any) -> bool:
    """None ou representação textual vazia (espaços contam como conteúdo)."""
    return value is None or str(value) == ""


def is_number(value: Any) -> bool:
    """Número finito de verdade: bool e strings numéricas não contam."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    try:
        return math.isfinite(value)
    except (OverflowError, ValueError):
        return False


def to_number(value: Any) -> Optional[float]:
    """
    Converte um valor "numérico" (número ou string numérica) para float.
    Retorna None quando a conversão não é possível ou o resultado não é finito.
    """
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def is_uuid(value: Any) -> bool:
    if value is None or isinstance(value, (bool, int, float)):
        return False
    return UUID_REGEX.fullmatch(str(value)) is not None


def is_brazilian_zip(value: Any) -> bool:
    """CEP válido: exatamente 8 dígitos depois de remover a formatação."""
    if value is None:
        return False
    return len(only_digits(value)) == CEP_LENGTH


def is_brazilian_state(value: Any) -> bool:
    """Sigla de UF brasileira (27 unidades federativas), sem diferenciar maiúsculas."""
    if value is None:
        return False
    return str(value).upper() in BRAZILIAN_STATES
