import logging
from typing import Any, List, Optional

from kobana.rules.base import BaseValidator, ValidationResult
from kobana.rules.helpers import only_digits

logger = logging.getLogger(__name__)

DOCUMENT_NUMBER_INVALID = "payer.document_number must be a valid CPF (11 digits) or CNPJ (14 digits)"

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# Pesos para os dígitos verificadores do CNPJ
CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CNPJ_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def _all_digits_same(document: str) -> bool:
    return len(set(document)) == 1


def is_valid_cpf(value: Any) -> bool:
    """Valida o checksum de um CPF (11 dígitos, pontuação ignorada)."""
    cpf = only_digits(value)
    if len(cpf) != CPF_LENGTH or _all_digits_same(cpf):
        return False

    def calculate_digit(cpf_part: str, weight_start: int) -> int:
        total_sum = 0
        for i, digit in enumerate(cpf_part):
            total_sum += int(digit) * (weight_start - i)
        remainder = (total_sum * 10) % 11
        return 0 if remainder >= 10 else remainder

    # Primeiro dígito verificador
    digit1 = calculate_digit(cpf[:9], 10)
    if digit1 != int(cpf[9]):
        return False

    # Segundo dígito verificador (inclui o primeiro)
    digit2 = calculate_digit(cpf[:10], 11)
    return digit2 == int(cpf[10])


def is_valid_cnpj(value: Any) -> bool:
    """Valida o checksum de um CNPJ (14 dígitos, pontuação ignorada)."""
    cnpj = only_digits(value)
    if len(cnpj) != CNPJ_LENGTH or _all_digits_same(cnpj):
        return False

    def calculate_digit(cnpj_part: str, weights: List[int]) -> int:
        total_sum = sum(int(digit) * weight for digit, weight in zip(cnpj_part, weights))
        remainder = total_sum % 11
        return 0 if remainder < 2 else 11 - remainder

    digit1 = calculate_digit(cnpj[:12], CNPJ_WEIGHTS_1)
    if digit1 != int(cnpj[12]):
        return False

    digit2 = calculate_digit(cnpj[:13], CNPJ_WEIGHTS_2)
    return digit2 == int(cnpj[13])


def detect_document_type(value: Any) -> Optional[str]:
    """'CPF' ou 'CNPJ' quando o checksum correspondente confere, senão None."""
    if is_valid_cpf(value):
        return "CPF"
    if is_valid_cnpj(value):
        return "CNPJ"
    return None


class CpfCnpjValidator(BaseValidator):
    """
    Validador para o documento do pagador (CPF ou CNPJ).
    Aceita números com ou sem formatação (ex: 573.456.585-70) e confere os
    dígitos verificadores. Não consulta nenhuma base cadastral.
    """

    def __init__(self):
        super().__init__(origin_name="cpf_cnpj_validator")

    def validate(self, data: Any, **kwargs) -> ValidationResult:
        """
        Valida um número de CPF ou CNPJ.

        Args:
            data (Any): O número do documento. Tipos inesperados são tratados como inválidos.

        Returns:
            ValidationResult: Vazio se for um CPF ou CNPJ válido; caso contrário, uma única mensagem.
        """
        normalized_document = only_digits(data)
        document_type = detect_document_type(normalized_document)
        details = {"document_type": document_type, "normalized_document": normalized_document}

        if document_type is None:
            logger.debug(f"Documento inválido (não é CPF nem CNPJ): {normalized_document[:5]}...")
            return self._format_result([DOCUMENT_NUMBER_INVALID], details)

        logger.debug(f"{document_type} válido: {normalized_document[:5]}...")
        return self._format_result([], details)
