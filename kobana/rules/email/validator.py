# kobana/rules/email/validator.py

import logging
from typing import Any

from email_validator import EmailNotValidError, validate_email

from kobana.rules.base import BaseValidator, ValidationResult

logger = logging.getLogger(__name__)

EMAIL_INVALID = "payer.email must be a valid email address"


class EmailValidator(BaseValidator):
    """
    Validador de endereços de e-mail do pagador.
    Utiliza a biblioteca 'email_validator' apenas para a sintaxe: nenhuma
    consulta DNS é feita, mantendo a validação determinística e sem I/O.
    """

    def __init__(self):
        super().__init__(origin_name="email_validator")

    def validate(self, data: Any, **kwargs) -> ValidationResult:
        """
        Valida um endereço de e-mail.

        Args:
            data (Any): O e-mail a ser validado. Só strings não vazias podem ser válidas.

        Returns:
            ValidationResult: Vazio quando o e-mail é sintaticamente válido.
        """
        if not isinstance(data, str) or not data.strip():
            return self._format_result([EMAIL_INVALID], {"reason": "empty_or_invalid_type"})

        normalized_email = data.strip()
        try:
            email_info = validate_email(normalized_email, check_deliverability=False)
        except EmailNotValidError as e:
            logger.debug(f"Validação de e-mail: '{normalized_email}' inválido via email_validator: {e}")
            return self._format_result([EMAIL_INVALID], {"reason": str(e)})

        return self._format_result([], {"normalized_email": email_info.normalized})
