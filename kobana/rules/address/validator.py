import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from kobana.rules.base import BaseValidator, ValidationResult
from kobana.rules.helpers import is_brazilian_state, is_brazilian_zip, is_empty

logger = logging.getLogger(__name__)

BILLING_REGISTRATION_KIND = "billing"

# Campos obrigatórios do endereço quando registration_kind é "billing", na ordem de reporte
BILLING_REQUIRED_FIELDS = ("street", "zip_code", "number", "neighborhood", "city_name", "state")

ADDRESS_NOT_AN_OBJECT = "payer.address must be an object"
ZIP_CODE_INVALID = "payer.address.zip_code must be a valid Brazilian ZIP code (8 digits)"
STATE_INVALID = "payer.address.state must be a valid Brazilian state code"


class AddressValidator(BaseValidator):
    """
    Validador do endereço do pagador.
    A obrigatoriedade dos campos depende do tipo de registro da cobrança;
    o formato do CEP e da UF é conferido sempre que eles são informados.
    """
    def __init__(self):
        super().__init__(origin_name="address_validator")

    def validate(self, data: Any, registration_kind: Optional[str] = None, **kwargs) -> ValidationResult:
        """
        Valida o dicionário `payer.address`.

        Args:
            data (Any): O endereço (street, zip_code, number, neighborhood, city_name, state, complement).
            registration_kind (Optional[str]): Tipo de registro da cobrança ("instant" ou "billing").

        Returns:
            ValidationResult: Todos os problemas encontrados, não apenas o primeiro.
        """
        if data is None:
            return self._format_result([])

        if not isinstance(data, Mapping):
            return self._format_result([ADDRESS_NOT_AN_OBJECT])

        errors: List[str] = []
        missing_fields: List[str] = []

        if registration_kind == BILLING_REGISTRATION_KIND:
            missing_fields = [field for field in BILLING_REQUIRED_FIELDS if is_empty(data.get(field))]
            errors.extend(
                f"payer.address.{field} is required for billing registration_kind" for field in missing_fields
            )

        zip_code = data.get("zip_code")
        if zip_code is not None and not is_brazilian_zip(zip_code):
            errors.append(ZIP_CODE_INVALID)

        state = data.get("state")
        if state is not None and not is_brazilian_state(state):
            errors.append(STATE_INVALID)

        if errors:
            logger.debug(f"Endereço inválido ({registration_kind or 'sem registration_kind'}): {len(errors)} problema(s).")
        return self._format_result(errors, {"missing_fields": missing_fields})
