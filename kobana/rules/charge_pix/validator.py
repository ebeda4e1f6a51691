# kobana/rules/charge_pix/validator.py
import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional, Tuple

from kobana.rules.address.validator import AddressValidator
from kobana.rules.base import BaseValidator, ValidationResult
from kobana.rules.document.cpf_cnpj.validator import CpfCnpjValidator
from kobana.rules.email.validator import EmailValidator
from kobana.rules.fees.validator import FEE_STRUCTURES, FeeStructureValidator
from kobana.rules.helpers import is_blank, is_empty, is_number, is_uuid
from kobana.utils.errors import ValidationFailed

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("amount", "payer", "pix_account_uid", "expire_at", "external_id")
REGISTRATION_KINDS = ("instant", "billing")
MIN_AMOUNT = Decimal("0.01")

Errors = Tuple[str, ...]


def _required_fields(data: Mapping) -> Errors:
    return tuple(f"{field} is required" for field in REQUIRED_FIELDS if data.get(field) is None)


def _amount(data: Mapping) -> Errors:
    amount = data.get("amount")
    if amount is None:
        return ()
    if not is_number(amount):
        return ("amount must be a number",)
    if Decimal(str(amount)) < MIN_AMOUNT:
        return (f"amount must be greater than or equal to {MIN_AMOUNT}",)
    return ()


def _pix_account_uid(data: Mapping) -> Errors:
    uid = data.get("pix_account_uid")
    # None já foi reportado como campo obrigatório ausente
    if uid is None:
        return ()
    if is_blank(uid):
        return ("pix_account_uid is required",)
    if not is_uuid(uid):
        return ("pix_account_uid must be a valid UUID",)
    return ()


def _is_iso8601(value: Any) -> bool:
    try:
        datetime.fromisoformat(str(value))
    except ValueError:
        return False
    return True


def _expire_at(data: Mapping) -> Errors:
    expire_at = data.get("expire_at")
    if expire_at is None:
        return ()
    if is_blank(expire_at):
        return ("expire_at is required",)
    if not _is_iso8601(expire_at):
        return ("expire_at must be in ISO8601 format (e.g., 2024-12-31T23:59:59Z)",)
    return ()


def _registration_kind(data: Mapping) -> Errors:
    kind = data.get("registration_kind")
    if kind is None or str(kind) in REGISTRATION_KINDS:
        return ()
    return (f"registration_kind must be one of: {', '.join(REGISTRATION_KINDS)}",)


def _tags(data: Mapping) -> Errors:
    tags = data.get("tags")
    if tags is None:
        return ()
    if not isinstance(tags, (list, tuple)):
        return ("tags must be an array",)
    return tuple(f"tags[{index}] must be a string" for index, tag in enumerate(tags) if not isinstance(tag, str))


class ChargePixValidator(BaseValidator):
    """
    Validador composto do payload de criação de cobrança PIX.

    Executa todos os grupos de regra numa ordem fixa, sem interromper no primeiro
    erro: o resultado é a concatenação dos erros de cada grupo. Um grupo só deixa
    de avaliar uma sub-regra quando o campo pai está ausente (ex: sem `payer`,
    nada de `payer.*` é verificado). O payload nunca é alterado.
    """
    def __init__(
        self,
        cpf_cnpj_validator: Optional[CpfCnpjValidator] = None,
        email_validator: Optional[EmailValidator] = None,
        address_validator: Optional[AddressValidator] = None,
    ):
        super().__init__(origin_name="charge_pix_validator")
        self.cpf_cnpj_validator = cpf_cnpj_validator or CpfCnpjValidator()
        self.email_validator = email_validator or EmailValidator()
        self.address_validator = address_validator or AddressValidator()
        self.fee_validators = tuple(FeeStructureValidator(structure) for structure in FEE_STRUCTURES)

        self._rule_groups: Tuple[Callable[[Mapping], Errors], ...] = (
            _required_fields,
            _amount,
            self._payer,
            _pix_account_uid,
            _expire_at,
            _registration_kind,
            *(self._fee_rule(validator) for validator in self.fee_validators),
            _tags,
        )

    def _payer(self, data: Mapping) -> Errors:
        payer = data.get("payer")
        if payer is None:
            return ()
        if not isinstance(payer, Mapping):
            return ("payer must be an object",)

        errors: Errors = ()
        document_number = payer.get("document_number")
        if is_empty(document_number):
            errors += ("payer.document_number is required",)
        if is_empty(payer.get("name")):
            errors += ("payer.name is required",)

        # Checksum só faz sentido quando o documento foi informado
        if not is_empty(document_number):
            errors += self.cpf_cnpj_validator.validate(document_number).errors

        email = payer.get("email")
        if email is not None:
            errors += self.email_validator.validate(email).errors

        errors += self.address_validator.validate(
            payer.get("address"), registration_kind=data.get("registration_kind")
        ).errors
        return errors

    @staticmethod
    def _fee_rule(validator: FeeStructureValidator) -> Callable[[Mapping], Errors]:
        def rule(data: Mapping) -> Errors:
            return validator.validate(data).errors
        return rule

    def validate(self, data: Any, **kwargs) -> ValidationResult:
        """
        Valida um payload de cobrança PIX.

        Args:
            data (Any): O payload (dicionário aninhado). Qualquer outro tipo é inválido.

        Returns:
            ValidationResult: Todos os erros aplicáveis, na ordem dos grupos de regra.
        """
        if not isinstance(data, Mapping):
            return self._format_result(["payload must be an object"])

        errors: Errors = ()
        for rule_group in self._rule_groups:
            errors += rule_group(data)

        if errors:
            logger.debug(f"Payload de cobrança PIX inválido: {len(errors)} erro(s).")
        return self._format_result(errors)

    def call(self, data: Any) -> bool:
        """
        Valida o payload e levanta ValidationFailed com a lista completa de erros
        quando ele é inválido.

        Returns:
            bool: True quando o payload é válido.
        """
        result = self.validate(data)
        if not result.ok:
            raise ValidationFailed(result.errors)
        return True


_default_validator = ChargePixValidator()


def validate_charge_pix(data: Any) -> ValidationResult:
    """Atalho para ChargePixValidator().validate(data)."""
    return _default_validator.validate(data)
