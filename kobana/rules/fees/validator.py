import logging
from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field

from kobana.rules.base import BaseValidator, ValidationResult
from kobana.rules.helpers import is_empty, to_number

logger = logging.getLogger(__name__)

NO_FEE = 0
MAX_PERCENTAGE = 100


class FeeStructure(BaseModel):
    """
    Descrição de uma estrutura de encargo (multa, desconto ou juros): o campo
    `<name>_type` escolhe a variante, e cada variante pode exigir o campo
    `<name>_amount` (valor fixo) ou `<name>_percentage` (percentual).
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Prefixo dos campos (ex: 'fine' para fine_type/fine_amount).")
    type_meanings: Dict[int, str] = Field(..., description="Tipos aceitos e seu significado, na ordem da mensagem de erro.")
    amount_types: FrozenSet[int] = Field(frozenset(), description="Tipos que exigem <name>_amount.")
    percentage_types: FrozenSet[int] = Field(frozenset(), description="Tipos que exigem <name>_percentage.")

    @property
    def type_field(self) -> str:
        return f"{self.name}_type"

    @property
    def amount_field(self) -> str:
        return f"{self.name}_amount"

    @property
    def percentage_field(self) -> str:
        return f"{self.name}_percentage"

    @property
    def invalid_type_message(self) -> str:
        options = [f"{code} ({meaning})" for code, meaning in self.type_meanings.items()]
        return f"{self.type_field} must be {', '.join(options[:-1])}, or {options[-1]}"

    def _types_label(self, types: FrozenSet[int]) -> str:
        return " or ".join(str(code) for code in sorted(types))

    @property
    def amount_required_message(self) -> str:
        return f"{self.amount_field} is required when {self.type_field} is {self._types_label(self.amount_types)}"

    @property
    def percentage_required_message(self) -> str:
        return f"{self.percentage_field} is required when {self.type_field} is {self._types_label(self.percentage_types)}"


FINE = FeeStructure(
    name="fine",
    type_meanings={0: "none", 1: "value", 2: "percentage"},
    amount_types=frozenset({1}),
    percentage_types=frozenset({2}),
)

REDUCTION = FeeStructure(
    name="reduction",
    type_meanings={0: "none", 1: "value", 2: "percentage"},
    amount_types=frozenset({1}),
    percentage_types=frozenset({2}),
)

INTEREST = FeeStructure(
    name="interest",
    type_meanings={0: "none", 1: "daily value", 2: "daily percentage", 3: "monthly percentage"},
    amount_types=frozenset({1}),
    percentage_types=frozenset({2, 3}),
)

FEE_STRUCTURES = (FINE, REDUCTION, INTEREST)


def _is_declared_type(value: Any, structure: FeeStructure) -> bool:
    # Tipos chegam como números; bool e strings ("1") ficam fora do conjunto.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value in structure.type_meanings


class FeeStructureValidator(BaseValidator):
    """
    Validador genérico de estrutura de encargo. Uma instância por estrutura
    (FINE, REDUCTION, INTEREST), todas lendo o payload completo da cobrança.
    """
    def __init__(self, structure: FeeStructure):
        super().__init__(origin_name=f"{structure.name}_fee_validator")
        self.structure = structure

    def validate(self, data: Any, **kwargs) -> ValidationResult:
        """
        Valida `<name>_type` e o campo de valor/percentual que ele exige.

        Args:
            data (Any): O payload completo da cobrança.

        Returns:
            ValidationResult: No máximo uma mensagem por estrutura.
        """
        if not isinstance(data, Mapping):
            return self._format_result([])

        structure = self.structure
        fee_type = data.get(structure.type_field)
        if fee_type is None or (not isinstance(fee_type, bool) and fee_type == NO_FEE):
            return self._format_result([])

        if not _is_declared_type(fee_type, structure):
            logger.debug(f"{structure.type_field} fora do conjunto aceito: {fee_type!r}")
            return self._format_result([structure.invalid_type_message])

        errors: List[str] = []
        if fee_type in structure.amount_types:
            errors.extend(self._validate_amount(data.get(structure.amount_field)))
        elif fee_type in structure.percentage_types:
            errors.extend(self._validate_percentage(data.get(structure.percentage_field)))
        return self._format_result(errors, {"fee_type": fee_type})

    def _validate_amount(self, amount: Any) -> List[str]:
        if is_empty(amount):
            return [self.structure.amount_required_message]
        number = to_number(amount)
        if number is None or number <= 0:
            return [f"{self.structure.amount_field} must be greater than 0"]
        return []

    def _validate_percentage(self, percentage: Any) -> List[str]:
        if is_empty(percentage):
            return [self.structure.percentage_required_message]
        number = to_number(percentage)
        if number is None or number <= 0 or number > MAX_PERCENTAGE:
            return [f"{self.structure.percentage_field} must be between 0 and {MAX_PERCENTAGE}"]
        return []
