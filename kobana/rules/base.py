from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """
    Resultado imutável de uma validação: a sequência ordenada de mensagens de erro
    (vazia quando o dado é válido) e detalhes opcionais do validador que a produziu.
    """
    model_config = ConfigDict(frozen=True)

    errors: Tuple[str, ...] = Field(default=(), description="Mensagens de regra violada, na ordem de avaliação.")
    origin: str = Field("", description="Validador que produziu o resultado (ex: 'cpf_cnpj_validator').")
    details: Dict[str, Any] = Field(default_factory=dict, description="Detalhes adicionais específicos da validação.")

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def is_valid(self) -> bool:
        return self.ok

    @property
    def error_messages(self) -> str:
        """Mensagens de erro separadas por vírgula."""
        return ", ".join(self.errors)

    @classmethod
    def merge(cls, *results: "ValidationResult", origin: str = "") -> "ValidationResult":
        """Concatena, na ordem recebida, os erros de vários resultados parciais."""
        errors: Tuple[str, ...] = ()
        for result in results:
            errors += result.errors
        return cls(errors=errors, origin=origin)


class BaseValidator(ABC):
    """
    Classe base abstrata para todos os validadores de regras.
    Define a interface comum: validar um dado e devolver um ValidationResult novo,
    sem guardar estado entre chamadas.
    """
    def __init__(self, origin_name: str):
        # O nome da origem do validador (ex: "cpf_cnpj_validator", "address_validator")
        self.origin_name = origin_name

    @abstractmethod
    def validate(self, data: Any, **kwargs) -> ValidationResult:
        """
        Valida um dado específico.

        Args:
            data (Any): O dado a ser validado. Pode ser de qualquer tipo; entradas
                        malformadas resultam em erro de validação, nunca em exceção.
            **kwargs: Contexto adicional da validação (ex: registration_kind).

        Returns:
            ValidationResult: Os erros encontrados, na ordem de avaliação.
        """
        pass

    def _format_result(self, errors: Iterable[str], details: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Formata um resultado de validação de forma consistente.

        Args:
            errors (Iterable[str]): Mensagens de erro acumuladas.
            details (Optional[Dict[str, Any]]): Detalhes adicionais da validação.

        Returns:
            ValidationResult: O resultado formatado.
        """
        return ValidationResult(errors=tuple(errors), origin=self.origin_name, details=details or {})
