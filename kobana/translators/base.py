# kobana/translators/base.py
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Type

from pydantic import ValidationError

from kobana.models.charge_pix import WireModel
from kobana.utils.errors import ValidationFailed

logger = logging.getLogger(__name__)


def value_or_default(value: Any, default: Any) -> Any:
    """Usa o default apenas quando o valor está ausente (None); falsy explícito é mantido."""
    return default if value is None else value


class BaseTranslator(ABC):
    """
    Classe base para tradutores: convertem o payload do cliente no corpo
    JSON esperado pela API. O payload original nunca é alterado.
    """
    def __init__(self, data: Any):
        self.data: Mapping = data if isinstance(data, Mapping) else {}

    @abstractmethod
    def call(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _build(self, model: Type[WireModel], **fields: Any) -> Dict[str, Any]:
        """
        Instancia o modelo de corpo e serializa para o formato da API.
        Valores que não cabem no modelo viram ValidationFailed.
        """
        try:
            return model(**fields).to_wire()
        except ValidationError as e:
            errors = [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()]
            logger.warning(f"{type(self).__name__}: payload não pôde ser traduzido ({len(errors)} erro(s)).")
            raise ValidationFailed(errors) from e
