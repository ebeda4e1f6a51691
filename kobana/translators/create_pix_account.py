# kobana/translators/create_pix_account.py
from typing import Any, Dict

from kobana.models.pix_account import CreatePixAccountBody
from kobana.translators.base import BaseTranslator, value_or_default

DEFAULT_CUSTOM_NAME = "Conta principal"
DEFAULT_PROVIDER_SLUG = "example_bank"
DEFAULT_KEY = "keyexample@email.com"


class CreatePixAccountTranslator(BaseTranslator):
    """Monta o corpo de POST /v2/charge/pix_accounts, preenchendo os defaults da conta."""

    def call(self) -> Dict[str, Any]:
        data = self.data
        return self._build(
            CreatePixAccountBody,
            custom_name=value_or_default(data.get("custom_name"), DEFAULT_CUSTOM_NAME),
            financial_provider_slug=value_or_default(data.get("provider_slug"), DEFAULT_PROVIDER_SLUG),
            key=value_or_default(data.get("key"), DEFAULT_KEY),
            enabled=value_or_default(data.get("enabled"), True),
            default=value_or_default(data.get("default"), True),
        )
