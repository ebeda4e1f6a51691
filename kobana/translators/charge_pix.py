# kobana/translators/charge_pix.py
from collections.abc import Mapping
from typing import Any, Dict, Optional

from kobana.models.charge_pix import ChargePixBody
from kobana.translators.base import BaseTranslator, value_or_default

ADDRESS_FIELDS = ("street", "zip_code", "complement", "number", "neighborhood", "city_name", "state")

# Campos repassados sem transformação
PASSTHROUGH_FIELDS = (
    "amount",
    "pix_account_uid",
    "external_id",
    "txid",
    "expire_at",
    "revoke_days",
    "message",
    "additional_info",
    "custom_data",
    "fine_type",
    "fine_amount",
    "fine_percentage",
    "reduction_amount",
    "reduction_percentage",
    "interest_amount",
    "interest_percentage",
    "tags",
)


class ChargePixTranslator(BaseTranslator):
    """
    Monta o corpo de POST /v2/charge/pix a partir do payload de cobrança.
    Campos ausentes são omitidos; registration_kind, reduction_type e
    interest_type recebem defaults quando não informados.
    """

    def call(self) -> Dict[str, Any]:
        data = self.data
        return self._build(
            ChargePixBody,
            payer=self._payer(),
            registration_kind=value_or_default(data.get("registration_kind"), "instant"),
            reduction_type=value_or_default(data.get("reduction_type"), 0),
            interest_type=value_or_default(data.get("interest_type"), 0),
            **{field: data.get(field) for field in PASSTHROUGH_FIELDS},
        )

    def _payer(self) -> Optional[Dict[str, Any]]:
        payer = self.data.get("payer")
        if not isinstance(payer, Mapping):
            return None
        return dict(
            document_number=payer.get("document_number"),
            name=payer.get("name"),
            email=payer.get("email"),
            address=self._address(payer.get("address")),
        )

    @staticmethod
    def _address(address: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(address, Mapping):
            return None
        return {field: address.get(field) for field in ADDRESS_FIELDS}
