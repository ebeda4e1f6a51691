# kobana/models/charge_pix.py
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

# Campos numéricos são repassados como chegaram (número ou string numérica)
NumberLike = Union[int, float, str]


class WireModel(BaseModel):
    """
    Base dos corpos enviados à API: campos ausentes (None) são omitidos na serialização.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AddressBody(WireModel):
    """Endereço do pagador no formato da API."""
    street: Optional[str] = Field(None, description="Logradouro (rua, avenida, etc.)")
    zip_code: Optional[str] = Field(None, description="CEP, com ou sem formatação")
    complement: Optional[str] = Field(None, description="Complemento (apartamento, sala, etc.)")
    number: Optional[str] = Field(None, description="Número do imóvel")
    neighborhood: Optional[str] = Field(None, description="Bairro")
    city_name: Optional[str] = Field(None, description="Cidade")
    state: Optional[str] = Field(None, description="Sigla da UF (2 letras)")


class PayerBody(WireModel):
    """Pagador da cobrança."""
    document_number: Optional[str] = Field(None, description="CPF ou CNPJ do pagador")
    name: Optional[str] = Field(None, description="Nome do pagador")
    email: Optional[str] = Field(None, description="E-mail do pagador")
    address: Optional[AddressBody] = Field(None, description="Endereço (obrigatório para registration_kind 'billing')")


class ChargePixBody(WireModel):
    """
    Corpo da requisição POST /v2/charge/pix.
    """
    amount: Optional[NumberLike] = Field(None, description="Valor da cobrança (mínimo 0.01)")
    payer: Optional[PayerBody] = None
    pix_account_uid: Optional[Union[str, UUID]] = Field(None, description="UUID da conta PIX recebedora")
    external_id: Optional[str] = Field(None, description="Identificador da cobrança no sistema do cliente")
    txid: Optional[str] = None
    expire_at: Optional[Union[str, datetime]] = Field(None, description="Expiração em ISO8601")
    revoke_days: Optional[NumberLike] = None
    message: Optional[str] = None
    additional_info: Optional[Any] = None
    registration_kind: str = Field("instant", description="'instant' ou 'billing'")
    custom_data: Optional[Any] = None

    fine_type: Optional[NumberLike] = None
    fine_amount: Optional[NumberLike] = None
    fine_percentage: Optional[NumberLike] = None
    reduction_type: NumberLike = 0
    reduction_amount: Optional[NumberLike] = None
    reduction_percentage: Optional[NumberLike] = None
    interest_type: NumberLike = 0
    interest_amount: Optional[NumberLike] = None
    interest_percentage: Optional[NumberLike] = None

    tags: Optional[List[str]] = None

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "amount": 100.5,
                "payer": {
                    "document_number": "57345658570",
                    "name": "John Doe",
                    "email": "test@example.com"
                },
                "pix_account_uid": "550e8400-e29b-41d4-a716-446655440000",
                "external_id": "external-123",
                "expire_at": "2024-12-31T23:59:59Z",
                "registration_kind": "instant",
                "reduction_type": 0,
                "interest_type": 0
            }
        }
    )
