# kobana/models/pix_account.py
from pydantic import Field

from kobana.models.charge_pix import WireModel


class CreatePixAccountBody(WireModel):
    """
    Corpo da requisição POST /v2/charge/pix_accounts.
    """
    custom_name: str = Field("Conta principal", description="Nome de exibição da conta PIX")
    financial_provider_slug: str = Field("example_bank", description="Identificador do banco/provedor")
    key: str = Field("keyexample@email.com", description="Chave PIX da conta")
    enabled: bool = True
    default: bool = True
