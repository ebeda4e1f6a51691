from kobana.models.charge_pix import AddressBody, ChargePixBody, PayerBody, WireModel
from kobana.models.pix_account import CreatePixAccountBody

__all__ = ["WireModel", "AddressBody", "PayerBody", "ChargePixBody", "CreatePixAccountBody"]
