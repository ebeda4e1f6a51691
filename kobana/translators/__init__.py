from kobana.translators.base import BaseTranslator
from kobana.translators.charge_pix import ChargePixTranslator
from kobana.translators.create_pix_account import CreatePixAccountTranslator

__all__ = ["BaseTranslator", "ChargePixTranslator", "CreatePixAccountTranslator"]
