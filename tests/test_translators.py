# tests/test_translators.py

import copy

import pytest

from kobana.translators.charge_pix import ChargePixTranslator
from kobana.translators.create_pix_account import CreatePixAccountTranslator
from kobana.utils.errors import ValidationFailed

from tests.conftest import VALID_CPF, VALID_UUID


def test_charge_pix_translation_applies_defaults(valid_payload):
    body = ChargePixTranslator(valid_payload).call()

    assert body == {
        "amount": 100.5,
        "payer": {
            "document_number": VALID_CPF,
            "name": "John Doe",
            "email": "test@example.com",
        },
        "pix_account_uid": VALID_UUID,
        "external_id": "external-123",
        "expire_at": "2024-12-31T23:59:59Z",
        "registration_kind": "instant",
        "reduction_type": 0,
        "interest_type": 0,
    }


def test_absent_fields_are_omitted(valid_payload):
    """Campos não informados não aparecem no corpo (nem como null)."""
    body = ChargePixTranslator(valid_payload).call()

    for field in ("txid", "revoke_days", "message", "fine_type", "tags", "custom_data"):
        assert field not in body
    assert "address" not in body["payer"]


def test_explicit_values_override_defaults(billing_payload):
    billing_payload.update({
        "reduction_type": 1,
        "reduction_amount": 5,
        "interest_type": 2,
        "interest_percentage": "1.5",
        "fine_type": 2,
        "fine_percentage": 2,
        "txid": "tx123",
        "revoke_days": 3,
        "message": "Pagamento do pedido 42",
        "custom_data": {"order_id": 42},
        "tags": ("vip", "mensal"),
    })
    body = ChargePixTranslator(billing_payload).call()

    assert body["registration_kind"] == "billing"
    assert body["reduction_type"] == 1
    assert body["reduction_amount"] == 5
    assert body["interest_type"] == 2
    assert body["interest_percentage"] == "1.5"
    assert body["fine_percentage"] == 2
    assert body["txid"] == "tx123"
    assert body["revoke_days"] == 3
    assert body["custom_data"] == {"order_id": 42}
    assert body["tags"] == ["vip", "mensal"]
    assert body["payer"]["address"]["state"] == "SP"
    assert body["payer"]["address"]["zip_code"] == "12345678"


def test_partial_address_keeps_only_given_fields(valid_payload):
    valid_payload["payer"]["address"] = {"street": "Rua A", "complement": "Apto 12"}
    body = ChargePixTranslator(valid_payload).call()

    assert body["payer"]["address"] == {"street": "Rua A", "complement": "Apto 12"}


def test_numeric_text_fields_are_sent_as_strings(valid_payload):
    valid_payload["payer"]["document_number"] = 57345658570
    valid_payload["external_id"] = 123

    body = ChargePixTranslator(valid_payload).call()

    assert body["payer"]["document_number"] == VALID_CPF
    assert body["external_id"] == "123"


def test_translation_does_not_mutate_payload(billing_payload):
    snapshot = copy.deepcopy(billing_payload)
    ChargePixTranslator(billing_payload).call()
    assert billing_payload == snapshot


def test_non_mapping_payload_translates_to_defaults_only():
    assert ChargePixTranslator(None).call() == {"registration_kind": "instant", "reduction_type": 0, "interest_type": 0}


def test_untranslatable_value_raises_validation_failed(valid_payload):
    valid_payload["external_id"] = {"id": 1}

    with pytest.raises(ValidationFailed) as exc_info:
        ChargePixTranslator(valid_payload).call()

    assert exc_info.value.errors[0].startswith("external_id")


def test_create_pix_account_defaults():
    """Payload vazio recebe todos os defaults da conta."""
    assert CreatePixAccountTranslator({}).call() == {
        "custom_name": "Conta principal",
        "financial_provider_slug": "example_bank",
        "key": "keyexample@email.com",
        "enabled": True,
        "default": True,
    }


def test_create_pix_account_uses_given_values():
    body = CreatePixAccountTranslator({
        "custom_name": "Conta Principal",
        "provider_slug": "banco_x",
        "key": "pix@empresa.com.br",
        "enabled": False,
        "default": False,
    }).call()

    assert body == {
        "custom_name": "Conta Principal",
        "financial_provider_slug": "banco_x",
        "key": "pix@empresa.com.br",
        "enabled": False,
        "default": False,
    }


def test_create_pix_account_ignores_financial_provider_slug_key():
    """O slug do provedor vem de 'provider_slug' no payload do cliente."""
    body = CreatePixAccountTranslator({"financial_provider_slug": "banco_y"}).call()
    assert body["financial_provider_slug"] == "example_bank"
