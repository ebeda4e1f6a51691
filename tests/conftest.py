# tests/conftest.py

import copy

import pytest

from kobana.config.settings import settings
from kobana.rules.charge_pix.validator import ChargePixValidator

TEST_API_KEY = "test-api-key"
VALID_UUID = "550e8400-e29b-41d4-a716-446655440000"
VALID_CPF = "57345658570"
VALID_CNPJ = "85528357806099"

_VALID_PAYLOAD = {
    "amount": 100.50,
    "payer": {
        "document_number": VALID_CPF,
        "name": "John Doe",
        "email": "test@example.com",
    },
    "pix_account_uid": VALID_UUID,
    "expire_at": "2024-12-31T23:59:59Z",
    "external_id": "external-123",
}

_BILLING_ADDRESS = {
    "street": "Rua das Flores",
    "zip_code": "12345678",
    "number": "100",
    "neighborhood": "Centro",
    "city_name": "São Paulo",
    "state": "SP",
}


@pytest.fixture
def valid_payload():
    """Payload mínimo de cobrança PIX válido (cópia nova a cada teste)."""
    return copy.deepcopy(_VALID_PAYLOAD)


@pytest.fixture
def billing_address():
    """Endereço completo, aceito para registration_kind 'billing'."""
    return dict(_BILLING_ADDRESS)


@pytest.fixture
def billing_payload(valid_payload, billing_address):
    valid_payload["registration_kind"] = "billing"
    valid_payload["payer"]["address"] = billing_address
    return valid_payload


@pytest.fixture
def validator():
    return ChargePixValidator()


@pytest.fixture
def api_key(monkeypatch):
    """Configura a API Key global e o ambiente sandbox apenas durante o teste."""
    monkeypatch.setattr(settings, "KOBANA_API_KEY", TEST_API_KEY)
    monkeypatch.setattr(settings, "KOBANA_ENV", "development")
    return TEST_API_KEY


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.setattr(settings, "KOBANA_API_KEY", None)
