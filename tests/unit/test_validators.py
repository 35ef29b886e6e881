"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           tests/unit/test_validators.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for strict identifier and amount validation.
------------------------------------------------------------------------------
"""

from decimal import Decimal

import pytest

from promptpay_qr.exceptions import InvalidAmount, InvalidMerchantId, MissingMerchantId
from promptpay_qr.models.payload import TransactionAmount
from promptpay_qr.models.types import MerchantType
from promptpay_qr.validators import (
    identify_merchant_type,
    is_valid_amount,
    is_valid_ewallet_id,
    is_valid_tax_id,
    is_valid_thai_phone,
    sanitize_phone,
    validate_amount,
    validate_merchant_id,
)

VALID_TAX_ID = "1103703685864"

# --- PHONE ---

@pytest.mark.parametrize("phone", [
    "0812345678",
    "0612345678",
    "0912345678",
    "66812345678",
    "+66 81 234 5678",
    "081-234-5678",
])
def test_valid_thai_phones(phone):
    assert is_valid_thai_phone(phone)


@pytest.mark.parametrize("phone", [
    "1234567890",
    "0212345678",      # Bangkok landline
    "081234567",       # too short
    "08123456789",     # too long
    "",
])
def test_invalid_thai_phones(phone):
    assert not is_valid_thai_phone(phone)


def test_sanitize_phone_converts_local_prefix():
    assert sanitize_phone("081-234-5678") == "66812345678"
    assert sanitize_phone("66812345678") == "66812345678"
    # Only 10-digit local numbers are converted
    assert sanitize_phone("021234567") == "021234567"


# --- TAX ID ---

def test_tax_id_with_valid_checksum():
    assert is_valid_tax_id(VALID_TAX_ID)
    assert is_valid_tax_id("1-1037-03685-86-4")
    assert is_valid_tax_id("1234567890121")


def test_tax_id_with_wrong_checksum():
    """Arbitrary digits rarely satisfy the weighted mod 11 formula."""
    assert not is_valid_tax_id("1234567890123")
    assert not is_valid_tax_id("1103703685865")


def test_tax_id_requires_13_digits():
    assert not is_valid_tax_id("110370368586")
    assert not is_valid_tax_id("11037036858640")


# --- E-WALLET ---

@pytest.mark.parametrize("ewallet,expected", [
    ("123456789012", False),
    ("1234567890123", True),
    ("12345678901234", True),
    ("123456789012345", True),
    ("1234567890123456", False),
])
def test_ewallet_length_range(ewallet, expected):
    assert is_valid_ewallet_id(ewallet) is expected


# --- AMOUNT ---

@pytest.mark.parametrize("amount", [100.50, 0.01, 1, "250.75", "1,250.50", "฿ 99", Decimal("999999999.99"), Decimal("0.005")])
def test_valid_amounts(amount):
    assert is_valid_amount(amount)


@pytest.mark.parametrize("amount", [0.0, 0, -10.0, 1000000000.0, Decimal("999999999.995"), "0.004", Decimal("0.001"), "abc", None, True, float("nan"), float("inf")])
def test_invalid_amounts(amount):
    assert not is_valid_amount(amount)


def test_validate_amount_returns_value_object():
    amount = validate_amount("100.5")
    assert isinstance(amount, TransactionAmount)
    assert amount.formatted == "100.50"


@pytest.mark.parametrize("amount", [
    "1,250.50", "THB 10", "0.004", "0.005", "999999999.994", "999999999.995", "-1", "", "12a",
])
def test_amount_predicate_agrees_with_validation(amount):
    try:
        validate_amount(amount)
        accepted = True
    except InvalidAmount:
        accepted = False
    assert is_valid_amount(amount) is accepted


def test_validate_amount_raises():
    with pytest.raises(InvalidAmount) as exc:
        validate_amount(-1)
    assert exc.value.amount == -1


# --- STRICT CLASSIFIER ---

@pytest.mark.parametrize("merchant_id,expected", [
    ("0812345678", MerchantType.MOBILE_NUMBER),
    ("+66-8-1234-5000", MerchantType.MOBILE_NUMBER),
    (VALID_TAX_ID, MerchantType.TAX_ID),
    ("1234567890123", MerchantType.EWALLET_ID),
    ("123456789012345", MerchantType.EWALLET_ID),
    ("1234567890", MerchantType.UNKNOWN),
    ("1234567890123456", MerchantType.UNKNOWN),
    ("", MerchantType.UNKNOWN),
])
def test_identify_merchant_type(merchant_id, expected):
    assert identify_merchant_type(merchant_id) == expected


def test_validate_merchant_id_success():
    assert validate_merchant_id("0812345678") == MerchantType.MOBILE_NUMBER
    assert validate_merchant_id(VALID_TAX_ID) == MerchantType.TAX_ID


@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_validate_merchant_id_missing(blank):
    with pytest.raises(MissingMerchantId):
        validate_merchant_id(blank)


def test_validate_merchant_id_invalid_carries_input():
    with pytest.raises(InvalidMerchantId) as exc:
        validate_merchant_id("1234567890")
    assert exc.value.merchant_id == "1234567890"
    assert "1234567890" in str(exc.value)


def test_errors_are_value_errors():
    """Callers that only know ValueError still catch input defects."""
    with pytest.raises(ValueError):
        validate_merchant_id("abc")
