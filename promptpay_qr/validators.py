"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/validators.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Strict validation of PromptPay inputs: Thai mobile numbers,
                13-digit tax IDs (mod 11 checksum), e-wallet IDs and amounts.
                Provides the pattern based merchant classifier used when a
                caller asks for validated payloads.
------------------------------------------------------------------------------
"""

import re
from typing import Any

from promptpay_qr.exceptions import InvalidAmount, InvalidMerchantId, MissingMerchantId
from promptpay_qr.logger import get_logger
from promptpay_qr.models.payload import TransactionAmount
from promptpay_qr.models.types import MerchantType
from promptpay_qr.utils.identifier import sanitize

logger = get_logger("validators")

THAI_PHONE_PATTERN = re.compile(r"^(0[689]\d{8}|66[689]\d{8})$")
TAX_ID_LENGTH = 13
EWALLET_LENGTH_RANGE = (13, 15)


def sanitize_phone(phone: str) -> str:
    """
    Strips non-digits and converts a local 10-digit number ("08...") into
    its international form ("668...").
    """
    cleaned = sanitize(phone)
    if cleaned.startswith("0") and len(cleaned) == 10:
        cleaned = "66" + cleaned[1:]
    return cleaned


def is_valid_thai_phone(phone: str) -> bool:
    """
    Checks for a Thai mobile number (06x/08x/09x), local or with the 66 prefix.
    """
    if not phone:
        return False
    return bool(THAI_PHONE_PATTERN.match(sanitize_phone(phone)))


def is_valid_tax_id(tax_id: str) -> bool:
    """
    Validates a 13-digit Thai tax / citizen ID.

    The first 12 digits are weighted 13 down to 2; the check digit is
    (11 - sum mod 11) mod 10 and must equal the 13th digit.

    Args:
        tax_id: The ID, separators allowed.

    Returns:
        True if the ID has 13 digits and a matching check digit.
    """
    digits = sanitize(tax_id)
    if len(digits) != TAX_ID_LENGTH:
        return False

    total = sum(int(d) * (TAX_ID_LENGTH - i) for i, d in enumerate(digits[:12]))
    checksum = (11 - (total % 11)) % 10
    return checksum == int(digits[12])


def is_valid_ewallet_id(ewallet_id: str) -> bool:
    """E-wallet IDs carry between 13 and 15 digits."""
    low, high = EWALLET_LENGTH_RANGE
    return low <= len(sanitize(ewallet_id)) <= high


def is_valid_amount(amount: Any) -> bool:
    """
    Checks that the amount would be accepted by the payload builder:
    parseable (including "1,250.50 ฿" style strings) and within
    (0, 999999999.99] once rounded to cents.
    """
    try:
        TransactionAmount.from_value(amount)
    except InvalidAmount:
        return False
    return True


def identify_merchant_type(merchant_id: str) -> MerchantType:
    """
    Pattern based classification. Unlike the length based classifier
    this can answer UNKNOWN.

    Precedence: mobile pattern, then tax ID checksum, then e-wallet length.
    """
    if is_valid_thai_phone(merchant_id):
        return MerchantType.MOBILE_NUMBER
    if is_valid_tax_id(merchant_id):
        return MerchantType.TAX_ID
    if is_valid_ewallet_id(merchant_id):
        return MerchantType.EWALLET_ID
    return MerchantType.UNKNOWN


def validate_merchant_id(merchant_id: str) -> MerchantType:
    """
    Validates a merchant identifier.

    Returns:
        The resolved (strict) merchant type.

    Raises:
        MissingMerchantId: The identifier is empty or blank.
        InvalidMerchantId: The identifier matches no accepted shape.
    """
    if not merchant_id or not merchant_id.strip():
        raise MissingMerchantId()

    merchant_type = identify_merchant_type(merchant_id)
    if merchant_type is MerchantType.UNKNOWN:
        logger.warning(f"Rejected merchant ID {merchant_id!r}")
        raise InvalidMerchantId(merchant_id)

    logger.debug(f"Merchant ID {merchant_id!r} resolved as {merchant_type.label}")
    return merchant_type


def validate_amount(amount: Any) -> TransactionAmount:
    """
    Raises InvalidAmount unless the amount is within (0, 999999999.99].
    """
    return TransactionAmount.from_value(amount)
