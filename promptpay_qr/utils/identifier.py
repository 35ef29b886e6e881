"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/utils/identifier.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Sanitizing, length based classification and normalization of
                PromptPay recipient identifiers.
------------------------------------------------------------------------------
"""

import re

from promptpay_qr.models.types import MerchantType

# Normalized identifiers shorter than this are padded with leading zeros
TARGET_LENGTH = 13
EWALLET_MIN_LENGTH = 15
THAI_COUNTRY_PREFIX = "66"

_NON_DIGITS = re.compile(r"[^0-9]")


def sanitize(raw: str) -> str:
    """
    Removes every character that is not an ASCII digit.

    Args:
        raw: Raw identifier, e.g. "+66-8-123-4567".

    Returns:
        The digits in their original order, e.g. "6681234567".
    """
    if not raw:
        return ""
    return _NON_DIGITS.sub("", raw)


def classify(digits: str) -> MerchantType:
    """
    Infers the merchant type from the digit count alone.
    Always succeeds: >= 15 digits is an e-wallet, >= 13 a tax ID,
    everything shorter a mobile number.
    """
    length = len(sanitize(digits))
    if length >= EWALLET_MIN_LENGTH:
        return MerchantType.EWALLET_ID
    if length >= TARGET_LENGTH:
        return MerchantType.TAX_ID
    return MerchantType.MOBILE_NUMBER


def format_identifier(digits: str) -> str:
    """
    Normalizes a sanitized identifier for the payload.

    Tax and e-wallet IDs (13+ digits) pass through unchanged. Shorter values
    are treated as phone numbers: a leading '0' becomes the country prefix
    '66', then the result is left-padded with zeros to 13 characters.
    Padding never truncates.

    Example:
        "0812345678" -> "0066812345678"
    """
    if len(digits) >= TARGET_LENGTH:
        return digits
    if digits.startswith("0"):
        digits = THAI_COUNTRY_PREFIX + digits[1:]
    return digits.rjust(TARGET_LENGTH, "0")
