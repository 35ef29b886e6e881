"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/models/types.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized enumeration and type definitions.
------------------------------------------------------------------------------
"""

from enum import Enum
from typing import Optional


class MerchantType(str, Enum):
    """
    Kind of PromptPay recipient identifier.
    The first three members map to the sub-tag used inside the merchant
    account information field (tag 29). UNKNOWN is only produced by the
    strict, pattern based classifier.
    """
    MOBILE_NUMBER = "MOBILE_NUMBER"
    TAX_ID = "TAX_ID"
    EWALLET_ID = "EWALLET_ID"
    UNKNOWN = "UNKNOWN"

    @property
    def tag(self) -> str:
        """Returns the 2-character TLV tag ("01", "02" or "03")."""
        try:
            return _MERCHANT_TAGS[self]
        except KeyError:
            raise ValueError(f"Merchant type {self.value} has no payload tag") from None

    @property
    def label(self) -> str:
        """Human readable name."""
        return _MERCHANT_LABELS[self]


_MERCHANT_TAGS = {
    MerchantType.MOBILE_NUMBER: "01",
    MerchantType.TAX_ID: "02",
    MerchantType.EWALLET_ID: "03",
}

_MERCHANT_LABELS = {
    MerchantType.MOBILE_NUMBER: "Phone",
    MerchantType.TAX_ID: "Tax ID",
    MerchantType.EWALLET_ID: "E-Wallet",
    MerchantType.UNKNOWN: "Unknown",
}


class CountryCode(str, Enum):
    """ISO 3166-1 alpha-2 country codes. PromptPay is Thailand only."""
    THAILAND = "TH"

    @classmethod
    def from_str(cls, value: str) -> Optional["CountryCode"]:
        """Parses 'TH', 'th' or 'Thailand' (case-insensitive)."""
        key = str(value).strip().upper()
        if key in ("TH", "THAILAND"):
            return cls.THAILAND
        return None


class CurrencyCode(str, Enum):
    """ISO 4217 currencies, valued by their numeric code."""
    THB = "764"

    @property
    def numeric_code(self) -> str:
        return self.value

    @property
    def alphabetic_code(self) -> str:
        return self.name

    @classmethod
    def from_numeric(cls, value: str) -> Optional["CurrencyCode"]:
        key = str(value).strip()
        for member in cls:
            if member.value == key:
                return member
        return None

    @classmethod
    def from_alphabetic(cls, value: str) -> Optional["CurrencyCode"]:
        key = str(value).strip().upper()
        return cls.__members__.get(key)


class OutputFormat(str, Enum):
    """Output flavours offered by PromptPayQR.generate_qr()."""
    PAYLOAD = "payload"
    SVG = "svg"
    PNG = "png"
    BASE64_PNG = "base64png"
    HTML = "html"
    JSON = "json"
    ALL = "all"
