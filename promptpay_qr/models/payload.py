"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/models/payload.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Immutable value objects flowing through payload construction:
                MerchantIdentifier, TransactionAmount, PayloadConfig and
                RenderOptions, plus the PromptPayData / QRResult envelopes
                returned to callers.
------------------------------------------------------------------------------
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from promptpay_qr.exceptions import InvalidAmount, SerializationFailed
from promptpay_qr.logger import get_logger
from promptpay_qr.models.types import CountryCode, CurrencyCode, MerchantType
from promptpay_qr.utils.identifier import classify, format_identifier, sanitize

logger = get_logger("models")

MAX_AMOUNT = Decimal("999999999.99")
CENTS = Decimal("0.01")


class MerchantIdentifier(BaseModel):
    """
    A recipient identifier as supplied by the caller, together with its
    digits-only form and the length based merchant type.
    """
    model_config = ConfigDict(frozen=True)

    raw: str
    sanitized: str
    merchant_type: MerchantType

    @field_validator("sanitized")
    @classmethod
    def ensure_digits(cls, v: str) -> str:
        if v and not (v.isascii() and v.isdigit()):
            raise ValueError(f"Sanitized identifier must contain ASCII digits only: {v!r}")
        return v

    @classmethod
    def from_raw(cls, raw: str) -> "MerchantIdentifier":
        """Sanitizes and classifies a raw identifier string."""
        digits = sanitize(raw)
        return cls(raw=raw, sanitized=digits, merchant_type=classify(digits))

    @property
    def formatted(self) -> str:
        """The normalized value written into the payload."""
        return format_identifier(self.sanitized)

    def is_blank(self) -> bool:
        return not self.raw or not self.raw.strip()


class TransactionAmount(BaseModel):
    """
    Amount in THB. Valid range is (0, 999999999.99]; the payload carries it
    with exactly two fractional digits.
    """
    model_config = ConfigDict(frozen=True)

    value: Decimal

    @field_validator("value", mode="before")
    @classmethod
    def normalize_decimal(cls, v: Any) -> Decimal:
        """
        Normalizes numeric input from int, float, Decimal or strings such
        as "1,250.50 ฿".

        Floats go through their shortest repr, so 100.505 rounds half-up to
        "100.51" where formatting the binary float directly gives "100.50".
        """
        if isinstance(v, bool) or v is None:
            raise ValueError(f"Not a number: {v!r}")
        if isinstance(v, Decimal):
            return v
        if isinstance(v, (int, float)):
            return Decimal(str(v))
        if isinstance(v, str):
            clean = v.replace(",", "").replace("฿", "").replace("THB", "").strip()
            try:
                return Decimal(clean)
            except InvalidOperation:
                raise ValueError(f"Not a number: {v!r}") from None
        raise ValueError(f"Unsupported amount type: {type(v).__name__}")

    @field_validator("value")
    @classmethod
    def check_bounds(cls, v: Decimal) -> Decimal:
        # Bounds apply to the cent value written into the payload
        if not v.is_finite():
            raise ValueError(f"Amount {v} is not finite")
        if v <= 0 or v > MAX_AMOUNT + CENTS:
            raise ValueError(f"Amount {v} outside (0, {MAX_AMOUNT}]")
        rounded = v.quantize(CENTS, rounding=ROUND_HALF_UP)
        if not (Decimal("0") < rounded <= MAX_AMOUNT):
            raise ValueError(f"Amount {v} (rounded {rounded}) outside (0, {MAX_AMOUNT}]")
        return v

    @classmethod
    def from_value(cls, value: Any) -> "TransactionAmount":
        """
        Builds an amount from arbitrary caller input.

        Raises:
            InvalidAmount: If the value is unparseable or out of range.
        """
        if isinstance(value, TransactionAmount):
            return value
        try:
            return cls(value=value)
        except ValidationError as e:
            logger.warning(f"Rejected amount {value!r}: {e.errors()[0]['msg']}")
            raise InvalidAmount(value) from e

    @property
    def formatted(self) -> str:
        """Amount rounded half-up to two decimals, e.g. "100.50"."""
        return f"{self.value.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


class PayloadConfig(BaseModel):
    """
    Settings supplied once per payload build. Only Thailand / THB are
    accepted; aliases are normalized to the codes used on the wire.
    """
    model_config = ConfigDict(frozen=True)

    country_code: str = CountryCode.THAILAND.value
    currency_code: str = CurrencyCode.THB.numeric_code
    validate_input: bool = False

    @field_validator("country_code", mode="before")
    @classmethod
    def normalize_country(cls, v: Any) -> str:
        country = CountryCode.from_str(v)
        if country is None:
            raise ValueError(f"Unsupported country code: {v!r}")
        return country.value

    @field_validator("currency_code", mode="before")
    @classmethod
    def normalize_currency(cls, v: Any) -> str:
        currency = CurrencyCode.from_numeric(v) or CurrencyCode.from_alphabetic(v)
        if currency is None:
            raise ValueError(f"Unsupported currency code: {v!r}")
        return currency.numeric_code


class RenderOptions(BaseModel):
    """Appearance of the rendered QR code."""
    model_config = ConfigDict(frozen=True)

    size: int = Field(default=256, ge=21)
    dark_color: str = "#000000"
    light_color: str = "#FFFFFF"
    quiet_zone: int = Field(default=4, ge=0)
    error_correction: str = "M"

    @field_validator("error_correction", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> str:
        level = str(v).strip().upper()
        if level not in ("L", "M", "Q", "H"):
            raise ValueError(f"Unknown error correction level: {v!r}")
        return level


class PromptPayData(BaseModel):
    """Summary of a generated payload and the inputs it was built from."""

    merchant_id: str
    merchant_type: str
    amount: Optional[Decimal] = None
    country_code: str
    currency_code: str
    payload: str

    def to_json(self) -> str:
        try:
            return self.model_dump_json(indent=2)
        except (ValueError, TypeError) as e:
            raise SerializationFailed(str(e)) from e


class QRResult(BaseModel):
    """
    Output of PromptPayQR.generate_qr(). Only the renderings requested
    through the OutputFormat are populated.
    """
    model_config = ConfigDict(frozen=True)

    payload: str
    svg: Optional[str] = None
    png_base64: Optional[str] = None
    html_img: Optional[str] = None
    merchant_info: PromptPayData

    def with_svg(self, svg: str) -> "QRResult":
        return self.model_copy(update={"svg": svg})

    def with_png_base64(self, png_base64: str) -> "QRResult":
        return self.model_copy(update={"png_base64": png_base64})

    def with_html_img(self, html_img: str) -> "QRResult":
        return self.model_copy(update={"html_img": html_img})

    def to_json(self) -> str:
        try:
            return self.model_dump_json(indent=2)
        except (ValueError, TypeError) as e:
            raise SerializationFailed(str(e)) from e
