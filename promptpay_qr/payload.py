"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/payload.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Generates EMVCo compliant PromptPay payloads (Thai QR Payment,
                merchant presented mode) and wraps them into QR results.
                Reference: EMV QR Code Specification for Payment Systems,
                Merchant-Presented Mode.
------------------------------------------------------------------------------
"""

from pathlib import Path
from typing import Any, Optional, Union

from promptpay_qr.exceptions import InvalidMerchantId, MissingMerchantId
from promptpay_qr.logger import get_logger, log_payload_build
from promptpay_qr.models.payload import (
    MerchantIdentifier,
    PayloadConfig,
    PromptPayData,
    QRResult,
    RenderOptions,
    TransactionAmount,
)
from promptpay_qr.models.types import MerchantType, OutputFormat
from promptpay_qr.renderer import QRRenderer
from promptpay_qr.utils.crc import compute_crc, format_crc
from promptpay_qr.utils.tlv import decode_fields, encode_field
from promptpay_qr.validators import validate_merchant_id

logger = get_logger("payload")

# Field IDs (EMVCo)
TAG_FORMAT_INDICATOR = "00"
TAG_INITIATION_METHOD = "01"
TAG_MERCHANT_ACCOUNT = "29"
TAG_CURRENCY = "53"
TAG_AMOUNT = "54"
TAG_COUNTRY = "58"
TAG_CRC = "63"

PAYLOAD_FORMAT_VERSION = "01"
STATIC_QR = "11"
DYNAMIC_QR = "12"

# Application identifier of the PromptPay scheme (sub-field 00 of tag 29)
PROMPTPAY_AID = "A000000677010111"

IdentifierInput = Union[str, MerchantIdentifier]


def build_payload(
    identifier: IdentifierInput,
    amount: Any = None,
    config: Optional[PayloadConfig] = None
) -> str:
    """
    Generates the raw payload string for a PromptPay QR code.

    Args:
        identifier: Mobile number, tax ID or e-wallet ID (raw string or a
                    prepared MerchantIdentifier).
        amount: Optional amount in THB. None produces a static QR.
        config: Country/currency and whether to validate the identifier
                strictly. Defaults to PayloadConfig().

    Returns:
        The payload, terminated by the 4 hex digit CRC.

    Raises:
        MissingMerchantId: Identifier is empty or blank.
        InvalidMerchantId: Validation is enabled and the identifier is invalid,
                           or it is too long for the merchant account field.
        InvalidAmount: Amount outside (0, 999999999.99].
    """
    config = config or PayloadConfig()
    if not isinstance(identifier, MerchantIdentifier):
        identifier = MerchantIdentifier.from_raw(identifier or "")

    # 1. Validation
    if identifier.is_blank():
        logger.warning("Payload requested without merchant ID")
        raise MissingMerchantId()
    if config.validate_input:
        validate_merchant_id(identifier.raw)

    txn_amount = TransactionAmount.from_value(amount) if amount is not None else None

    # 2. Merchant Account Information (nested TLV)
    try:
        merchant_info = encode_field(
            TAG_MERCHANT_ACCOUNT,
            encode_field("00", PROMPTPAY_AID)
            + encode_field(identifier.merchant_type.tag, identifier.formatted)
        )
    except ValueError as e:
        logger.warning(f"Merchant ID does not fit into tag {TAG_MERCHANT_ACCOUNT}: {e}")
        raise InvalidMerchantId(identifier.raw) from e

    # 3. Construct Payload Fields
    fields = [
        encode_field(TAG_FORMAT_INDICATOR, PAYLOAD_FORMAT_VERSION),
        encode_field(TAG_INITIATION_METHOD, DYNAMIC_QR if txn_amount is not None else STATIC_QR),
        merchant_info,
        encode_field(TAG_COUNTRY, config.country_code),
        encode_field(TAG_CURRENCY, config.currency_code),
    ]
    if txn_amount is not None:
        fields.append(encode_field(TAG_AMOUNT, txn_amount.formatted))

    # 4. CRC over everything including its own tag and length
    fields.append(f"{TAG_CRC}04")
    data = "".join(fields)
    payload = data + format_crc(compute_crc(data))

    log_payload_build(payload, decode_fields(payload))
    return payload


class PromptPayQR:
    """
    Stateful generator for one recipient. Holds the identifier, an optional
    amount and the configuration, and produces payloads or rendered codes.

    Example:
        qr = PromptPayQR("0812345678").set_amount(100.50)
        payload = qr.generate_payload()
    """

    def __init__(
        self,
        merchant_id: str,
        config: Optional[PayloadConfig] = None,
        render_options: Optional[RenderOptions] = None
    ) -> None:
        self.identifier = MerchantIdentifier.from_raw(merchant_id or "")
        self.config = config or PayloadConfig()
        self.render_options = render_options or RenderOptions()
        self.amount: Optional[TransactionAmount] = None

    @classmethod
    def with_config(cls, merchant_id: str, config: PayloadConfig) -> "PromptPayQR":
        return cls(merchant_id, config=config)

    @property
    def merchant_id(self) -> str:
        return self.identifier.raw

    @property
    def merchant_type(self) -> MerchantType:
        """Length based merchant type (decides the payload tag)."""
        return self.identifier.merchant_type

    def set_amount(self, amount: Any) -> "PromptPayQR":
        """
        Sets the amount and switches to a dynamic QR.

        Raises:
            InvalidAmount: Amount outside (0, 999999999.99].
        """
        self.amount = TransactionAmount.from_value(amount)
        return self

    def clear_amount(self) -> "PromptPayQR":
        self.amount = None
        return self

    def validate(self) -> MerchantType:
        """Strictly validates the identifier and returns its resolved type."""
        return validate_merchant_id(self.identifier.raw)

    def generate_payload(self) -> str:
        return build_payload(self.identifier, self.amount, self.config)

    def to_data(self, payload: Optional[str] = None) -> PromptPayData:
        return PromptPayData(
            merchant_id=self.identifier.raw,
            merchant_type=self.merchant_type.label,
            amount=self.amount.value if self.amount is not None else None,
            country_code=self.config.country_code,
            currency_code=self.config.currency_code,
            payload=payload if payload is not None else self.generate_payload(),
        )

    def generate_qr(self, output_format: Union[OutputFormat, str] = OutputFormat.PAYLOAD) -> QRResult:
        """
        Builds the payload and the renderings requested by output_format.
        PNG and BASE64_PNG both fill png_base64; JSON and PAYLOAD carry
        no rendering.
        """
        fmt = output_format
        if not isinstance(fmt, OutputFormat):
            fmt = OutputFormat(str(fmt).strip().lower())
        payload = self.generate_payload()
        result = QRResult(payload=payload, merchant_info=self.to_data(payload))
        renderer = QRRenderer(self.render_options)

        if fmt in (OutputFormat.SVG, OutputFormat.ALL):
            result = result.with_svg(renderer.to_svg(payload))
        if fmt in (OutputFormat.PNG, OutputFormat.BASE64_PNG, OutputFormat.ALL):
            result = result.with_png_base64(renderer.to_base64_png(payload))
        if fmt in (OutputFormat.HTML, OutputFormat.ALL):
            result = result.with_html_img(renderer.to_html_img(payload))

        logger.info(f"Generated {fmt.value} QR for {self.merchant_type.label} recipient")
        return result

    def save_qr(self, file_path: Union[str, Path], file_format: str = "png") -> Path:
        """
        Renders and writes the QR code. file_format is 'png' or 'svg'.
        """
        renderer = QRRenderer(self.render_options)
        kind = file_format.strip().lower()
        if kind == "png":
            return renderer.save_png(self.generate_payload(), file_path)
        if kind == "svg":
            return renderer.save_svg(self.generate_payload(), file_path)
        raise ValueError(f"Unsupported file format: {file_format!r} (use 'png' or 'svg')")


def quick_generate(merchant_id: str, amount: Any = None) -> str:
    """One-shot payload generation with default settings."""
    return build_payload(merchant_id, amount)


def generate_with_svg(merchant_id: str, amount: Any = None) -> QRResult:
    """One-shot payload generation including an SVG rendering."""
    qr = PromptPayQR(merchant_id)
    if amount is not None:
        qr.set_amount(amount)
    return qr.generate_qr(OutputFormat.SVG)
