"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/exceptions.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Typed error hierarchy. Input defects (identifier, amount) are
                ValueErrors; failures of the QR/image/JSON collaborators are
                reported with their own classes and never retried.
------------------------------------------------------------------------------
"""

from typing import Any


class PromptPayError(Exception):
    """Base class for every error raised by PromptPayQR."""


class MissingMerchantId(PromptPayError, ValueError):
    """The recipient identifier is empty or consists of whitespace only."""

    def __init__(self, message: str = "Merchant ID is required") -> None:
        super().__init__(message)


class InvalidMerchantId(PromptPayError, ValueError):
    """The recipient identifier matches none of the accepted shapes."""

    def __init__(self, merchant_id: str) -> None:
        self.merchant_id = merchant_id
        super().__init__(f"Invalid merchant ID: {merchant_id}")


class InvalidAmount(PromptPayError, ValueError):
    """The amount is not a number in the range (0, 999999999.99]."""

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__(f"Invalid amount: {amount}")


class QrGenerationFailed(PromptPayError):
    """The QR encoder could not turn the payload into a matrix."""


class ImageGenerationFailed(PromptPayError):
    """Raster encoding or writing the rendered image failed."""


class SerializationFailed(PromptPayError):
    """A result envelope could not be serialized to JSON."""
