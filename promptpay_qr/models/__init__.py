"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/models/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Data models package: enumerations, identifier and amount value
                objects, configuration and result envelopes.
------------------------------------------------------------------------------
"""

from .types import MerchantType, CountryCode, CurrencyCode, OutputFormat
