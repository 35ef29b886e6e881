"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/utils/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Low level helpers: CRC engine, identifier normalization and
                the TLV field codec.
------------------------------------------------------------------------------
"""

from .crc import compute_crc, format_crc
from .identifier import sanitize, classify, format_identifier
from .tlv import encode_field, decode_fields, verify_payload
