"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/utils/tlv.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    EMVCo tag-length-value helpers: field encoding, decoding of a
                flat payload string and CRC verification.
------------------------------------------------------------------------------
"""

from typing import List, Tuple

from promptpay_qr.utils.crc import compute_crc, format_crc

CRC_TAG = "63"
CRC_LENGTH = 4
MAX_VALUE_LENGTH = 99


def encode_field(tag: str, value: str) -> str:
    """
    Encodes one field as <2-digit tag><2-digit length><value>.

    Raises:
        ValueError: If the tag is not two digits or the value exceeds
                    the 2-digit length prefix.
    """
    if len(tag) != 2 or not tag.isdigit():
        raise ValueError(f"Invalid TLV tag: {tag!r}")
    if len(value) > MAX_VALUE_LENGTH:
        raise ValueError(f"Tag {tag} value too long: {len(value)} chars (max {MAX_VALUE_LENGTH})")
    return f"{tag}{len(value):02d}{value}"


def decode_fields(payload: str) -> List[Tuple[str, str]]:
    """
    Splits a flat TLV string into (tag, value) pairs, keeping their order.
    Nested fields (e.g. tag 29) are returned as raw values; call this
    function again on the value to descend.

    Raises:
        ValueError: On truncated or malformed input.
    """
    fields: List[Tuple[str, str]] = []
    i = 0
    while i < len(payload):
        header = payload[i:i + 4]
        if len(header) < 4:
            raise ValueError(f"Truncated TLV header at position {i}")
        tag, length_str = header[:2], header[2:]
        if not length_str.isdigit():
            raise ValueError(f"Tag {tag} has a non-numeric length {length_str!r}")
        length = int(length_str)
        start = i + 4
        if start + length > len(payload):
            raise ValueError(
                f"Tag {tag} claims length {length} but only "
                f"{len(payload) - start} chars remain"
            )
        fields.append((tag, payload[start:start + length]))
        i = start + length
    return fields


def verify_payload(payload: str) -> bool:
    """
    Checks that a payload ends with a CRC field whose value matches the
    checksum of everything before it.
    """
    if len(payload) < 4 + CRC_LENGTH:
        return False
    prefix, checksum = payload[:-CRC_LENGTH], payload[-CRC_LENGTH:]
    if not prefix.endswith(f"{CRC_TAG}{CRC_LENGTH:02d}"):
        return False
    return format_crc(compute_crc(prefix)) == checksum.upper()
