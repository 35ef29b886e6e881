"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/utils/crc.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    CRC-16/CCITT-FALSE checksum used in the EMVCo CRC field (ID 63).
------------------------------------------------------------------------------
"""

from typing import Union

CRC_INITIAL = 0xFFFF
CRC_POLYNOMIAL = 0x1021


def compute_crc(data: Union[str, bytes]) -> int:
    """
    Calculates the CRC-16/CCITT checksum of a payload prefix.

    Polynomial 0x1021, initial value 0xFFFF, MSB first, no final XOR.

    Args:
        data: Payload including the "6304" marker but excluding the
              checksum itself. Strings are encoded as UTF-8.

    Returns:
        The 16-bit checksum as an int.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    crc = CRC_INITIAL
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ CRC_POLYNOMIAL) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def format_crc(value: int) -> str:
    """Renders a checksum as 4 uppercase, zero-padded hex digits."""
    return f"{value & 0xFFFF:04X}"
