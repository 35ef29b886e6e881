"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/__init__.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Core package for PromptPayQR. Builds EMVCo compliant PromptPay
                payload strings (TLV + CRC-16), validates recipient identifiers
                and hands finished payloads to the QR renderer.
------------------------------------------------------------------------------
"""

__version__ = "1.0.0"
