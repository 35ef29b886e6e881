"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           main.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Command line entry point. Loads the profile configuration,
                sets up logging and prints or saves a PromptPay payload /
                QR code for the given recipient.
------------------------------------------------------------------------------
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from promptpay_qr.config import AppConfig
from promptpay_qr.exceptions import PromptPayError
from promptpay_qr.logger import get_logger, setup_logging
from promptpay_qr.models.payload import PayloadConfig
from promptpay_qr.models.types import OutputFormat
from promptpay_qr.payload import PromptPayQR

EXIT_OK = 0
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptpay-qr",
        description="PromptPayQR - EMVCo PromptPay payload and QR code generator"
    )
    parser.add_argument("merchant_id", help="Mobile number, tax ID or e-wallet ID")
    parser.add_argument("-a", "--amount", type=str, default=None, help="Amount in THB (omit for a static QR)")
    parser.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=OutputFormat.PAYLOAD.value,
        help="What to print (default: payload)"
    )
    parser.add_argument("-o", "--output", type=str, default=None, help="Write a .png or .svg file instead of printing")
    parser.add_argument("--no-validate", action="store_true", help="Skip strict identifier validation")
    parser.add_argument("-P", "--profile", type=str, help="Application profile for isolation (e.g. 'dev', 'shop')")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    return parser


def render_output(qr: PromptPayQR, fmt: OutputFormat) -> str:
    """
    Produces the text printed for a given output format.
    """
    if fmt == OutputFormat.PAYLOAD:
        return qr.generate_payload()

    result = qr.generate_qr(fmt)
    if fmt == OutputFormat.SVG:
        return result.svg or ""
    if fmt in (OutputFormat.PNG, OutputFormat.BASE64_PNG):
        return result.png_base64 or ""
    if fmt == OutputFormat.HTML:
        return result.html_img or ""
    return result.to_json()


def main(argv: Optional[List[str]] = None) -> int:
    """
    PromptPayQR Entry Point.
    """
    args = build_parser().parse_args(argv)

    app_config = AppConfig(profile=args.profile)

    setup_logging(
        level=args.log_level or app_config.get_log_level(),
        log_file=str(app_config.get_log_file_path()),
        component_levels=app_config.get_log_components()
    )
    logger = get_logger("cli")
    logger.info(f"PromptPayQR started (Profile: {args.profile or 'default'})")

    try:
        stored = app_config.get_payload_config()
        render_options = app_config.get_render_options()
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration (profile: {args.profile or 'default'}): {e}")
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        config = PayloadConfig(
            country_code=stored.country_code,
            currency_code=stored.currency_code,
            validate_input=stored.validate_input and not args.no_validate,
        )
        qr = PromptPayQR(args.merchant_id, config=config, render_options=render_options)
        if args.amount is not None:
            qr.set_amount(args.amount)

        if args.output:
            kind = "svg" if args.output.lower().endswith(".svg") else "png"
            path = qr.save_qr(args.output, kind)
            print(path)
        else:
            print(render_output(qr, OutputFormat(args.format)))
    except PromptPayError as e:
        logger.error(f"Generation failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
