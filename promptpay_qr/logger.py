"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/logger.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Centralized logging for PromptPayQR. One 'promptpay_qr' root
                logger feeds stdout and an optional log file; components
                ('payload', 'renderer', ...) can be tuned individually and
                generated payloads can be dumped field by field.
------------------------------------------------------------------------------
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

APP_LOGGER_NAME = "promptpay_qr"

DEFAULT_FORMAT = "%(asctime)s [%(levelname).4s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LevelLike = Union[str, int]


def _parse_level(level: LevelLike) -> Optional[int]:
    """Maps 'debug', 'INFO', 20 ... to a logging level; None if unknown."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else None


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(str(log_path), encoding="utf-8"))

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def reset_logging() -> None:
    """
    Detaches and closes all handlers of the application root and clears
    every component level override.
    """
    root = logging.getLogger(APP_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)

    prefix = APP_LOGGER_NAME + "."
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith(prefix) and isinstance(logger, logging.Logger):
            logger.setLevel(logging.NOTSET)


def setup_logging(
    level: LevelLike = "WARNING",
    log_file: Optional[str] = None,
    component_levels: Optional[Dict[str, str]] = None
) -> None:
    """
    (Re)configures application logging. Calling it again replaces the
    previous handlers instead of stacking them.

    Args:
        level: Default level of the 'promptpay_qr' tree. Unknown names fall
               back to WARNING.
        log_file: Optional path of a UTF-8 log file; parent dirs are created.
        component_levels: Per component overrides, e.g. {"payload.raw": "DEBUG"}.
    """
    reset_logging()

    root = logging.getLogger(APP_LOGGER_NAME)
    root.setLevel(_parse_level(level) or logging.WARNING)
    for handler in _build_handlers(log_file):
        root.addHandler(handler)

    for component, cmp_level in (component_levels or {}).items():
        set_component_level(component, cmp_level)


def get_logger(name: str) -> logging.Logger:
    """Returns the component logger 'promptpay_qr.<name>'."""
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")


def set_component_level(component: str, level: LevelLike) -> bool:
    """
    Overrides the level of a single component.

    Returns:
        False if the level name is unknown (the component is left as is).
    """
    numeric_level = _parse_level(level)
    if numeric_level is None:
        get_logger("logger").warning(f"Ignoring unknown level {level!r} for component {component!r}")
        return False
    get_logger(component).setLevel(numeric_level)
    return True


def log_payload_build(payload: str, fields: Iterable[Tuple[str, str]]) -> None:
    """
    Dumps a generated payload and its decoded TLV fields on
    'promptpay_qr.payload.raw' (DEBUG only).
    """
    logger = get_logger("payload.raw")
    if not logger.isEnabledFor(logging.DEBUG):
        return

    lines = ["=== PAYLOAD START ===", payload]
    lines.extend(f"  {tag} ({len(value):02d}): {value}" for tag, value in fields)
    lines.append("=== PAYLOAD END ===")
    for line in lines:
        logger.debug(line)
