"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/config.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Manages application configuration using QSettings. Standardizes
                paths for configuration and data across different platforms
                (XDG standards on Linux) and converts stored values into the
                immutable PayloadConfig / RenderOptions models.
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Optional

from PyQt6.QtCore import QSettings, QStandardPaths

from promptpay_qr.models.payload import PayloadConfig, RenderOptions


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    # Keys (Simple names, groups handled in methods)
    KEY_VALIDATE_INPUT: str = "validate_input"
    KEY_COUNTRY_CODE: str = "country_code"
    KEY_CURRENCY_CODE: str = "currency_code"
    KEY_QR_SIZE: str = "qr_size"
    KEY_QR_DARK_COLOR: str = "qr_dark_color"
    KEY_QR_LIGHT_COLOR: str = "qr_light_color"
    KEY_QR_QUIET_ZONE: str = "qr_quiet_zone"
    KEY_QR_ERROR_CORRECTION: str = "qr_error_correction"
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"

    # Defaults
    DEFAULT_VALIDATE_INPUT: bool = True
    DEFAULT_COUNTRY_CODE: str = "TH"
    DEFAULT_CURRENCY_CODE: str = "764"
    DEFAULT_QR_SIZE: int = 256
    DEFAULT_QR_DARK_COLOR: str = "#000000"
    DEFAULT_QR_LIGHT_COLOR: str = "#FFFFFF"
    DEFAULT_QR_QUIET_ZONE: int = 4
    DEFAULT_QR_ERROR_CORRECTION: str = "M"
    DEFAULT_LOG_LEVEL: str = "WARNING"

    APP_ID: str = "promptpay-qr"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'shop').
                    If provided, all paths and settings will be isolated (e.g. promptpay-qr-dev).
        """
        # If no profile provided, use the last active one (Global Singleton-like)
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_config_dir(self) -> Path:
        """
        Returns the path to the application configuration directory.
        Forces a flat structure: ~/.config/promptpay-qr[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
        config_dir = Path(base_path) / self.active_id
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/promptpay-qr[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def get_validate_input(self) -> bool:
        """
        Whether identifiers are strictly validated before building.
        INI files hand booleans back as strings.
        """
        val = self._get_setting("Payload", self.KEY_VALIDATE_INPUT, self.DEFAULT_VALIDATE_INPUT)
        if isinstance(val, str):
            return val.strip().lower() in ("1", "true", "yes", "on")
        return bool(val)

    def set_validate_input(self, enabled: bool) -> None:
        self._set_setting("Payload", self.KEY_VALIDATE_INPUT, bool(enabled))

    def get_country_code(self) -> str:
        return str(self._get_setting("Payload", self.KEY_COUNTRY_CODE, self.DEFAULT_COUNTRY_CODE))

    def set_country_code(self, code: str) -> None:
        self._set_setting("Payload", self.KEY_COUNTRY_CODE, code)

    def get_currency_code(self) -> str:
        return str(self._get_setting("Payload", self.KEY_CURRENCY_CODE, self.DEFAULT_CURRENCY_CODE))

    def set_currency_code(self, code: str) -> None:
        self._set_setting("Payload", self.KEY_CURRENCY_CODE, code)

    def get_qr_size(self) -> int:
        """Retrieves the rendered QR edge length in pixels."""
        return int(self._get_setting("Render", self.KEY_QR_SIZE, self.DEFAULT_QR_SIZE))

    def set_qr_size(self, size: int) -> None:
        self._set_setting("Render", self.KEY_QR_SIZE, int(size))

    def get_qr_dark_color(self) -> str:
        return str(self._get_setting("Render", self.KEY_QR_DARK_COLOR, self.DEFAULT_QR_DARK_COLOR))

    def set_qr_dark_color(self, color: str) -> None:
        self._set_setting("Render", self.KEY_QR_DARK_COLOR, color)

    def get_qr_light_color(self) -> str:
        return str(self._get_setting("Render", self.KEY_QR_LIGHT_COLOR, self.DEFAULT_QR_LIGHT_COLOR))

    def set_qr_light_color(self, color: str) -> None:
        self._set_setting("Render", self.KEY_QR_LIGHT_COLOR, color)

    def get_qr_quiet_zone(self) -> int:
        """Retrieves the border width in modules."""
        return int(self._get_setting("Render", self.KEY_QR_QUIET_ZONE, self.DEFAULT_QR_QUIET_ZONE))

    def set_qr_quiet_zone(self, modules: int) -> None:
        self._set_setting("Render", self.KEY_QR_QUIET_ZONE, int(modules))

    def get_qr_error_correction(self) -> str:
        """Retrieves the QR error correction level (L, M, Q, H)."""
        return str(self._get_setting("Render", self.KEY_QR_ERROR_CORRECTION, self.DEFAULT_QR_ERROR_CORRECTION))

    def set_qr_error_correction(self, level: str) -> None:
        self._set_setting("Render", self.KEY_QR_ERROR_CORRECTION, level.upper())

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> dict:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return parsed if isinstance(parsed, dict) else {}

    def set_log_components(self, components: dict) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"

    def get_payload_config(self) -> PayloadConfig:
        """
        Builds the immutable payload configuration from stored settings.

        Raises:
            pydantic.ValidationError: If a stored country/currency is unsupported.
        """
        return PayloadConfig(
            country_code=self.get_country_code(),
            currency_code=self.get_currency_code(),
            validate_input=self.get_validate_input(),
        )

    def get_render_options(self) -> RenderOptions:
        """Builds the immutable QR appearance options from stored settings."""
        return RenderOptions(
            size=self.get_qr_size(),
            dark_color=self.get_qr_dark_color(),
            light_color=self.get_qr_light_color(),
            quiet_zone=self.get_qr_quiet_zone(),
            error_correction=self.get_qr_error_correction(),
        )
