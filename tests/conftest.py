import pytest
from PyQt6.QtCore import QSettings, QStandardPaths

from promptpay_qr.config import AppConfig
from promptpay_qr.logger import reset_logging


@pytest.fixture(autouse=True, scope="session")
def isolated_standard_paths():
    """Keeps config/data locations away from the real user profile."""
    QStandardPaths.setTestModeEnabled(True)
    yield
    QStandardPaths.setTestModeEnabled(False)


@pytest.fixture(autouse=True)
def reset_app_logging():
    """Drops handlers and component levels installed by setup_logging()."""
    yield
    reset_logging()


@pytest.fixture
def app_config(tmp_path):
    """AppConfig backed by a throw-away INI file."""
    settings = QSettings(str(tmp_path / "promptpay-qr.conf"), QSettings.Format.IniFormat)
    settings.clear()

    config = AppConfig(profile="test")
    config.settings = settings
    config.get_data_dir = lambda: tmp_path
    return config


def pytest_configure(config):
    config.addinivalue_line("markers", "render: tests that produce real QR images")
