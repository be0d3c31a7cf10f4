"""pytest configuration and fixtures for pyqt-formbuilder tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def default_form_config():
    """Every test starts from the default configuration."""
    from pyqt_formbuilder.protocols import set_form_config

    set_form_config(None)
    yield
    set_form_config(None)
