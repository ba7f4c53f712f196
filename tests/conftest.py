from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the engine attaches so streams never outlive a test."""
    yield
    package_logger = logging.getLogger("content_importer")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
