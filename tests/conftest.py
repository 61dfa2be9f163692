"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_dbc_loggers():
    """Reset dbc loggers after each test so configured handlers do not leak."""
    yield

    names = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name == "dbc" or name.startswith("dbc.")
    ]

    for name in names:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)
        logger.disabled = False


@pytest.fixture()
def violations(caplog):
    """Capture WARNING records emitted for contract violations."""
    caplog.set_level(logging.WARNING, logger="dbc")
    return caplog
