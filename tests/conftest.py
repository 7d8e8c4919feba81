"""
Root pytest configuration file for jira-wrapper tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_library_loggers():
    """Keep logger changes made by a test from leaking into the next one."""
    loggers = [logging.getLogger(name) for name in ("jira-wrapper", "jira_wrapper")]
    saved = [(logger.level, logger.handlers[:]) for logger in loggers]
    yield
    for logger, (level, handlers) in zip(loggers, saved):
        logger.setLevel(level)
        logger.handlers[:] = handlers
