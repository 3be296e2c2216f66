"""Pytest configuration and shared fixtures."""
from dataclasses import replace

import pytest

from wastebot.config import Settings
from wastebot.engines import ASSISTANT, SUPPORT_DESK

# Short enough to keep the suite quick, long enough to send twice before a reply fires
FAST_DELAY = 0.05


@pytest.fixture
def fast_assistant():
    return replace(ASSISTANT, reply_delay=FAST_DELAY)


@pytest.fixture
def fast_support():
    return replace(SUPPORT_DESK, reply_delay=FAST_DELAY)


@pytest.fixture
def settings():
    return Settings(tables_path=None, log_level="WARNING")


@pytest.fixture
def tables_csv(tmp_path):
    """Write a small override sheet and return its path."""
    path = tmp_path / "tables.csv"
    path.write_text(
        "Mode,Keyword,Response\n"
        "support,Password,Use the reset link on the sign-in page.\n"
        "support,login,Login problems are handled by the ward office.\n"
        "support,default,A support agent will get back to you.\n"
        ",,\n"
        "issue,bug,\"Thanks!\nWe logged the bug.\"\n"
        "issue,default,Issue noted.\n",
        encoding="utf-8",
    )
    return str(path)
