import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from statusbot.config import Settings
from statusbot.subscriptions import SubscriptionRegistry


@pytest.fixture
def logger():
    return logging.getLogger("status_bot.tests")


@pytest.fixture
def registry(tmp_path, logger):
    return SubscriptionRegistry(tmp_path / "chat_ids.json", logger=logger)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        token="123:TEST",
        api_url="https://status.example/api",
        check_interval=10,
        chat_ids_file=tmp_path / "chat_ids.json",
    )


@pytest.fixture
def bot_context():
    """A stand-in for the job callback context with an async send_message."""
    context = MagicMock()
    context.application.bot.send_message = AsyncMock()
    return context


@pytest.fixture
def make_update():
    """Build a fake text-message update coming from ``chat_id``."""

    def factory(chat_id: int) -> MagicMock:
        update = MagicMock()
        update.effective_chat.id = chat_id
        update.message.reply_text = AsyncMock()
        return update

    return factory
