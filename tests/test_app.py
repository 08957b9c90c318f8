"""Tests for the application wiring: only the exact commands are routed."""

from datetime import datetime, timezone

import pytest
from telegram import Chat, Message, Update

from statusbot import create_application


def _update(text, edited=False):
    message = Message(
        message_id=1,
        date=datetime.now(timezone.utc),
        chat=Chat(id=111, type=Chat.PRIVATE),
        text=text,
    )
    if edited:
        return Update(update_id=1, edited_message=message)
    return Update(update_id=1, message=message)


@pytest.fixture
def application(settings, logger):
    return create_application(settings, logger)


def _matching_callbacks(application, update):
    return [
        handler.callback.__name__
        for handler in application.handlers[0]
        if handler.check_update(update)
    ]


def test_exact_commands_are_routed(application):
    assert _matching_callbacks(application, _update("/start")) == ["start"]
    assert _matching_callbacks(application, _update("/stop")) == ["stop"]


@pytest.mark.parametrize("text", ["/start now", "/START", " /stop", "/stop@status_bot", "hello"])
def test_other_text_is_ignored(application, text):
    assert _matching_callbacks(application, _update(text)) == []


def test_messages_without_text_are_ignored(application):
    assert _matching_callbacks(application, _update(None)) == []


def test_edited_messages_are_ignored(application):
    assert _matching_callbacks(application, _update("/start", edited=True)) == []
