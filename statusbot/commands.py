"""Telegram command handlers."""

from __future__ import annotations

import asyncio

from telegram import Update
from telegram.ext import ContextTypes

from .subscriptions import SubscriptionRegistry

START_COMMAND = "/start"
STOP_COMMAND = "/stop"
SUBSCRIBED_TEXT = "Теперь вы будете получать уведомления о статусе консолей."
UNSUBSCRIBED_TEXT = "Вы больше не будете получать уведомления о статусе консолей."


class CommandHandlers:
    """Container for bot command callbacks."""

    def __init__(self, subscriptions: SubscriptionRegistry, logger) -> None:
        self._subscriptions = subscriptions
        self._logger = logger

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        self._subscriptions.add(chat_id)
        await asyncio.to_thread(self._subscriptions.persist)
        self._logger.info("chat_id=%s 已订阅状态推送", chat_id)
        await update.message.reply_text(SUBSCRIBED_TEXT)

    async def stop(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        chat_id = update.effective_chat.id
        self._subscriptions.discard(chat_id)
        await asyncio.to_thread(self._subscriptions.persist)
        self._logger.info("chat_id=%s 已取消状态推送", chat_id)
        await update.message.reply_text(UNSUBSCRIBED_TEXT)
