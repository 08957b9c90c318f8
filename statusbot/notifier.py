"""Fan-out of status updates to subscribed chats."""

from __future__ import annotations

from typing import Iterable

from telegram import Bot

STATUS_MESSAGE_TEMPLATE = "Статус изменился:\n{status}"


def format_status_message(status: str) -> str:
    return STATUS_MESSAGE_TEMPLATE.format(status=status)


async def notify_subscribers(bot: Bot, status: str, chat_ids: Iterable[int], logger) -> int:
    """Send ``status`` to every chat in ``chat_ids``.

    Each send is independent: a failure is logged and the loop moves on to
    the next chat. Returns the number of sends attempted.
    """
    message = format_status_message(status)
    attempted = 0
    for chat_id in chat_ids:
        attempted += 1
        try:
            await bot.send_message(chat_id=chat_id, text=message)
        except Exception:
            logger.exception("发送状态推送失败 chat_id=%s", chat_id)
    return attempted
