"""Background job callbacks for the Telegram bot."""

from __future__ import annotations

import asyncio
from typing import Callable

from telegram.ext import Application, ContextTypes

from status_service import ERROR_STATUS, fetch_status
from .config import Settings
from .notifier import notify_subscribers
from .subscriptions import SubscriptionRegistry


class JobHandlers:
    """Container for scheduled job callbacks."""

    def __init__(
        self,
        subscriptions: SubscriptionRegistry,
        settings: Settings,
        logger,
        fetch: Callable[..., str] = fetch_status,
    ) -> None:
        self._subscriptions = subscriptions
        self._settings = settings
        self._logger = logger
        self._fetch = fetch

    async def poll_status(self, context: ContextTypes.DEFAULT_TYPE) -> int:
        """Run one poll cycle and return the number of notifications attempted."""
        try:
            status = await asyncio.to_thread(
                self._fetch, self._settings.api_url, self._settings.request_timeout
            )
        except Exception:
            self._logger.exception("获取状态失败 url=%s", self._settings.api_url)
            return 0

        if status == ERROR_STATUS:
            self._logger.info("上游返回错误状态，本轮不推送")
            return 0

        chat_ids = self._subscriptions.snapshot()
        sent = await notify_subscribers(context.application.bot, status, chat_ids, self._logger)
        self._logger.debug("状态推送完成，共 %d 个 chat", sent)
        return sent


def register_jobs(application: Application, job_handlers: JobHandlers, settings: Settings, logger) -> None:
    job_queue = application.job_queue
    if job_queue is None:
        raise RuntimeError(
            "JobQueue 未启用，状态轮询不可用。请确认安装的是 "
            "python-telegram-bot[job-queue]>=20.0"
        )

    job_queue.run_repeating(
        job_handlers.poll_status,
        interval=settings.check_interval,
        first=0,
        name="status_poll",
    )
    logger.info("状态轮询已注册：每 %.0f 秒检查一次 %s", settings.check_interval, settings.api_url)
