"""Application factory for the Telegram bot."""

from __future__ import annotations

from telegram.ext import Application, ContextTypes, MessageHandler, filters

from .commands import START_COMMAND, STOP_COMMAND, CommandHandlers
from .config import Settings
from .jobs import JobHandlers, register_jobs
from .subscriptions import SubscriptionRegistry


def create_application(settings: Settings, logger) -> Application:
    """Create and configure the Telegram application."""
    subscriptions = SubscriptionRegistry(settings.chat_ids_file, logger=logger)
    subscriptions.load()

    handlers = CommandHandlers(subscriptions, logger)
    job_handlers = JobHandlers(subscriptions, settings, logger)

    async def post_init(application: Application) -> None:
        me = await application.bot.get_me()
        logger.info("Authorized on account %s", me.username)

    async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
        logger.error("处理更新时出错 update=%s", update, exc_info=context.error)

    application = Application.builder().token(settings.token).post_init(post_init).build()

    # 只认完整的 "/start" 和 "/stop"，不接受参数或 @botname 后缀
    messages = filters.UpdateType.MESSAGE
    application.add_handler(MessageHandler(messages & filters.Text([START_COMMAND]), handlers.start))
    application.add_handler(MessageHandler(messages & filters.Text([STOP_COMMAND]), handlers.stop))
    application.add_error_handler(on_error)

    register_jobs(application, job_handlers, settings, logger)

    return application
