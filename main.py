"""Entry point for the console status Telegram bot."""

from __future__ import annotations

from telegram import Update

from statusbot import create_application
from statusbot.config import load_settings, setup_logging


def main() -> None:
    logger = setup_logging()
    settings = load_settings()

    application = create_application(settings, logger)

    logger.info("🤖 Bot 已启动，开始轮询 Telegram 消息...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
