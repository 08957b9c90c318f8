"""Configuration helpers for the Telegram bot."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from status_service import STATUS_API_URL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = logging.INFO
ENV_TOKEN_KEY = "TELEGRAM_BOT_TOKEN"
ENV_API_URL_KEY = "STATUS_API_URL"
ENV_INTERVAL_KEY = "STATUS_CHECK_INTERVAL"
ENV_CHAT_IDS_FILE_KEY = "CHAT_IDS_FILE"

CHECK_INTERVAL_SECONDS = 10.0
CHAT_IDS_FILE = "chat_ids.json"
REQUEST_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    token: str
    api_url: str = STATUS_API_URL
    check_interval: float = CHECK_INTERVAL_SECONDS
    chat_ids_file: Path = Path(CHAT_IDS_FILE)
    request_timeout: float = REQUEST_TIMEOUT_SECONDS


def setup_logging() -> logging.Logger:
    """Configure logging and return the package logger."""
    logging.basicConfig(format=LOG_FORMAT, level=LOG_LEVEL)
    # python-telegram-bot 的长轮询每次请求都会打 INFO 日志
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logging.getLogger("status_bot")


def load_bot_token(env_var: str = ENV_TOKEN_KEY) -> str:
    """Read the bot token from the environment or raise an error."""
    token = os.getenv(env_var)
    if not token:
        raise RuntimeError(f"环境变量 {env_var} 没有设置！")
    return token


def load_check_interval(env_var: str = ENV_INTERVAL_KEY) -> float:
    raw = os.getenv(env_var)
    if not raw:
        return CHECK_INTERVAL_SECONDS
    try:
        interval = float(raw)
    except ValueError:
        raise RuntimeError(f"环境变量 {env_var} 必须是数字，当前值: {raw!r}") from None
    if not interval > 0:
        raise RuntimeError(f"环境变量 {env_var} 必须大于 0，当前值: {raw!r}")
    return interval


def load_settings() -> Settings:
    """Build the runtime settings; only the token is mandatory."""
    return Settings(
        token=load_bot_token(),
        api_url=os.getenv(ENV_API_URL_KEY) or STATUS_API_URL,
        check_interval=load_check_interval(),
        chat_ids_file=Path(os.getenv(ENV_CHAT_IDS_FILE_KEY) or CHAT_IDS_FILE),
    )
