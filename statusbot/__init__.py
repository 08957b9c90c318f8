"""Console status watcher bot for Telegram."""

from .app import create_application

__all__ = ["create_application"]
