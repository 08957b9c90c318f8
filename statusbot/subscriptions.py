"""Thread-safe registry of chat IDs subscribed to status notifications."""

from __future__ import annotations

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Set


@dataclass
class SubscriptionRegistry:
    """Manage the chat IDs that receive status pushes.

    The mapping is ``chat_id -> True``; unsubscribing deletes the key. Every
    access goes through ``_lock`` so the job queue and command handlers can use
    the registry from different threads. The whole mapping is mirrored to
    ``path`` as a JSON object keyed by the decimal chat ID.
    """

    path: Path
    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("status_bot"), repr=False, compare=False
    )
    _subscribers: Dict[int, bool] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add(self, chat_id: int) -> None:
        with self._lock:
            self._subscribers[chat_id] = True

    def discard(self, chat_id: int) -> None:
        with self._lock:
            self._subscribers.pop(chat_id, None)

    def snapshot(self) -> Set[int]:
        with self._lock:
            return set(self._subscribers)

    def persist(self) -> bool:
        """Overwrite the file with the current mapping. Returns False on failure."""
        with self._lock:
            try:
                # 只写 true：从文件读入的旧 false 项不会被写回
                payload = json.dumps({str(chat_id): True for chat_id in self._subscribers})
                Path(self.path).write_text(payload, encoding="utf-8")
            except (OSError, TypeError, ValueError):
                self.logger.exception("保存订阅列表失败 path=%s", self.path)
                return False
        return True

    def load(self) -> bool:
        """Merge the saved mapping into memory.

        A missing file is a normal first start. A file that cannot be read or
        decoded is logged and ignored, leaving the in-memory state untouched.
        """
        path = Path(self.path)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return True
        except OSError:
            self.logger.exception("读取订阅列表失败 path=%s", path)
            return False

        try:
            loaded = _decode_subscribers(raw)
        except ValueError:
            self.logger.exception("解析订阅列表失败 path=%s", path)
            return False

        with self._lock:
            self._subscribers.update(loaded)
        self.logger.info("已加载 %d 个订阅 chat_id", len(loaded))
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __contains__(self, chat_id: object) -> bool:
        with self._lock:
            return chat_id in self._subscribers


def _decode_subscribers(raw: bytes) -> Dict[int, bool]:
    data = json.loads(raw.decode("utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")

    decoded: Dict[int, bool] = {}
    for key, flag in data.items():
        if not isinstance(flag, bool):
            raise ValueError(f"flag for {key!r} is not a boolean")
        decoded[int(key)] = flag
    return decoded
