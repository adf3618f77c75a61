from __future__ import annotations
import threading
import time
from typing import Callable, Optional

from cachetools import TTLCache


class ResponseCache:
	"""Answers keyed by the exact trimmed question, each expiring a fixed TTL after insertion.

	Expired entries read as misses; a new ``set`` for the same question replaces the
	entry and restarts its TTL. ``TTLCache`` is not thread-safe, so every access holds
	the lock.
	"""

	def __init__(self, ttl_seconds: float = 3600, *, maxsize: int = 10000, timer: Callable[[], float] = time.monotonic) -> None:
		self.ttl_seconds = ttl_seconds
		self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl_seconds, timer=timer)
		self._lock = threading.Lock()

	def get(self, question: str) -> Optional[str]:
		with self._lock:
			return self._entries.get(question)

	def set(self, question: str, answer: str) -> None:
		with self._lock:
			# Delete first so the replacement gets a fresh expiry
			self._entries.pop(question, None)
			self._entries[question] = answer

	def purge(self) -> None:
		with self._lock:
			self._entries.expire()

	def clear(self) -> None:
		with self._lock:
			self._entries.clear()

	def __len__(self) -> int:
		with self._lock:
			self._entries.expire()
			return len(self._entries)
