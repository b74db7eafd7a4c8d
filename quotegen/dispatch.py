from __future__ import annotations

import queue
from concurrent.futures import Future, wait
from typing import Any, Callable, Optional, Tuple


class UIDispatcher:
	"""Hands work from background threads to the single UI thread.

	``post`` is safe to call from any thread and only enqueues. Queued
	callables run when the UI thread calls ``drain``.
	"""

	def __init__(self):
		self._queue: "queue.Queue[Tuple[Callable[..., Any], tuple]]" = queue.Queue()

	def post(self, fn: Callable[..., Any], *args: Any) -> None:
		self._queue.put((fn, args))

	def pending(self) -> int:
		return self._queue.qsize()

	def drain(self, timeout: Optional[float] = None) -> int:
		"""Run queued callables on the calling thread; return how many ran.

		With a timeout, waits up to that long for the first item when the
		queue is empty.
		"""
		ran = 0
		block = timeout is not None
		while True:
			try:
				fn, args = self._queue.get(block=block and ran == 0, timeout=timeout if ran == 0 else None)
			except queue.Empty:
				return ran
			fn(*args)
			ran += 1

	def wait_and_drain(self, future: Future, timeout: Optional[float] = None) -> int:
		# The completion callback is posted before the future resolves
		wait([future], timeout=timeout)
		return self.drain()
