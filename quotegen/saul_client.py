from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Union

import requests
from pydantic import TypeAdapter, ValidationError

from .config import AppConfig, DEFAULT_SAUL_QUOTES_URL
from .dispatch import UIDispatcher
from .errors import DecodeError, EmptyResponse, FetchError, TransportError
from .models import RemoteQuote


FetchOutcome = Union[RemoteQuote, FetchError]

_QUOTE_LIST = TypeAdapter(List[RemoteQuote])


class SaulClient:
	"""Client for the Better Call Saul quotes API.

	The endpoint returns a JSON array of ``{quote, author}`` objects; only the
	first one is used.
	"""

	def __init__(self, config: Optional[AppConfig] = None, session: Optional[requests.Session] = None):
		config = config or AppConfig()
		self.url = config.saul_quotes_url or DEFAULT_SAUL_QUOTES_URL
		self.timeout_seconds = config.saul_timeout_s
		self._session = session
		self._executor: Optional[ThreadPoolExecutor] = None

	def _get(self, url: str) -> requests.Response:
		if self._session is not None:
			return self._session.get(url, timeout=self.timeout_seconds)
		return requests.get(url, timeout=self.timeout_seconds)

	def fetch_one(self) -> RemoteQuote:
		"""Fetch the quote list once and return its first entry.

		Raises TransportError, DecodeError or EmptyResponse.
		"""
		try:
			resp = self._get(self.url)
			resp.raise_for_status()
		except requests.RequestException as e:
			raise TransportError(f"Could not reach the quotes API: {e}") from e
		quotes = self._parse(resp.content)
		if not quotes:
			raise EmptyResponse()
		return quotes[0]

	def _parse(self, body: bytes) -> List[RemoteQuote]:
		try:
			return _QUOTE_LIST.validate_json(body)
		except ValidationError as e:
			raise DecodeError(f"Failed to decode response: {e.error_count()} problem(s)") from e

	def _ensure_executor(self) -> ThreadPoolExecutor:
		if self._executor is None:
			self._executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="saul-fetch")
		return self._executor

	def fetch_one_async(
		self,
		on_done: Callable[[FetchOutcome], Any],
		dispatcher: UIDispatcher,
	) -> "Future[FetchOutcome]":
		"""Run ``fetch_one`` off the UI thread.

		``on_done`` receives the RemoteQuote or the FetchError and is run via
		``dispatcher``, never on the worker thread.
		"""

		def _work() -> FetchOutcome:
			try:
				outcome: FetchOutcome = self.fetch_one()
			except FetchError as e:
				print(f"[fetch-error] {type(e).__name__}: {e}")
				outcome = e
			dispatcher.post(on_done, outcome)
			return outcome

		return self._ensure_executor().submit(_work)

	def close(self) -> None:
		if self._executor is not None:
			self._executor.shutdown(wait=False)
			self._executor = None
