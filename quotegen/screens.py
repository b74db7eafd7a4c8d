from __future__ import annotations

import random
import threading
from concurrent.futures import Future
from typing import Optional, Tuple

from .dispatch import UIDispatcher
from .errors import FetchError, NoMatches, NothingToShare
from .filters import filter_quotes
from .models import CreatorFilter, LengthFilter, Quote, RemoteQuote
from .quote_store import QuoteStore
from .saul_client import FetchOutcome, SaulClient
from .selector import select_quote
from .share import format_share_text


NO_QUOTE_PLACEHOLDER = "No Quote Generated"
SAUL_PLACEHOLDER = "Tap the button to generate a quote"


class HomeScreen:
	"""Display state for the home page: filters, current quote and messages.

	Changing any filter goes through a setter that recomputes the matching
	quotes and the creator-name warning straight away.
	"""

	def __init__(self, store: Optional[QuoteStore] = None, rng: Optional[random.Random] = None):
		self.store = store or QuoteStore()
		self.rng = rng
		self._length = LengthFilter.ALL
		self._creator = CreatorFilter.ALL
		self._creator_name = ""
		self.quote: Optional[Quote] = None
		self.error_message: Optional[str] = None
		self.name_message: Optional[str] = None
		self.matches: Tuple[Quote, ...] = ()
		self.refresh()

	@property
	def length(self) -> LengthFilter:
		return self._length

	@length.setter
	def length(self, value: LengthFilter) -> None:
		self._length = LengthFilter(value)
		self.refresh()

	@property
	def creator(self) -> CreatorFilter:
		return self._creator

	@creator.setter
	def creator(self, value: CreatorFilter) -> None:
		self._creator = CreatorFilter(value)
		self.refresh()

	@property
	def creator_name(self) -> str:
		return self._creator_name

	@creator_name.setter
	def creator_name(self, value: str) -> None:
		self._creator_name = value or ""
		self.refresh()

	def refresh(self) -> Tuple[Quote, ...]:
		result = filter_quotes(self.store.list(), self._length, self._creator, self._creator_name)
		self.matches = result.quotes
		self.name_message = result.warning
		return self.matches

	def generate(self) -> Optional[Quote]:
		"""Pick a random matching quote, or set the error message.

		The previously shown quote stays on screen when nothing matches.
		"""
		try:
			selection = select_quote(self.matches, rng=self.rng)
		except NoMatches as e:
			self.error_message = str(e)
			return None
		self.quote = selection.quote
		self.error_message = selection.notice
		return self.quote

	def add_quote(self, text: str, creator: CreatorFilter, creator_name: str) -> Quote:
		rec = self.store.add(text, creator, creator_name)
		self.refresh()
		return rec

	def share(self) -> str:
		if self.quote is None:
			exc = NothingToShare()
			self.error_message = str(exc)
			raise exc
		return format_share_text(self.quote)

	def display_text(self) -> str:
		if self.quote is None:
			return NO_QUOTE_PLACEHOLDER
		return format_share_text(self.quote)


class SaulScreen:
	"""Display state for the Better Call Saul page.

	Fetch results arrive through the dispatcher. Once the screen is closed,
	late results are dropped.
	"""

	def __init__(self, client: SaulClient, dispatcher: UIDispatcher):
		self.client = client
		self.dispatcher = dispatcher
		self.quote: Optional[RemoteQuote] = None
		self.error_message: Optional[str] = None
		self._closed = threading.Event()

	@property
	def closed(self) -> bool:
		return self._closed.is_set()

	def fetch(self) -> "Future[FetchOutcome]":
		# Repeated taps each start their own request
		return self.client.fetch_one_async(self._on_fetched, self.dispatcher)

	def _on_fetched(self, outcome: FetchOutcome) -> None:
		if self.closed:
			return
		if isinstance(outcome, FetchError):
			self.error_message = str(outcome)
			return
		self.quote = outcome
		self.error_message = None

	def close(self) -> None:
		self._closed.set()

	def display_lines(self) -> Tuple[str, ...]:
		if self.quote is None:
			return (SAUL_PLACEHOLDER,)
		return (f'"{self.quote.quote}"', f"- {self.quote.author}")
