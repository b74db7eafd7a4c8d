from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .models import CreatorFilter, Quote


SEED_QUOTES: Tuple[Quote, ...] = (
	Quote(
		text="The greatest glory in living lies not in never falling, but in rising every time we fall.",
		creator=CreatorFilter.POET,
		creator_name="Nelson Mandela",
	),
	Quote(
		text="The way to get started is to quit talking and begin doing.",
		creator=CreatorFilter.ENGINEER,
		creator_name="Walt Disney",
	),
	Quote(
		text="Your time is limited, don't waste it living someone else's life.",
		creator=CreatorFilter.ENGINEER,
		creator_name="Steve Jobs",
	),
	Quote(
		text="If life were predictable it would cease to be life, and be without flavor.",
		creator=CreatorFilter.ARTIST,
		creator_name="Eleanor Roosevelt",
	),
	Quote(
		text="Life is what happens when you're busy making other plans.",
		creator=CreatorFilter.ARTIST,
		creator_name="John Lennon",
	),
)


class QuoteStore:
	"""In-memory quote catalog for one session.

	Append-only: records are never edited or removed, and nothing is
	written to disk.
	"""

	def __init__(self, seed: Optional[Iterable[Quote]] = None):
		self.records: List[Quote] = list(SEED_QUOTES if seed is None else seed)

	def add(self, text: str, creator: CreatorFilter, creator_name: str) -> Quote:
		# No validation: empty text and names are accepted as-is
		rec = Quote(text=text, creator=CreatorFilter(creator), creator_name=creator_name)
		self.records.append(rec)
		return rec

	def list(self) -> Tuple[Quote, ...]:
		return tuple(self.records)

	def count(self) -> int:
		return len(self.records)
