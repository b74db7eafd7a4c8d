from __future__ import annotations

from typing import Iterable, NamedTuple, Optional, Tuple

from .errors import NO_NAME_MATCH
from .models import CreatorFilter, LengthFilter, Quote, length_bucket


class FilterResult(NamedTuple):
	quotes: Tuple[Quote, ...]
	warning: Optional[str] = None


def _name_matches(creator_name: str, query: str) -> bool:
	return query.casefold() in creator_name.casefold()


def filter_quotes(
	quotes: Iterable[Quote],
	length: LengthFilter = LengthFilter.ALL,
	creator: CreatorFilter = CreatorFilter.ALL,
	name_query: str = "",
) -> FilterResult:
	"""Return the quotes matching every active filter, in their original order.

	Each filter is skipped when set to ``all`` (or, for the name query, when
	empty). If a name query is given and nothing survives, the result carries
	the "no quotes found for the entered creator name" warning.
	"""
	length = LengthFilter(length)
	creator = CreatorFilter(creator)
	name_query = name_query or ""

	filtered = list(quotes)

	if length != LengthFilter.ALL:
		filtered = [q for q in filtered if length_bucket(q.text) == length]

	if creator != CreatorFilter.ALL:
		filtered = [q for q in filtered if q.creator == creator]

	warning: Optional[str] = None
	if name_query:
		filtered = [q for q in filtered if _name_matches(q.creator_name, name_query)]
		if not filtered:
			warning = NO_NAME_MATCH

	return FilterResult(tuple(filtered), warning)
