from __future__ import annotations

import random
from typing import NamedTuple, Optional, Sequence

from .errors import NoMatches, ONLY_ONE_MATCH
from .models import Quote


class Selection(NamedTuple):
	quote: Quote
	notice: Optional[str] = None


def select_quote(candidates: Sequence[Quote], rng: Optional[random.Random] = None) -> Selection:
	"""Pick one candidate uniformly at random.

	Raises NoMatches when there is nothing to pick from. A single candidate is
	still returned, paired with the "only one quote" notice.
	"""
	if not candidates:
		raise NoMatches()
	rand = rng or random
	idx = rand.randrange(len(candidates))
	notice = ONLY_ONE_MATCH if len(candidates) == 1 else None
	return Selection(candidates[idx], notice)
