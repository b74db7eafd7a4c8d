from __future__ import annotations

from typing import Union

from .models import Quote, RemoteQuote


# Share targets hidden from the host share sheet
EXCLUDED_SHARE_TARGETS = (
	"add-to-reading-list",
	"open-in-ibooks",
	"markup-as-pdf",
)


def format_share_text(quote: Union[Quote, RemoteQuote]) -> str:
	if isinstance(quote, RemoteQuote):
		return f'"{quote.quote}" - {quote.author}'
	return f'"{quote.text}" - {quote.creator_name}'
