from __future__ import annotations


NO_MATCHES = "No quotes available for the selected criteria."
NO_NAME_MATCH = "No quotes found for the entered creator name."
ONLY_ONE_MATCH = "There is only one quote. Add more quotes."
NOTHING_TO_SHARE = "You first need to generate a quote!"


class QuoteError(Exception):
	"""Base class for every user-facing failure in quotegen.

	``str(exc)`` is the short message shown to the user.
	"""


class NoMatches(QuoteError):
	def __init__(self, message: str = NO_MATCHES):
		super().__init__(message)


class NothingToShare(QuoteError):
	def __init__(self, message: str = NOTHING_TO_SHARE):
		super().__init__(message)


class FetchError(QuoteError):
	pass


class TransportError(FetchError):
	pass


class DecodeError(FetchError):
	pass


class EmptyResponse(FetchError):
	def __init__(self, message: str = "The quotes API returned no quotes."):
		super().__init__(message)
