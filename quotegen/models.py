from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


SHORT_MAX_CHARS = 20
MEDIUM_MAX_CHARS = 50


class LengthFilter(str, Enum):
	ALL = "all"
	SHORT = "short"
	MEDIUM = "medium"
	LARGE = "large"


class CreatorFilter(str, Enum):
	ALL = "all"
	POET = "poet"
	ENGINEER = "engineer"
	ARTIST = "artist"
	OTHER = "other"


class Quote(BaseModel):
	model_config = ConfigDict(frozen=True)

	text: str
	creator: CreatorFilter = CreatorFilter.ALL
	creator_name: str = ""


class RemoteQuote(BaseModel):
	model_config = ConfigDict(frozen=True)

	quote: str
	author: str


def length_bucket(text: str) -> LengthFilter:
	"""Classify text by character count into short, medium or large."""
	n = len(text)
	if n <= SHORT_MAX_CHARS:
		return LengthFilter.SHORT
	if n <= MEDIUM_MAX_CHARS:
		return LengthFilter.MEDIUM
	return LengthFilter.LARGE
