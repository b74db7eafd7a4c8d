from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel
from dotenv import load_dotenv


DEFAULT_SAUL_QUOTES_URL = "https://bcs-quotes.vercel.app/api/quotes"


class AppConfig(BaseModel):
	# Better Call Saul quotes API
	saul_quotes_url: str = DEFAULT_SAUL_QUOTES_URL
	saul_timeout_s: Optional[float] = 10

	# Settings (dark mode is the only persisted preference)
	settings_path: str = "quotegen_settings.json"
	dark_mode_default: bool = False

	@classmethod
	def load(cls) -> "AppConfig":
		# Load .env if present
		load_dotenv(override=False)

		timeout_raw = os.getenv("SAUL_TIMEOUT_S", "10").strip()
		return cls(
			saul_quotes_url=os.getenv("SAUL_QUOTES_URL", DEFAULT_SAUL_QUOTES_URL),
			# "0" or "none" disables the client-side timeout
			saul_timeout_s=None if timeout_raw.lower() in {"", "0", "none"} else float(timeout_raw),
			settings_path=os.getenv("SETTINGS_PATH", "quotegen_settings.json"),
			dark_mode_default=os.getenv("DARK_MODE_DEFAULT", "false").lower() == "true",
		)
