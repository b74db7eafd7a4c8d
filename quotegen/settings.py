from __future__ import annotations

import json
from typing import Optional

from filelock import FileLock

from .config import AppConfig


class SettingsStore:
	"""Key-value preferences kept in a small JSON file.

	Only the dark-mode flag lives here. Reads never fail: a missing or
	unreadable file yields the configured default.
	"""

	def __init__(self, path: Optional[str] = None, default_dark_mode: bool = False):
		self.path = path or "quotegen_settings.json"
		self.default_dark_mode = default_dark_mode

	@classmethod
	def from_config(cls, config: AppConfig) -> "SettingsStore":
		return cls(config.settings_path, default_dark_mode=config.dark_mode_default)

	def _lock(self) -> FileLock:
		return FileLock(self.path + ".lock")

	def _read(self) -> dict:
		try:
			with self._lock(), open(self.path, "r", encoding="utf-8") as f:
				data = json.load(f)
				if isinstance(data, dict):
					return data
		except FileNotFoundError:
			pass
		except (OSError, ValueError) as e:
			print(f"[settings-error] Could not read {self.path}: {e}")
		return {}

	def _write(self, data: dict) -> None:
		try:
			with self._lock(), open(self.path, "w", encoding="utf-8") as f:
				json.dump(data, f)
		except OSError as e:
			print(f"[settings-error] Could not write {self.path}: {e}")

	@property
	def dark_mode(self) -> bool:
		val = self._read().get("is_dark_mode")
		if isinstance(val, bool):
			return val
		return self.default_dark_mode

	@dark_mode.setter
	def dark_mode(self, value: bool) -> None:
		data = self._read()
		data["is_dark_mode"] = bool(value)
		self._write(data)
