"""Environment-backed settings for the DocVault client."""

import logging
import os
from pathlib import Path


class HelperConfig:
    """Reads DocVault settings from environment variables and hands out the shared logger."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def _read_raw(self, key: str, default):
        """Returns the stripped value of key, default when it is unset or blank.

        Raises:
            ValueError: If the variable is unset and default is None.
        """
        key = key.upper()
        raw = (os.getenv(key) or "").strip()
        if raw:
            return raw
        if default is None:
            raise ValueError(f"Environment variable '{key}' is not set.")
        return default

    def get_string_val(self, key: str, default: str | None = None) -> str:
        """Read a string setting, e.g. VAULT_ENGINE or VAULT_ALLSOFT_BASE_URL."""
        return self._read_raw(key, default)

    def get_number_val(self, key: str, default: float | int | None = None) -> float | int:
        """Read a numeric setting, e.g. VAULT_TIMEOUT.

        Raises:
            ValueError: If the variable is required and unset, or not a number.
        """
        raw = self._read_raw(key, default)
        if not isinstance(raw, str):
            return raw
        try:
            return int(raw) if "." not in raw else float(raw)
        except ValueError:
            raise ValueError(f"Environment variable '{key.upper()}' is not a valid number: '{raw}'.")

    def get_root_dir(self) -> Path:
        """ROOT_DIR, defaults to the working directory. Logs and the session file live below it."""
        return Path(self.get_string_val("ROOT_DIR", default=os.getcwd()))

    def get_session_file(self) -> Path:
        """SESSION_FILE, defaults to <ROOT_DIR>/.docvault/session.json."""
        default = str(self.get_root_dir() / ".docvault" / "session.json")
        return Path(self.get_string_val("SESSION_FILE", default=default))

    def get_logger(self) -> logging.Logger:
        return self._logger
