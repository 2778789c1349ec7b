"""Persistence of the session token and user id across restarts."""

from abc import ABC, abstractmethod
import json
import logging
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from docvault.models.session import Session


class SessionStoreInterface(ABC):
    """Keeps the only state that survives a restart: the token and the user id."""

    @abstractmethod
    def load(self) -> Session:
        """Returns the stored session, or an empty one if nothing usable is stored."""
        pass

    @abstractmethod
    def save(self, session: Session) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass


class MemorySessionStore(SessionStoreInterface):
    def __init__(self, session: Session | None = None) -> None:
        self._data: dict | None = session.model_dump() if session and session.is_authenticated else None

    def load(self) -> Session:
        return Session(**self._data) if self._data else Session()

    def save(self, session: Session) -> None:
        self._data = session.model_dump() if session.is_authenticated else None

    def clear(self) -> None:
        self._data = None


class FileSessionStore(SessionStoreInterface):
    """Stores the session as a small JSON file, e.g. ~/.docvault/session.json."""

    def __init__(self, path: Path, logger: logging.Logger) -> None:
        self._path = Path(path)
        self.logging = logger

    def load(self) -> Session:
        if not self._path.exists():
            return Session()
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return Session.model_validate(json.load(f))
        except (json.JSONDecodeError, OSError, PydanticValidationError) as e:
            # a broken file must never yield a partial session
            self.logging.warning("Ignoring unreadable session file %s: %s", self._path, e)
            return Session()

    def save(self, session: Session) -> None:
        if not session.is_authenticated:
            self.clear()
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(session.model_dump(), f, indent=2)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
