"""Session model: the bearer token and user identity used on authenticated calls."""

from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


class SessionState(str, Enum):
    ANONYMOUS = "anonymous"
    CHALLENGE_SENT = "challenge-sent"
    AUTHENTICATED = "authenticated"


class Session(BaseModel):
    """
    Authenticated-or-not state shared by reference with the search and upload services.

    Token and user id are always set together or not at all. Blank strings
    count as unset. establish() and clear() are the only mutation points.
    """

    token: str | None = None
    user_id: str | None = None

    @field_validator("token", "user_id", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _check_complete(self) -> "Session":
        if (self.token is None) != (self.user_id is None):
            raise ValueError("Session requires both token and user_id, or neither.")
        return self

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token) and bool(self.user_id)

    def establish(self, token: str, user_id: str) -> None:
        if not token or not token.strip() or not user_id or not user_id.strip():
            raise ValueError("Cannot establish a session without token and user_id.")
        self.token = token
        self.user_id = user_id

    def clear(self) -> None:
        self.token = None
        self.user_id = None
