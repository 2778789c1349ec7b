"""Decoded responses of the unauthenticated vault endpoints."""

from pydantic import BaseModel


class RegistrationResponse(BaseModel):
    """
    Represents a successful user registration.
    """
    engine: str
    message: str | None = None


class ChallengeResponse(BaseModel):
    """
    Represents a successfully sent OTP challenge.
    """
    engine: str
    message: str | None = None


class TokenResponse(BaseModel):
    """
    Represents a successful OTP validation. user_id is None when the server omits it.
    """
    engine: str
    token: str
    user_id: str | None = None
