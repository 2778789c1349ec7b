from pydantic import BaseModel


class EnvConfig(BaseModel):
    """
    A single environment setting a client needs.

    Attributes:
        env_key (str): Key without the client prefix, e.g. "BASE_URL" for VAULT_ALLSOFT_BASE_URL.
        val_type (str): "string" or "number".
        default (str | int | float | None): Value used when unset. None makes the setting required.
    """

    env_key: str
    val_type: str
    default: str | int | float | None = None
