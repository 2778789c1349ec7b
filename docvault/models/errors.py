"""Error taxonomy shared by all DocVault services and clients."""


class VaultError(Exception):
    """Base class for every error raised by the DocVault core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(VaultError):
    """Client-side input failed an invariant. Never sent to the network."""


class AuthError(VaultError):
    """An authenticated operation was attempted without a session token."""

    def __init__(self, message: str = "You are not logged in. Please log in to continue.") -> None:
        super().__init__(message)


class RemoteError(VaultError):
    """
    The remote API rejected a call, returned a malformed body or could not be reached.

    Attributes:
        message (str): The server-supplied message, or a per-operation fallback.
        status_code (int | None): HTTP status of the response, None on transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OperationInProgressError(VaultError):
    """The same operation is already in flight."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Operation '{operation}' is already in progress.")
        self.operation = operation


class LoginCancelledError(VaultError):
    """The login was reset or logged out while a request was in flight; its result was dropped."""

    def __init__(self, message: str = "Login was cancelled.") -> None:
        super().__init__(message)
