"""Session service: OTP login, logout and ownership of the Session object.

States:
  anonymous --request challenge--> challenge-sent --submit response--> authenticated
  challenge-sent --reset--> anonymous
  any --logout--> anonymous
"""

from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.helper.HelperConfig import HelperConfig
from docvault.helper.InFlightGuard import InFlightGuard
from docvault.models.errors import LoginCancelledError, ValidationError
from docvault.models.inputs import is_valid_mobile, is_valid_otp
from docvault.models.session import Session, SessionState
from docvault.storage.SessionStore import SessionStoreInterface


class SessionService:
    """Drives the OTP challenge protocol and owns the authenticated Session."""

    def __init__(
        self,
        helper_config: HelperConfig,
        vault_client: VaultClientInterface,
        session_store: SessionStoreInterface,
    ) -> None:
        self.logging = helper_config.get_logger()
        self._vault = vault_client
        self._store = session_store
        self._guard = InFlightGuard()

        self._session = self._store.load()
        self._state = SessionState.AUTHENTICATED if self._session.is_authenticated else SessionState.ANONYMOUS
        self._mobile_number: str | None = None
        # bumped by reset/logout; results of calls started before are dropped
        self._generation = 0

    ##########################################
    ################ GETTER ##################
    ##########################################

    @property
    def session(self) -> Session:
        """The session object handed to the search and upload services."""
        return self._session

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def mobile_number(self) -> str | None:
        """The number the pending challenge was sent to."""
        return self._mobile_number

    def is_busy(self) -> bool:
        return self._guard.is_running("request_challenge") or self._guard.is_running("submit_response")

    ##########################################
    ################ CORE ####################
    ##########################################

    async def do_request_challenge(self, mobile_number: str) -> str | None:
        """
        Sends an OTP to the given number. Calling it again from challenge-sent resends the OTP.

        Args:
            mobile_number (str): Exactly 10 digits.

        Returns:
            str | None: The server's confirmation message, if any.

        Raises:
            ValidationError: If the number is not 10 digits or a session is already active.
            RemoteError: If the server rejects the request. The state is unchanged.
            OperationInProgressError: If a challenge request is already in flight.
            LoginCancelledError: If reset() or logout() ran while the request was in flight.
        """
        if not is_valid_mobile(mobile_number):
            raise ValidationError("Please enter a valid 10-digit mobile number")
        if self._state == SessionState.AUTHENTICATED:
            raise ValidationError("Already logged in. Log out before requesting a new OTP.")

        generation = self._generation
        with self._guard.hold("request_challenge"):
            challenge = await self._vault.do_request_otp(mobile_number)
        if generation != self._generation:
            raise LoginCancelledError()

        self._mobile_number = mobile_number
        self._state = SessionState.CHALLENGE_SENT
        self.logging.info("OTP sent to mobile number ending in %s", mobile_number[-4:])
        return challenge.message

    async def do_submit_response(self, otp: str) -> Session:
        """
        Exchanges the OTP for a session token and persists the new session.

        Args:
            otp (str): Exactly 6 digits.

        Returns:
            Session: The established session.

        Raises:
            ValidationError: If the OTP is not 6 digits or no challenge was sent.
            RemoteError: If the server rejects the OTP or returns no token. The state stays challenge-sent.
            OperationInProgressError: If a validation is already in flight.
            LoginCancelledError: If reset() or logout() ran while the OTP was being verified.
        """
        if not is_valid_otp(otp):
            raise ValidationError("Please enter a valid 6-digit OTP")
        if self._state != SessionState.CHALLENGE_SENT or self._mobile_number is None:
            raise ValidationError("Request an OTP before submitting one.")

        mobile_number = self._mobile_number
        generation = self._generation
        with self._guard.hold("submit_response"):
            result = await self._vault.do_validate_otp(mobile_number, otp)
        if generation != self._generation:
            raise LoginCancelledError()

        self._session.establish(token=result.token, user_id=result.user_id or mobile_number)
        self._store.save(self._session)
        self._state = SessionState.AUTHENTICATED
        self._mobile_number = None
        self.logging.info("Login successful for user %s", self._session.user_id)
        return self._session

    def reset(self) -> None:
        """Abandons a pending challenge ("change number")."""
        self._generation += 1
        if self._state == SessionState.CHALLENGE_SENT:
            self._state = SessionState.ANONYMOUS
        self._mobile_number = None

    def logout(self) -> None:
        """Clears the session and its persisted copy, whatever the current state."""
        self._generation += 1
        self._session.clear()
        self._store.clear()
        self._state = SessionState.ANONYMOUS
        self._mobile_number = None
        self.logging.info("Logged out")
