from docvault.clients.vault.VaultClientInterface import VaultClientInterface
from docvault.helper.HelperConfig import HelperConfig
from docvault.helper.InFlightGuard import InFlightGuard
from docvault.models.errors import ValidationError
from docvault.models.inputs import is_valid_mobile


class RegistrationService:
    """Registers a mobile number so it can receive login OTPs."""

    def __init__(self, helper_config: HelperConfig, vault_client: VaultClientInterface) -> None:
        self.logging = helper_config.get_logger()
        self._vault = vault_client
        self._guard = InFlightGuard()

    async def do_register(self, username: str, mobile_number: str) -> str | None:
        """
        Registers a user.

        Returns:
            str | None: The server's confirmation message, if any.

        Raises:
            ValidationError: If the username is blank or the number is not 10 digits.
            RemoteError: If the server refuses the registration.
        """
        username = (username or "").strip()
        if not username or not is_valid_mobile(mobile_number):
            raise ValidationError("Enter a username and valid 10-digit mobile number.")

        with self._guard.hold("register"):
            result = await self._vault.do_register(username, mobile_number)

        self.logging.info("Registered user %s", username)
        return result.message
