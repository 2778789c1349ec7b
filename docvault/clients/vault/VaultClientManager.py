from docvault.helper.HelperConfig import HelperConfig
from docvault.clients.vault.VaultClientInterface import VaultClientInterface

DEFAULT_ENGINE = "allsoft"


class VaultClientManager:
    """
    Resolves the vault backend named in the configuration to a client instance.
    """

    def __init__(self, helper_config: HelperConfig):
        self.helper_config = helper_config
        self.logging = helper_config.get_logger()
        self.client = self._initialize_client()

    def _get_engine_from_env(self) -> str:
        """
        Reads the vault engine name from VAULT_ENGINE, capitalized for class lookup.

        Raises:
            ValueError: If the configured engine name is blank.
        """
        engine = self.helper_config.get_string_val("VAULT_ENGINE", default=DEFAULT_ENGINE).strip().lower()
        if not engine:
            raise ValueError("No vault engine specified in configuration.")
        return engine.capitalize()

    def _initialize_client(self) -> VaultClientInterface:
        """
        Imports docvault.clients.vault.<engine>.VaultClient<Engine> and instantiates it.

        Raises:
            ValueError: If the engine is not supported.
        """
        engine = self._get_engine_from_env()
        className = f"VaultClient{engine}"
        try:
            module = __import__(
                f"docvault.clients.vault.{engine.lower()}.{className}",
                fromlist=[className],
            )
            client_class = getattr(module, className)
        except (ImportError, AttributeError) as e:
            raise ValueError(f"Unsupported vault engine specified: '{engine}'. Error: {e}")
        self.logging.debug(f"Instantiated vault client for engine: {engine}")
        return client_class(helper_config=self.helper_config)

    def get_client(self) -> VaultClientInterface:
        return self.client
