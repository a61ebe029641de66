from onfido.client import Client
from onfido.config.settings import Settings
from onfido.logging.logger import Log
from onfido.sniffing.magic_adapter import MagicContentSniffer


class ClientFactory:
    """Creates a configured client from settings."""

    @classmethod
    def create(cls, settings: Settings) -> Client:
        """Configure logging and build a client.

        Raises:
            ValueError: if no API token is configured.
        """
        Log.configure(settings.log_level)
        token = settings.onfido_token.strip()
        if not token:
            raise ValueError("onfido_token is required to create an Onfido client")
        Log.info(f"Creating Onfido client for {settings.onfido_endpoint}")
        return Client(
            token=token,
            endpoint=settings.onfido_endpoint,
            timeout_seconds=settings.onfido_timeout_seconds,
            user_agent=settings.onfido_user_agent,
            sniffer=MagicContentSniffer(),
        )
