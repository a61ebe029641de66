from types import TracebackType

import httpx

from onfido.documents import Documents
from onfido.live_photos import LivePhotos
from onfido.sniffing.base import BaseContentSniffer
from onfido.transport import HttpTransport

DEFAULT_ENDPOINT = "https://api.onfido.com/v2/"
DEFAULT_USER_AGENT = "onfido-python/0.1.0"


class Client:
    """Onfido API client.

    Holds one connection pool; the endpoint and token never change after
    construction, so one instance may serve many callers.
    """

    def __init__(
        self,
        *,
        token: str,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout_seconds: float = 30,
        user_agent: str = DEFAULT_USER_AGENT,
        sniffer: BaseContentSniffer,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._transport = HttpTransport(
            token=token,
            endpoint=endpoint,
            timeout_seconds=timeout_seconds,
            user_agent=user_agent,
            transport=transport,
        )
        self.documents = Documents(self._transport, sniffer)
        self.live_photos = LivePhotos(self._transport, sniffer)

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
