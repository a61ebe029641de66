from collections.abc import Callable, Generator

import httpx
import pytest

from onfido.client import Client
from onfido.sniffing.static_adapter import StaticContentSniffer

TEST_ENDPOINT = "https://api.onfido.test/v2/"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture()
def document_payload() -> dict[str, object]:
    """A document object as the API returns it."""
    return {
        "id": "ce62d838-56f8-4ea5-98be-e7166d1dc33d",
        "created_at": "2019-10-09T16:52:42Z",
        "href": "/v2/applicants/541d040b/documents/ce62d838",
        "download_href": "/v2/applicants/541d040b/documents/ce62d838/download",
        "file_name": "localfile.png",
        "file_type": "png",
        "file_size": 282123,
        "type": "passport",
        "side": "back",
        "issuing_country": "GBR",
    }


@pytest.fixture()
def live_photo_payload() -> dict[str, object]:
    """A live photo object as the API returns it."""
    return {
        "id": "7410a943-8f00-43d8-98de-36a774196d86",
        "created_at": "2019-10-09T16:59:06Z",
        "href": "/v2/live_photos/7410a943-8f00-43d8-98de-36a774196d86",
        "download_href": "/v2/live_photos/7410a943-8f00-43d8-98de-36a774196d86/download",
        "file_name": "selfie.jpg",
        "file_type": "jpg",
        "file_size": 1024,
    }


@pytest.fixture()
def make_client() -> Generator[Callable[[Handler], Client], None, None]:
    """Build clients whose HTTP traffic is answered by a handler function."""
    clients: list[Client] = []

    def _make(handler: Handler) -> Client:
        client = Client(
            token="test-token",
            endpoint=TEST_ENDPOINT,
            sniffer=StaticContentSniffer("image/png"),
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
