import io
from collections.abc import Callable

import httpx
import pytest

from onfido.client import Client
from onfido.exceptions import OnfidoAPIError
from onfido.models import LivePhotoUploadRequest

APPLICANT_ID = "541d040b-89f8-444b-8921-16b1333bf1c6"
LIVE_PHOTO_ID = "7410a943-8f00-43d8-98de-36a774196d86"

MakeClient = Callable[[Callable[[httpx.Request], httpx.Response]], Client]


def _forbidden(request: httpx.Request) -> httpx.Response:
    return httpx.Response(403, content=b'{"error": "things went bad"}')


class TestUploadLivePhoto:
    def test_non_ok_response(self, make_client: MakeClient) -> None:
        request = LivePhotoUploadRequest(applicant_id=APPLICANT_ID, file=io.BytesIO(b"test"))

        with pytest.raises(OnfidoAPIError):
            make_client(_forbidden).live_photos.upload(request)

    def test_live_photo_uploaded(
        self, make_client: MakeClient, live_photo_payload: dict[str, object]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=live_photo_payload)

        photo = make_client(handler).live_photos.upload(
            LivePhotoUploadRequest(
                applicant_id=APPLICANT_ID,
                file=io.BytesIO(b"\xff\xd8\xff selfie"),
                advanced_validation=False,
            ),
            file_name="selfie.jpg",
        )

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v2/live_photos"
        assert b'filename="selfie.jpg"' in request.content
        assert b'name="applicant_id"\r\n\r\n' + APPLICANT_ID.encode() in request.content
        assert b'name="advanced_validation"\r\n\r\nfalse\r\n' in request.content
        assert photo.id == live_photo_payload["id"]
        assert photo.file_name == "selfie.jpg"

    def test_advanced_validation_defaults_to_true(
        self, make_client: MakeClient, live_photo_payload: dict[str, object]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=live_photo_payload)

        make_client(handler).live_photos.upload(
            LivePhotoUploadRequest(applicant_id=APPLICANT_ID, file=io.BytesIO(b"data"))
        )

        assert b'name="advanced_validation"\r\n\r\ntrue\r\n' in seen[0].content


class TestGetLivePhoto:
    def test_non_ok_response(self, make_client: MakeClient) -> None:
        with pytest.raises(OnfidoAPIError):
            make_client(_forbidden).live_photos.get(LIVE_PHOTO_ID)

    def test_live_photo_retrieved(
        self, make_client: MakeClient, live_photo_payload: dict[str, object]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=live_photo_payload)

        photo = make_client(handler).live_photos.get(LIVE_PHOTO_ID)

        assert seen[0].url.path == f"/v2/live_photos/{LIVE_PHOTO_ID}"
        assert photo.id == live_photo_payload["id"]
        assert photo.href == live_photo_payload["href"]
        assert photo.download_href == live_photo_payload["download_href"]
        assert photo.file_type == live_photo_payload["file_type"]
        assert photo.file_size == live_photo_payload["file_size"]


class TestDownloadLivePhoto:
    def test_downloads_raw_bytes(self, make_client: MakeClient) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=b"hello world")

        blob = make_client(handler).live_photos.download(LIVE_PHOTO_ID)

        assert seen[0].url.path == f"/v2/live_photos/{LIVE_PHOTO_ID}/download"
        assert blob.size == 11
        assert blob.content == b"hello world"


class TestListLivePhotos:
    def test_non_ok_response(self, make_client: MakeClient) -> None:
        it = make_client(_forbidden).live_photos.list(APPLICANT_ID)

        assert it.advance() is False
        assert it.err() is not None

    def test_live_photos_retrieved(
        self, make_client: MakeClient, live_photo_payload: dict[str, object]
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"live_photos": [live_photo_payload]})

        it = make_client(handler).live_photos.list(APPLICANT_ID)

        assert it.advance() is True
        assert it.current().id == live_photo_payload["id"]
        assert it.advance() is False
        assert it.err() is None
        assert seen[0].url.path == "/v2/live_photos"
        assert seen[0].url.params["applicant_id"] == APPLICANT_ID
