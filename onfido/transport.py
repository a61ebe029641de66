import json
from typing import Any, BinaryIO

import httpx

from onfido.decoders import load_object
from onfido.exceptions import OnfidoAPIError, OnfidoTimeoutError, OnfidoTransportError
from onfido.logging.logger import Log
from onfido.multipart import MultipartBody
from onfido.pagination import Page

_Timeout = float | None


class HttpTransport:
    """Authenticated HTTP access to the Onfido API built on httpx.

    Every call is a single round trip: no retries, no backoff.
    """

    def __init__(
        self,
        *,
        token: str,
        endpoint: str,
        timeout_seconds: float,
        user_agent: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        Log.mask(token)
        self._client = httpx.Client(
            base_url=endpoint,
            timeout=timeout_seconds,
            transport=transport,
            headers={
                "Authorization": f"Token token={token}",
                "Accept": "application/json",
                "User-Agent": user_agent,
            },
        )

    def close(self) -> None:
        self._client.close()

    def send(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        multipart: MultipartBody | None = None,
        timeout: _Timeout = None,
    ) -> httpx.Response:
        """Send a request and return the successful response.

        Args:
            method: HTTP method.
            path: Path joined onto the endpoint, or an absolute URL.
            json_body: Optional JSON request body.
            multipart: Optional pre-encoded multipart body.
            timeout: Seconds before the call is abandoned; client default when None.

        Raises:
            OnfidoAPIError: on a non-2xx status.
            OnfidoTimeoutError: if the call times out.
            OnfidoTransportError: on any other network failure.
        """
        headers: dict[str, str] = {}
        content: bytes | None = None
        if multipart is not None:
            headers["Content-Type"] = multipart.content_type
            content = multipart.content
        elif json_body is not None:
            headers["Content-Type"] = "application/json"
            content = json.dumps(json_body).encode("utf-8")

        Log.debug(f"Onfido request: {method} {path}")
        try:
            response = self._client.request(
                method,
                path,
                content=content,
                headers=headers,
                timeout=_resolve_timeout(timeout),
            )
        except httpx.TimeoutException as exc:
            raise OnfidoTimeoutError(f"Onfido request timed out: {method} {path}") from exc
        except httpx.TransportError as exc:
            raise OnfidoTransportError(f"Onfido network error: {exc}") from exc

        _raise_for_status(response)
        return response

    def request_json(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        multipart: MultipartBody | None = None,
        timeout: _Timeout = None,
    ) -> dict[str, Any]:
        """Send a request and decode its JSON object body.

        Raises:
            OnfidoDecodeError: if the body is not a JSON object.
        """
        response = self.send(
            method, path, json_body=json_body, multipart=multipart, timeout=timeout
        )
        return load_object(response.content)

    def fetch_page(self, url: str, *, timeout: _Timeout = None) -> Page:
        """Fetch one page of a list endpoint along with its next-page link."""
        response = self.send("GET", url, timeout=timeout)
        next_link = response.links.get("next") or {}
        return Page(body=response.content, next_url=next_link.get("url", ""))

    def download(self, path: str, sink: BinaryIO, *, timeout: _Timeout = None) -> int:
        """Stream a binary response body into sink.

        Returns:
            Number of bytes written.
        """
        Log.debug(f"Onfido download: GET {path}")
        written = 0
        try:
            with self._client.stream(
                "GET",
                path,
                headers={"Accept": "*/*"},
                timeout=_resolve_timeout(timeout),
            ) as response:
                if not response.is_success:
                    response.read()
                    _raise_for_status(response)
                for chunk in response.iter_bytes():
                    sink.write(chunk)
                    written += len(chunk)
        except httpx.TimeoutException as exc:
            raise OnfidoTimeoutError(f"Onfido download timed out: GET {path}") from exc
        except httpx.TransportError as exc:
            raise OnfidoTransportError(f"Onfido network error: {exc}") from exc
        return written


def _resolve_timeout(timeout: _Timeout) -> Any:
    if timeout is None:
        return httpx.USE_CLIENT_DEFAULT
    return timeout


def _raise_for_status(response: httpx.Response) -> None:
    if response.is_success:
        return
    error = _parse_error(response)
    Log.warning(f"Onfido API error: {error}")
    raise error


def _parse_error(response: httpx.Response) -> OnfidoAPIError:
    """Build an OnfidoAPIError from an error body.

    Accepts {"error": {"type", "message", "fields", "id"}}, {"error": "..."}
    and non-JSON bodies.
    """
    status = response.status_code
    try:
        payload = json.loads(response.content)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return OnfidoAPIError(status, response.text or response.reason_phrase)

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, str):
        return OnfidoAPIError(status, error)
    if not isinstance(error, dict):
        return OnfidoAPIError(status, response.text or response.reason_phrase)

    fields = error.get("fields")
    return OnfidoAPIError(
        status,
        str(error.get("message") or response.reason_phrase),
        error_type=str(error.get("type") or ""),
        fields=fields if isinstance(fields, dict) else None,
        error_id=str(error.get("id") or ""),
    )
