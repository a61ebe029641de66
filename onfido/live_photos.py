import io
from functools import partial
from urllib.parse import urlencode

from onfido.decoders import build_live_photo, decode_live_photo_list
from onfido.logging.logger import Log
from onfido.models import DownloadedBlob, LivePhoto, LivePhotoUploadRequest
from onfido.multipart import encode_upload
from onfido.pagination import PageIterator
from onfido.resources import path_segment, resolve_file_name
from onfido.sniffing.base import BaseContentSniffer
from onfido.transport import HttpTransport


class LivePhotos:
    """Applicant live photos: upload, retrieve, download and list."""

    def __init__(self, transport: HttpTransport, sniffer: BaseContentSniffer) -> None:
        self._transport = transport
        self._sniffer = sniffer

    def upload(
        self,
        request: LivePhotoUploadRequest,
        *,
        file_name: str | None = None,
        timeout: float | None = None,
    ) -> LivePhoto:
        """Upload a live photo for the applicant named in the request.

        Raises:
            OnfidoEncodingError: if the file cannot be read. Nothing is sent.
            OnfidoAPIError: if the API rejects the upload.
        """
        body = encode_upload(
            request.file,
            field_name="file",
            file_name=resolve_file_name(request.file, file_name),
            fields=[
                ("applicant_id", request.applicant_id),
                ("advanced_validation", "true" if request.advanced_validation else "false"),
            ],
            sniffer=self._sniffer,
        )
        data = self._transport.request_json(
            "POST", "/live_photos", multipart=body, timeout=timeout
        )
        live_photo = build_live_photo(data)
        Log.info(f"Uploaded live photo {live_photo.id} for applicant {request.applicant_id}")
        return live_photo

    def get(self, live_photo_id: str, *, timeout: float | None = None) -> LivePhoto:
        data = self._transport.request_json(
            "GET", f"/live_photos/{path_segment(live_photo_id)}", timeout=timeout
        )
        return build_live_photo(data)

    def download(self, live_photo_id: str, *, timeout: float | None = None) -> DownloadedBlob:
        sink = io.BytesIO()
        size = self._transport.download(
            f"/live_photos/{path_segment(live_photo_id)}/download", sink, timeout=timeout
        )
        return DownloadedBlob(content=sink.getvalue(), size=size)

    def list(self, applicant_id: str, *, timeout: float | None = None) -> PageIterator[LivePhoto]:
        """Iterate over all live photos of an applicant, page by page."""
        return PageIterator(
            fetch=partial(self._transport.fetch_page, timeout=timeout),
            first_url="/live_photos?" + urlencode({"applicant_id": applicant_id}),
            decode=decode_live_photo_list,
        )
