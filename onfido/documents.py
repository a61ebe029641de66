import io
from functools import partial

from onfido.decoders import build_document, decode_document_list
from onfido.logging.logger import Log
from onfido.models import Document, DocumentUploadRequest, DownloadedBlob
from onfido.multipart import encode_upload
from onfido.pagination import PageIterator
from onfido.resources import path_segment, resolve_file_name
from onfido.sniffing.base import BaseContentSniffer
from onfido.transport import HttpTransport


class Documents:
    """Applicant documents: upload, retrieve, download and list."""

    def __init__(self, transport: HttpTransport, sniffer: BaseContentSniffer) -> None:
        self._transport = transport
        self._sniffer = sniffer

    def upload(
        self,
        applicant_id: str,
        request: DocumentUploadRequest,
        *,
        file_name: str | None = None,
        timeout: float | None = None,
    ) -> Document:
        """Upload a document for an applicant.

        Args:
            applicant_id: Applicant the document belongs to.
            request: File and its type, side and issuing country.
            file_name: Announced file name; defaults to the stream's basename.
            timeout: Seconds before the call is abandoned.

        Raises:
            OnfidoEncodingError: if the file cannot be read. Nothing is sent.
            OnfidoAPIError: if the API rejects the upload.
        """
        body = encode_upload(
            request.file,
            field_name="file",
            file_name=resolve_file_name(request.file, file_name),
            fields=[
                ("type", request.type.value),
                ("side", request.side.value if request.side else None),
                ("issuing_country", request.issuing_country),
            ],
            sniffer=self._sniffer,
        )
        data = self._transport.request_json(
            "POST",
            f"/applicants/{path_segment(applicant_id)}/documents",
            multipart=body,
            timeout=timeout,
        )
        document = build_document(data)
        Log.info(f"Uploaded document {document.id} for applicant {applicant_id}")
        return document

    def get(
        self, applicant_id: str, document_id: str, *, timeout: float | None = None
    ) -> Document:
        data = self._transport.request_json(
            "GET",
            f"/applicants/{path_segment(applicant_id)}/documents/{path_segment(document_id)}",
            timeout=timeout,
        )
        return build_document(data)

    def download(
        self, applicant_id: str, document_id: str, *, timeout: float | None = None
    ) -> DownloadedBlob:
        sink = io.BytesIO()
        size = self._transport.download(
            f"/applicants/{path_segment(applicant_id)}/documents/"
            f"{path_segment(document_id)}/download",
            sink,
            timeout=timeout,
        )
        return DownloadedBlob(content=sink.getvalue(), size=size)

    def list(self, applicant_id: str, *, timeout: float | None = None) -> PageIterator[Document]:
        """Iterate over all documents of an applicant, page by page."""
        return PageIterator(
            fetch=partial(self._transport.fetch_page, timeout=timeout),
            first_url=f"/applicants/{path_segment(applicant_id)}/documents",
            decode=decode_document_list,
        )
