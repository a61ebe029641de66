"""Generic cursor over the pages of a list endpoint."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from onfido.exceptions import OnfidoError
from onfido.logging.logger import Log

T = TypeVar("T")


@dataclass(frozen=True)
class Page:
    """One fetched page: raw body and the URL of the page after it ("" if none)."""

    body: bytes
    next_url: str = ""


class PageIterator(Generic[T]):
    """Pull cursor over every item of a paginated list endpoint.

    Pages are fetched lazily by ``advance()``. Any client error while
    fetching or decoding a page ends the walk; it is then available from
    ``err()``. Not safe for concurrent use.

    Usage::

        it = client.documents.list(applicant_id)
        while it.advance():
            handle(it.current())
        if it.err() is not None:
            raise it.err()
    """

    def __init__(
        self,
        *,
        fetch: Callable[[str], Page],
        first_url: str,
        decode: Callable[[bytes], list[T]],
    ) -> None:
        self._fetch = fetch
        self._decode = decode
        self._next_url = first_url
        self._items: list[T] = []
        self._index = -1
        self._err: OnfidoError | None = None

    def advance(self) -> bool:
        """Move to the next item, fetching the next page when needed.

        Returns:
            True if an item is available through ``current()``.
        """
        if self._err is not None:
            return False
        if self._index + 1 < len(self._items):
            self._index += 1
            return True
        self._index = len(self._items)
        if not self._next_url:
            return False

        url, self._next_url = self._next_url, ""
        try:
            page = self._fetch(url)
            items = self._decode(page.body)
        except OnfidoError as exc:
            Log.error(f"Listing failed on {url}: {exc}")
            self._err = exc
            self._items = []
            self._index = -1
            return False

        self._items = items
        self._index = 0
        if not items:
            return False
        self._next_url = page.next_url
        return True

    def current(self) -> T:
        """Return the item selected by the last successful ``advance()``."""
        if self._err is not None or not 0 <= self._index < len(self._items):
            raise RuntimeError("current() requires a preceding successful advance()")
        return self._items[self._index]

    def err(self) -> OnfidoError | None:
        """Return the error that ended the walk, or None."""
        return self._err

    def __iter__(self) -> Iterator[T]:
        while self.advance():
            yield self.current()
        if self._err is not None:
            raise self._err
