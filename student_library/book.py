from __future__ import annotations

from enum import Enum


class BookStatus(Enum):
    AVAILABLE = "Available"
    ISSUED = "Issued"

    @property
    def label(self) -> str:
        return self.value


class Book:
    """A single book in the library: fixed identity plus a circulation status."""

    def __init__(self, book_id: str | None, title: str | None, author: str | None) -> None:
        self._book_id = (book_id or "").strip()
        self._title = (title or "").strip()
        self._author = (author or "").strip()
        self._status = BookStatus.AVAILABLE

    @property
    def book_id(self) -> str:
        return self._book_id

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def status(self) -> BookStatus:
        # Changed only by Library under its lock
        return self._status

    @property
    def issued(self) -> bool:
        return self.status is BookStatus.ISSUED

    @property
    def status_label(self) -> str:
        return self.status.label

    def matches(self, book_id: str | None) -> bool:
        """Case-insensitive comparison against a (possibly padded) identifier."""
        if book_id is None:
            return False
        return self._book_id.casefold() == book_id.strip().casefold()

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ID: {self.book_id})"

    def __repr__(self) -> str:
        return f"Book(book_id={self.book_id!r}, title={self.title!r}, author={self.author!r}, issued={self.issued})"

    def to_dict(self) -> dict:
        return {
            "id": self.book_id,
            "title": self.title,
            "author": self.author,
            "issued": self.issued,
            "status": self.status_label,
        }
