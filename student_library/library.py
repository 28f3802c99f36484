import logging
import threading
from typing import Any, Dict, List, Optional

from student_library.book import Book, BookStatus

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = (
    ("B001", "Introduction to Java", "James Gosling"),
    ("B002", "Data Structures", "Robert Lafore"),
    ("B003", "Algorithms", "Cormen et al."),
)


class Library:
    """Manages the in-memory collection of books and their issue status.

    Every public operation runs under a single re-entrant lock, so callers on
    different threads never observe a half-applied add or transition.
    Precondition failures are reported through the return value, never raised.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._books: List[Book] = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book_id: Optional[str], title: Optional[str], author: Optional[str]) -> bool:
        """Add a new, available book. Rejects blank and duplicate IDs."""
        book = Book(book_id, title, author)
        if not book.book_id:
            logger.info("Rejected book with blank ID")
            return False
        with self._lock:
            if self.find_book(book.book_id) is not None:
                logger.info("Rejected duplicate book ID %s", book.book_id)
                return False
            self._books.append(book)
        logger.debug("Added book %s", book.book_id)
        return True

    def find_book(self, book_id: Optional[str]) -> Optional[Book]:
        if book_id is None:
            return None
        with self._lock:
            for book in self._books:
                if book.matches(book_id):
                    return book
        return None

    def issue_book(self, book_id: Optional[str]) -> bool:
        return self._transition(book_id, BookStatus.AVAILABLE, BookStatus.ISSUED)

    def return_book(self, book_id: Optional[str]) -> bool:
        return self._transition(book_id, BookStatus.ISSUED, BookStatus.AVAILABLE)

    def list_books(self) -> List[Book]:
        """Snapshot of all books in insertion order."""
        with self._lock:
            return list(self._books)

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            issued = sum(1 for b in self._books if b.issued)
            return {
                "total_books": len(self._books),
                "issued_books": issued,
                "available_books": len(self._books) - issued,
                "unique_authors": len({b.author for b in self._books}),
            }

    def seed_sample_books(self) -> int:
        """Add the sample catalog. Returns how many were actually added."""
        added = sum(1 for row in SAMPLE_BOOKS if self.add_book(*row))
        logger.debug("Seeded %d sample books", added)
        return added

    # ------------------------- Helpers ------------------------- #
    def _transition(self, book_id: Optional[str], expected: BookStatus, target: BookStatus) -> bool:
        with self._lock:
            book = self.find_book(book_id)
            if book is None:
                logger.info("No book with ID %r", book_id)
                return False
            if book.status is not expected:
                logger.info("Book %s is %s, cannot move to %s", book.book_id, book.status_label, target.label)
                return False
            book._status = target
        logger.debug("Book %s is now %s", book.book_id, target.label)
        return True
