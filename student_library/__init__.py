"""Student Library - Core Application Package

This package contains the core application modules:
- Book record and circulation status (book.py)
- In-memory book registry (library.py)

The terminal front end lives in main.py at the project root.
"""

from student_library.book import Book, BookStatus
from student_library.library import Library

__all__ = ["Book", "BookStatus", "Library"]
