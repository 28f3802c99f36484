import os
import json
from typing import List, Any, Dict, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()


def book_row(book: Any) -> tuple:
    """The four displayed fields of a book, in table column order."""
    return (book.book_id, book.title, book.author, book.status_label)


def build_books_table(books: List[Any], title: str = "📚 Books") -> Table:
    table = Table(title=title, show_lines=True, header_style="bold cyan")
    table.add_column("ID", style="magenta", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Author", style="white")
    table.add_column("Status", no_wrap=True)
    for b in books:
        book_id, book_title, author, status = book_row(b)
        colour = "red" if b.issued else "green"
        table.add_row(escape(book_id), escape(book_title), escape(author), f"[{colour}]{status}[/]")
    return table


def print_list_result(books: List[Any]) -> None:
    """Print the book list according to the current output mode.
    - plain: 'ID - Title by Author [Status]' lines, or 'No books in library.'
    - json: JSON array of id, title, author, issued, status
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books in library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        _console.print(build_books_table(books))
    else:
        for b in books:
            print(f"{b.book_id} - {b.title} by {b.author} [{b.status_label}]")


def print_book_result(book: Optional[Any], book_id: str) -> None:
    mode = get_output_mode()

    if book is None:
        print(f"Book with ID {book_id} not found.")
        return

    if mode == "json":
        print(json.dumps(book.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        content = (
            f"[bold]ID:[/] {escape(book.book_id)}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]Status:[/] {book.status_label}"
        )
        _console.print(Panel.fit(content, title="🔍 Book Found", border_style="green"))
    else:
        print("Book Found")
        print(f"ID: {book.book_id}")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"Status: {book.status_label}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    total = stats.get("total_books", 0)
    issued = stats.get("issued_books", 0)
    available = stats.get("available_books", 0)
    authors = stats.get("unique_authors", 0)

    if mode == "json":
        print(json.dumps(
            {"total_books": total, "issued_books": issued, "available_books": available, "unique_authors": authors},
            ensure_ascii=False,
        ))
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {total}\n"
            f"[bold]Issued:[/] {issued}\n"
            f"[bold]Available:[/] {available}\n"
            f"[bold]Unique Authors:[/] {authors}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {total}")
        print(f"Issued: {issued}")
        print(f"Available: {available}")
        print(f"Unique Authors: {authors}")
