import logging
import sys
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.markup import escape
from rich import box
import typer

from student_library import Library
from config import settings
from utils.validators import TextValidator
from utils.ui_helpers import (
    build_books_table,
    print_book_result,
    print_list_result,
    print_stats_result,
    set_output_mode,
)

APP_NAME = settings.app_name

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))
logger = logging.getLogger(__name__)

console = Console()


# Single Library instance shared by every command and menu action
class LibraryManager:
    _instance: Optional[Library] = None

    @classmethod
    def get_instance(cls) -> Library:
        """Get or create the Library singleton, seeded with the sample catalog."""
        if cls._instance is None:
            cls._instance = Library()
            if settings.seed_sample_books:
                cls._instance.seed_sample_books()
            logger.debug("Library initialised with %d books", len(cls._instance))
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None


# --- Typer CLI application ---
app = typer.Typer(help=APP_NAME)


@app.callback(invoke_without_command=True)
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
):
    """Student library manager. Runs the interactive menu when no command is given."""
    if output:
        set_output_mode(output)
    if ctx.invoked_subcommand is None:
        run_menu()


@app.command("list")
def cli_list():
    """List every book with its status."""
    print_list_result(LibraryManager.get_instance().list_books())


@app.command("find")
def cli_find(book_id: str):
    """Find a book by ID and show its details."""
    book = LibraryManager.get_instance().find_book(book_id)
    print_book_result(book, book_id)


@app.command("stats")
def cli_stats():
    """Show library statistics."""
    print_stats_result(LibraryManager.get_instance().get_statistics())


@app.command("menu")
def cli_menu():
    """Start the interactive menu."""
    run_menu()


# --- Interactive menu actions ---
def show_books():
    """View Books: re-fetches the catalog on every call."""
    books = LibraryManager.get_instance().list_books()
    if not books:
        console.print("[yellow]No books in library.[/]")
        return
    console.print(build_books_table(books, title="📚 Catalog"))
    console.print(f"[dim]📊 Showing {len(books)} books[/]")


def add_book():
    lib = LibraryManager.get_instance()
    book_id = Prompt.ask("Book ID")
    title = Prompt.ask("Title")
    author = Prompt.ask("Author")

    if not TextValidator.validate_new_book(book_id, title, author):
        console.print("[bold yellow]Validation Error:[/] All fields are required.")
        return

    if lib.add_book(book_id, title, author):
        console.print(Panel.fit("[green]Book added successfully.[/]", title="✅ Success", border_style="green"))
        show_books()
    else:
        console.print("[bold red]Error:[/] Failed to add book. ID might already exist.")


def issue_book():
    lib = LibraryManager.get_instance()
    book_id = Prompt.ask("Enter Book ID to Issue")
    if not TextValidator.validate_book_id(book_id):
        console.print("[bold yellow]Validation:[/] Please enter Book ID.")
        return

    book = lib.find_book(book_id)
    if book is None:
        console.print("[bold red]Error:[/] Book not found.")
        return
    if book.issued:
        console.print(f"[yellow]Unavailable:[/] Book is already issued. ({escape(str(book))})")
        return

    if lib.issue_book(book_id):
        console.print(Panel.fit("[green]Book issued successfully.[/]", title="✅ Success", border_style="green"))
        show_books()
    else:
        console.print("[bold red]Error:[/] Failed to issue book.")


def return_book():
    lib = LibraryManager.get_instance()
    book_id = Prompt.ask("Enter Book ID to Return")
    if not TextValidator.validate_book_id(book_id):
        console.print("[bold yellow]Validation:[/] Please enter Book ID.")
        return

    book = lib.find_book(book_id)
    if book is None:
        console.print("[bold red]Error:[/] Book not found.")
        return
    if not book.issued:
        console.print(f"[blue]Info:[/] Book is not issued. ({escape(str(book))})")
        return

    if lib.return_book(book_id):
        console.print(Panel.fit("[green]Book returned successfully.[/]", title="✅ Success", border_style="green"))
        show_books()
    else:
        console.print("[bold red]Error:[/] Failed to return book.")


def find_book():
    lib = LibraryManager.get_instance()
    book_id = Prompt.ask("Enter Book ID to Find")
    book = lib.find_book(book_id)
    if book:
        console.print(Panel.fit(
            f"[bold]ID:[/] {escape(book.book_id)}\n"
            f"[bold]Title:[/] {escape(book.title)}\n"
            f"[bold]Author:[/] {escape(book.author)}\n"
            f"[bold]Status:[/] {book.status_label}",
            title="🔍 Book Found",
            border_style="green"
        ))
    else:
        console.print(f"[yellow]⚠️ Book not found: [bold]{escape(book_id)}[/][/]")


def stats():
    statistics = LibraryManager.get_instance().get_statistics()
    console.print(Panel.fit(
        f"[bold]Total Books:[/] {statistics['total_books']}\n"
        f"[bold]Issued:[/] {statistics['issued_books']}\n"
        f"[bold]Available:[/] {statistics['available_books']}\n"
        f"[bold]Unique Authors:[/] {statistics['unique_authors']}",
        title="📊 Statistics",
        border_style="blue"
    ))


def exit_application() -> bool:
    """Ask before leaving. Returns True when the user confirmed."""
    if settings.confirm_exit and not Confirm.ask("Are you sure you want to exit?", default=False):
        return False
    console.print("[green]Goodbye![/]")
    return True


MENU_ITEMS = [
    ("1", "Add Book", "➕", add_book),
    ("2", "View Books", "📚", show_books),
    ("3", "Issue Book", "📤", issue_book),
    ("4", "Return Book", "📥", return_book),
    ("5", "Find Book", "🔎", find_book),
    ("6", "Statistics", "📊", stats),
]


def run_menu():
    """Simple interactive home menu for the library."""
    def render_menu() -> None:
        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon, _ in MENU_ITEMS:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")
        table.add_row("[reverse]0[/]", "🚪 Exit")

        console.print(Panel(
            table,
            title=f"{APP_NAME} - Home",
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    actions = {key: action for key, _, _, action in MENU_ITEMS}
    choices = [key for key, _, _, _ in MENU_ITEMS] + ["0"]

    while True:
        render_menu()
        try:
            choice = Prompt.ask("Please choose an option", choices=choices, default="2").strip()
            if choice == "0":
                if exit_application():
                    break
            else:
                actions[choice]()
        except (EOFError, KeyboardInterrupt):
            console.print("\n[green]Goodbye![/]")
            break
        print()  # blank line between actions


if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()
