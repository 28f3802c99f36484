import pytest

from student_library import Library


@pytest.fixture
def lib():
    # Empty registry per test
    return Library()


@pytest.fixture
def seeded_lib():
    library = Library()
    library.seed_sample_books()
    return library
