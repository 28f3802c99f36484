import pytest

from utils.validators import TextValidator


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_blank_values(value):
    assert TextValidator.is_blank(value)
    assert not TextValidator.validate_book_id(value)
    assert not TextValidator.validate_title(value)
    assert not TextValidator.validate_author(value)


def test_non_blank_values():
    assert TextValidator.validate_book_id("B1")
    assert TextValidator.validate_title(" Dune ")
    assert TextValidator.validate_author("Frank Herbert")


def test_validate_new_book_requires_all_fields():
    assert TextValidator.validate_new_book("B1", "Dune", "Herbert")
    assert not TextValidator.validate_new_book("B1", "Dune", " ")
    assert not TextValidator.validate_new_book("B1", "", "Herbert")
    assert not TextValidator.validate_new_book(" ", "Dune", "Herbert")
