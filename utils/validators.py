from typing import Optional


class TextValidator:
    """Input checks the front end runs before calling into the registry."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        return text is None or not text.strip()

    @staticmethod
    def validate_book_id(book_id: Optional[str]) -> bool:
        return not TextValidator.is_blank(book_id)

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return not TextValidator.is_blank(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return not TextValidator.is_blank(author)

    @staticmethod
    def validate_new_book(book_id: Optional[str], title: Optional[str], author: Optional[str]) -> bool:
        # All fields are required
        return (
            TextValidator.validate_book_id(book_id)
            and TextValidator.validate_title(title)
            and TextValidator.validate_author(author)
        )
