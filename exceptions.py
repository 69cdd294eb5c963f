class BookStoreError(Exception):
    """Base class for errors raised by the in-memory book store."""


class ValidationError(BookStoreError):
    """
    Raised when a write payload breaks one of the book rules.
    `reason` is one of the REASON_* constants.
    """
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotFoundError(BookStoreError):
    def __init__(self, book_id: str):
        super().__init__(f"book '{book_id}' not found")
        self.book_id = book_id


class InternalError(BookStoreError):
    """Raised when the store cannot confirm a write it just made."""
