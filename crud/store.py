import secrets, threading
from typing import Callable

import constants
from exceptions import InternalError, NotFoundError, ValidationError
from schemas.book import Book, BookPayload, BookSummary, to_summary
from utils.utils import now_iso, parse_bool_query


def generate_book_id() -> str:
    # 12 random bytes encode to 16 url-safe characters
    return secrets.token_urlsafe(constants.BOOK_ID_LENGTH * 3 // 4)


def validate_payload(payload: BookPayload) -> None:
    """
    Checks the two write rules, in order: a non-empty name, then readPage <= pageCount.
    The page rule is only checked when both counts are given.
    """
    if not payload.name:
        raise ValidationError(constants.REASON_MISSING_NAME)

    if payload.read_page is not None and payload.page_count is not None \
            and payload.read_page > payload.page_count:
        raise ValidationError(constants.REASON_READ_PAGE)


class BookStore:
    """
    Ordered in-memory collection of books.
    Every operation holds `_lock` for its whole duration so writers never interleave.
    """
    def __init__(self, id_factory: Callable[[], str] = generate_book_id, clock: Callable[[], str] = now_iso):
        self._books: list[Book] = []
        self._lock = threading.Lock()
        self._id_factory = id_factory
        self._clock = clock

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _find_index(self, book_id: str) -> int:
        for i, book in enumerate(self._books):
            if book.id == book_id:
                return i
        return -1

    def create_book(self, payload: BookPayload) -> str:
        """
        Validates and appends a new book.
        Returns the id of the new book.
        """
        validate_payload(payload)

        with self._lock:
            book_id = self._id_factory()
            timestamp = self._clock()
            book = Book(
                id=book_id,
                finished=payload.page_count == payload.read_page,
                inserted_at=timestamp,
                updated_at=timestamp,
                **payload.model_dump(),
            )
            self._books.append(book)

            # Confirm the write landed
            if self._find_index(book_id) == -1:
                raise InternalError(f"book '{book_id}' missing after insert")

        return book_id

    def read_books(self, name: str | None = None, reading: str | None = None, finished: str | None = None) -> list[BookSummary]:
        """
        Returns {id, name, publisher} projections in insertion order.
        Only one filter applies: `name`, else `reading`, else `finished`.
        Empty filter values count as absent.
        """
        with self._lock:
            books = list(self._books)

        if name:
            needle = name.lower()
            books = [book for book in books if needle in book.name.lower()]
        elif reading:
            wanted = parse_bool_query(reading)
            books = [book for book in books if wanted is not None and book.reading == wanted]
        elif finished:
            wanted = parse_bool_query(finished)
            books = [book for book in books if wanted is not None and book.finished == wanted]

        return [to_summary(book) for book in books]

    def read_book(self, book_id: str) -> Book:
        with self._lock:
            index = self._find_index(book_id)
            if index == -1:
                raise NotFoundError(book_id)
            return self._books[index].model_copy()

    def update_book(self, book_id: str, payload: BookPayload) -> Book:
        """
        Replaces every field except `id` and `inserted_at`.
        Validation happens before the existence check.
        """
        validate_payload(payload)

        with self._lock:
            index = self._find_index(book_id)
            if index == -1:
                raise NotFoundError(book_id)

            current = self._books[index]
            updated = Book(
                id=current.id,
                finished=payload.page_count == payload.read_page,
                inserted_at=current.inserted_at,
                updated_at=self._clock(),
                **payload.model_dump(),
            )
            self._books[index] = updated
            return updated.model_copy()

    def delete_book(self, book_id: str) -> None:
        with self._lock:
            index = self._find_index(book_id)
            if index == -1:
                raise NotFoundError(book_id)
            del self._books[index]
