from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(CamelModel):
    """Body of a create or update request. Only `name` is checked by the store."""
    name: str | None = None
    year: int | None = None
    author: str | None = None
    summary: str | None = None
    publisher: str | None = None
    page_count: int | None = None
    read_page: int | None = None
    reading: bool | None = None


class Book(CamelModel):
    id: str
    name: str
    year: int | None = None
    author: str | None = None
    summary: str | None = None
    publisher: str | None = None
    page_count: int | None = None
    read_page: int | None = None
    finished: bool = False
    reading: bool | None = None
    inserted_at: str
    updated_at: str


class BookSummary(CamelModel):
    id: str
    name: str
    publisher: str | None = None


def to_summary(book: Book) -> BookSummary:
    return BookSummary(id=book.id, name=book.name, publisher=book.publisher)
