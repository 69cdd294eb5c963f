from fastapi import Request
from crud.store import BookStore

def get_book_store(request: Request) -> BookStore:
    return request.app.state.book_store
