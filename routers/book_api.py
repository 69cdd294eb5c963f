from fastapi import APIRouter, Depends, status
from crud.store import BookStore
from dependencies import get_book_store
from exceptions import InternalError, NotFoundError, ValidationError
from schemas.book import BookPayload
from utils.utils import send_fail, send_success
import logging, constants

b_api = APIRouter()


@b_api.post("", status_code=status.HTTP_201_CREATED)
async def add_book(request: BookPayload, store: BookStore = Depends(get_book_store)):
    try:
        book_id = store.create_book(request)
    except ValidationError as e:
        logging.info(f"INFO: Rejected new book '{request.name}': {e.reason}")
        return send_fail(status.HTTP_400_BAD_REQUEST, constants.ADD_INVALID[e.reason])
    except InternalError as e:
        logging.error(f"Book store error: {e}")
        return send_fail(status.HTTP_500_INTERNAL_SERVER_ERROR, constants.ADD_FAILED)

    logging.info(f"INFO: Added book (ID: '{book_id}')")
    return send_success(status.HTTP_201_CREATED, msg=constants.ADD_SUCCESS, bookId=book_id)


@b_api.get("", status_code=status.HTTP_200_OK)
async def get_books(name: str | None = None, reading: str | None = None, finished: str | None = None,
                    store: BookStore = Depends(get_book_store)):
    books = store.read_books(name=name, reading=reading, finished=finished)
    return send_success(books=[book.model_dump(by_alias=True) for book in books])


@b_api.get("/{book_id}", status_code=status.HTTP_200_OK)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)):
    try:
        book = store.read_book(book_id)
    except NotFoundError:
        logging.info(f"INFO: Book (ID: '{book_id}') not found")
        return send_fail(status.HTTP_404_NOT_FOUND, constants.NOT_FOUND)

    return send_success(book=book.model_dump(by_alias=True))


@b_api.put("/{book_id}", status_code=status.HTTP_200_OK)
async def edit_book(book_id: str, request: BookPayload, store: BookStore = Depends(get_book_store)):
    try:
        store.update_book(book_id, request)
    except ValidationError as e:
        logging.info(f"INFO: Rejected update of book (ID: '{book_id}'): {e.reason}")
        return send_fail(status.HTTP_400_BAD_REQUEST, constants.UPDATE_INVALID[e.reason])
    except NotFoundError:
        logging.warning(f"Attempted to update book (ID: '{book_id}') which does not exist")
        return send_fail(status.HTTP_404_NOT_FOUND, constants.UPDATE_NOT_FOUND)

    logging.info(f"INFO: Updated book (ID: '{book_id}')")
    return send_success(msg=constants.UPDATE_SUCCESS)


@b_api.delete("/{book_id}", status_code=status.HTTP_200_OK)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)):
    try:
        store.delete_book(book_id)
    except NotFoundError:
        logging.warning(f"Attempted to delete book (ID: '{book_id}') which does not exist")
        return send_fail(status.HTTP_404_NOT_FOUND, constants.DELETE_NOT_FOUND)

    logging.info(f"INFO: Deleted book (ID: '{book_id}')")
    return send_success(msg=constants.DELETE_SUCCESS)
