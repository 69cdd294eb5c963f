from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv
import os, logging, uvicorn

from routers.book_api import b_api
from crud.store import BookStore
from utils.utils import send_fail
import constants

load_dotenv()

from log import setup_global_logger

HOST = os.getenv("HOST", "localhost")
PORT = int(os.getenv("PORT", "9000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "bookshelf.log")

setup_global_logger(log_file_path=LOG_FILE_PATH, level=getattr(logging, LOG_LEVEL, logging.INFO))

@asynccontextmanager
async def lifespan(fapp: FastAPI):
    # each app run owns a fresh, empty store
    fapp.state.book_store = BookStore()
    logging.info("Book store ready")
    yield
    logging.info(f"Discarding book store ({len(fapp.state.book_store)} books)")

app = FastAPI(lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logging.info(f"INFO: Invalid request body on {request.method} {request.url.path}: {exc.errors()}")
    return send_fail(status.HTTP_400_BAD_REQUEST, constants.BAD_REQUEST_BODY)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return send_fail(exc.status_code, constants.ROUTE_NOT_FOUND)
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return send_fail(exc.status_code, constants.METHOD_NOT_ALLOWED)
    return send_fail(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception(f"Unhandled error on {request.method} {request.url.path}")
    return send_fail(status.HTTP_500_INTERNAL_SERVER_ERROR, constants.SERVER_ERROR)


app.include_router(b_api, prefix="/books")


if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
