from datetime import datetime, timezone
from fastapi.responses import JSONResponse
import constants

_TRUE_VALUES = ("1", "true")
_FALSE_VALUES = ("0", "false")

# every envelope is readable from any origin
CORS_HEADERS = { "Access-Control-Allow-Origin" : "*" }


def now_iso() -> str:
    """UTC timestamp in millisecond ISO-8601 form, e.g. 2023-05-01T10:20:30.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_bool_query(value: str) -> bool | None:
    """
    Coerces a `reading`/`finished` query value to a boolean.
    "1"/"true" -> True, "0"/"false" -> False (case-insensitive).
    Anything else returns None, which matches no book.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return None


def send_msg(status_code: int, status: str, msg: str | None = None, **data: any) -> JSONResponse:
    response = { "status" : status }
    if msg is not None:
        response["message"] = msg
    if data:
        response["data"] = data
    return JSONResponse(status_code=status_code, content=response, headers=CORS_HEADERS)


def send_success(status_code: int = 200, msg: str | None = None, **data: any) -> JSONResponse:
    return send_msg(status_code, constants.STATUS_SUCCESS, msg, **data)


def send_fail(status_code: int, msg: str) -> JSONResponse:
    return send_msg(status_code, constants.STATUS_FAIL, msg)
