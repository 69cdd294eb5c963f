"""
Tests for response and parsing helpers.
"""

import json
import re

import pytest

from utils.utils import now_iso, parse_bool_query, send_fail, send_success


@pytest.mark.parametrize("value, expected", [
    ("1", True),
    ("true", True),
    ("TRUE", True),
    (" 1 ", True),
    ("0", False),
    ("false", False),
    ("False", False),
    ("2", None),
    ("yes", None),
    ("", None),
])
def test_parse_bool_query(value, expected):
    assert parse_bool_query(value) is expected


def test_now_iso_format():
    """Timestamps use millisecond precision and a Z suffix."""
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", now_iso())


def test_send_success_envelope():
    response = send_success(201, msg="ok", bookId="abc")

    assert response.status_code == 201
    assert response.headers["access-control-allow-origin"] == "*"
    assert json.loads(response.body) == {
        "status": "success",
        "message": "ok",
        "data": {"bookId": "abc"},
    }


def test_send_success_without_message():
    response = send_success(books=[])

    assert response.status_code == 200
    assert json.loads(response.body) == {"status": "success", "data": {"books": []}}


def test_send_fail_envelope():
    response = send_fail(404, "Buku tidak ditemukan")

    assert response.status_code == 404
    assert response.headers["access-control-allow-origin"] == "*"
    assert json.loads(response.body) == {"status": "fail", "message": "Buku tidak ditemukan"}
