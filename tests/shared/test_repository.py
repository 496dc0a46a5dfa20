"""Tests for shared/repository.py."""

from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from shared.repository import (
    BaseRepository,
    FOREIGN_KEY_VIOLATION,
    INVALID_TEXT_REPRESENTATION,
    UNIQUE_VIOLATION,
)


class TestBaseRepository:
    def test_stores_client(self):
        db = MagicMock()
        repo = BaseRepository(db)
        assert repo._db is db

    def test_error_code(self):
        error = APIError({"code": UNIQUE_VIOLATION, "message": "duplicate key"})
        assert BaseRepository._error_code(error) == "23505"

    def test_error_code_missing(self):
        error = APIError({"message": "something else"})
        assert BaseRepository._error_code(error) is None

    def test_sqlstate_constants(self):
        assert FOREIGN_KEY_VIOLATION == "23503"
        assert INVALID_TEXT_REPRESENTATION == "22P02"
