"""
Unit tests for the error taxonomy and database URL handling.
"""

from __future__ import annotations

import pytest

from app.db.session import to_async_url
from app.exceptions import (
    AppError,
    BadRequestError,
    StoreUnavailableError,
    TaskNotFoundError,
    ValidationFailedError,
    status_code_for,
)


class TestStatusCodeFor:
    @pytest.mark.parametrize(
        "error, expected",
        [
            (ValidationFailedError([{"name": "Task name is required"}]), 422),
            (TaskNotFoundError("abc"), 404),
            (BadRequestError("No update data provided"), 400),
            (StoreUnavailableError("down"), 500),
            (AppError("generic"), 500),
            (RuntimeError("boom"), 500),
        ],
    )
    def test_mapping(self, error: Exception, expected: int) -> None:
        assert status_code_for(error) == expected

    def test_not_found_body(self) -> None:
        assert TaskNotFoundError("abc").to_body() == {"message": "Task not found"}

    def test_body_includes_error_detail(self) -> None:
        error = StoreUnavailableError("Error fetching monthly analytics", error="timeout")

        assert error.to_body() == {"message": "Error fetching monthly analytics", "error": "timeout"}


class TestToAsyncUrl:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("postgresql://u:p@h:5432/db", "postgresql+psycopg://u:p@h:5432/db"),
            ("postgresql+asyncpg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
            ("postgresql+psycopg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
            ("sqlite+aiosqlite:///./dev.db", "sqlite+aiosqlite:///./dev.db"),
        ],
    )
    def test_supported(self, url: str, expected: str) -> None:
        assert to_async_url(url) == expected

    def test_missing_url(self) -> None:
        with pytest.raises(ValueError, match="DATABASE_URL"):
            to_async_url(None)

    def test_unsupported_scheme(self) -> None:
        with pytest.raises(ValueError, match="Unsupported"):
            to_async_url("mysql://u:p@h/db")
