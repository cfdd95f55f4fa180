from __future__ import annotations

import pytest

from user_dashboard.error_mapper import map_error
from user_dashboard.exceptions import ApiError, NotFoundError, RateLimitError, ServerError, ValidationError


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (404, NotFoundError),
        (400, ValidationError),
        (422, ValidationError),
        (429, RateLimitError),
        (503, ServerError),
        (418, ApiError),
    ],
)
def test_map_error_picks_type_by_status(status_code: int, expected: type[ApiError]) -> None:
    error = map_error(status_code, {"message": "nope"})

    assert type(error) is expected
    assert error.status_code == status_code
    assert error.message == "nope"


def test_map_error_without_message_names_the_status() -> None:
    error = map_error(502, None)

    assert error.code == "HTTP_ERROR"
    assert error.message == "User directory API responded with HTTP 502"
