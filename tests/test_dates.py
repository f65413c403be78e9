from __future__ import annotations

from datetime import datetime, timezone

import pytest
import pytz

from lastupdated.core.dates import format_date, parse_iso


def test_format_date_long_form() -> None:
    assert format_date("2023-05-14T10:00:00Z") == "May 14, 2023"


def test_format_date_accepts_offsets_and_date_only() -> None:
    assert format_date("2023-05-14T10:00:00+00:00") == "May 14, 2023"
    assert format_date("2021-12-01") == "December 1, 2021"


def test_format_date_respects_display_zone() -> None:
    late = "2023-05-14T23:30:00Z"
    assert format_date(late) == "May 14, 2023"
    assert format_date(late, tz=pytz.timezone("Asia/Kolkata")) == "May 15, 2023"


def test_format_date_accepts_datetime() -> None:
    now = datetime(2024, 2, 29, 12, 0, tzinfo=timezone.utc)
    assert format_date(now) == "February 29, 2024"


@pytest.mark.parametrize("value", ["not a date", "", None, "2023-13-45"])
def test_format_date_invalid_input_does_not_raise(value) -> None:
    assert format_date(value) == "Invalid Date"


def test_format_date_unknown_locale_is_an_error() -> None:
    with pytest.raises(ValueError):
        format_date("2023-05-14", locale="xx-XX")


def test_parse_iso_naive_is_read_in_given_zone() -> None:
    dt = parse_iso("2023-05-14T10:00:00")
    assert dt is not None
    assert dt.utcoffset().total_seconds() == 0

    utc = parse_iso("2023-05-14T10:00:00", tz=timezone.utc)
    assert utc.tzinfo is timezone.utc


@pytest.mark.parametrize(
    "value",
    ["May 14, 2023", "Sep 14, 2023", "14 May 2023", "05/14/2023", "2023/05/14", "Sun, 14 May 2023 10:00:00 GMT"],
)
def test_format_date_accepts_common_non_iso_layouts(value) -> None:
    expected = "September 14, 2023" if value.startswith("Sep") else "May 14, 2023"
    assert format_date(value) == expected
