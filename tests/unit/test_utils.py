from datetime import date, datetime

from backend.estg_portal.common.utils import excerpt, format_date_long, is_truncated


class TestFormatDateLong:

    def test_iso_timestamp(self):
        assert format_date_long("2025-01-05T10:30:00.000Z") == "January 5, 2025"

    def test_plain_date(self):
        assert format_date_long("2024-12-25") == "December 25, 2024"

    def test_date_objects(self):
        assert format_date_long(date(2023, 3, 1)) == "March 1, 2023"
        assert format_date_long(datetime(2023, 3, 1, 8, 0)) == "March 1, 2023"

    def test_empty(self):
        assert format_date_long(None) == ""
        assert format_date_long("") == ""

    def test_unparseable_is_returned_as_is(self):
        assert format_date_long("tomorrow") == "tomorrow"


class TestExcerpt:

    def test_short_text_is_unchanged(self):
        assert excerpt("short", 150) == "short"

    def test_long_text_is_cut(self):
        text = "x" * 200
        result = excerpt(text, 150)
        assert result == "x" * 150 + "..."

    def test_exact_length_is_unchanged(self):
        text = "y" * 150
        assert excerpt(text, 150) == text
        assert not is_truncated(text, 150)

    def test_none(self):
        assert excerpt(None) == ""
