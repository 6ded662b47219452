"""
Unit tests for form validation and upload checks.
"""

import io

import pytest
from werkzeug.datastructures import FileStorage

from backend.estg_portal.common.exceptions import ValidationError
from backend.estg_portal.common.file_validation import has_upload, prepare_attachment, prepare_image
from backend.estg_portal.common.validation import (
    require_fields,
    sanitize_string,
    validate_email,
    validate_password_match,
)


def _upload(name, content=b"data", mimetype=None):
    return FileStorage(stream=io.BytesIO(content), filename=name, content_type=mimetype)


class TestRequireFields:

    def test_all_present(self):
        values = require_fields({"title": " Fair ", "description": "x"}, ("title", "description"))
        assert values == {"title": "Fair", "description": "x"}

    def test_blank_field_is_missing(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({"title": "   ", "description": "x"}, ("title", "description"))
        assert exc_info.value.message == "Please fill out all required fields."
        assert exc_info.value.details["missing"] == ["title"]

    def test_absent_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            require_fields({}, ("title", "description", "type"))
        assert exc_info.value.details["missing"] == ["title", "description", "type"]


class TestStrings:

    def test_sanitize_strips_control_characters(self):
        assert sanitize_string("  Fair\x00 day\n ") == "Fair day"

    def test_sanitize_keeps_newlines_inside(self):
        assert sanitize_string("line one\nline two") == "line one\nline two"

    def test_sanitize_max_length(self):
        with pytest.raises(ValidationError):
            sanitize_string("x" * 11, max_length=10)

    def test_email_is_normalised(self):
        assert validate_email("  Head@School.RW ") == "head@school.rw"

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            validate_email("not-an-email")


class TestPasswordMatch:

    def test_match(self):
        assert validate_password_match("s3cret!", "s3cret!") == "s3cret!"

    def test_mismatch(self):
        with pytest.raises(ValidationError, match="Passwords do not match"):
            validate_password_match("s3cret!", "other")

    def test_empty(self):
        with pytest.raises(ValidationError, match="Password cannot be empty"):
            validate_password_match("", "")


class TestUploads:

    def test_has_upload(self):
        assert has_upload(_upload("poster.png"))
        assert not has_upload(_upload(""))
        assert not has_upload(None)

    def test_image_part(self):
        filename, stream, content_type = prepare_image(_upload("poster.png", b"\x89PNG"))
        assert filename == "poster.png"
        assert content_type == "image/png"
        assert stream.read() == b"\x89PNG"

    def test_image_rejects_documents(self):
        with pytest.raises(ValidationError, match="File type not allowed"):
            prepare_image(_upload("notes.pdf"))

    def test_attachment_accepts_pdf(self):
        filename, _, content_type = prepare_attachment(_upload("timetable.pdf"))
        assert filename == "timetable.pdf"
        assert content_type == "application/pdf"

    def test_empty_file(self):
        with pytest.raises(ValidationError, match="empty"):
            prepare_image(_upload("poster.png", b""))

    def test_too_large(self):
        with pytest.raises(ValidationError, match="too large"):
            prepare_image(_upload("poster.png", b"x" * 2048), max_size=1024)

    def test_unsafe_name(self):
        filename, _, _ = prepare_attachment(_upload("../../etc/report.pdf"))
        assert filename == "etc_report.pdf"
