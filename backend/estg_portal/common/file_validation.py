import os

from werkzeug.utils import secure_filename

from ..constants import ALLOWED_ATTACHMENT_EXTENSIONS, ALLOWED_IMAGE_EXTENSIONS
from .exceptions import ValidationError

MIME_TYPES = {
    'png': 'image/png',
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'gif': 'image/gif',
    'webp': 'image/webp',
    'pdf': 'application/pdf',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'xls': 'application/vnd.ms-excel',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'ppt': 'application/vnd.ms-powerpoint',
    'pptx': 'application/vnd.openxmlformats-officedocument.presentationml.presentation',
    'txt': 'text/plain',
}

MAX_FILE_SIZE = 10 * 1024 * 1024


def get_file_extension(filename):
    if '.' in filename:
        return filename.rsplit('.', 1)[1].lower()
    return None


def file_size(file_stream):
    file_stream.seek(0, os.SEEK_END)
    size = file_stream.tell()
    file_stream.seek(0)
    return size


def has_upload(file):
    return bool(file and getattr(file, 'filename', ''))


def prepare_upload(file, allowed_extensions, max_size=MAX_FILE_SIZE):
    """
    Validates an uploaded werkzeug FileStorage and returns the tuple `requests`
    expects for a multipart part: (filename, stream, content_type).

    Raises:
        ValidationError: wrong extension, empty or oversized file
    """
    max_size = max_size or MAX_FILE_SIZE
    filename = secure_filename(file.filename or '')
    if not filename:
        raise ValidationError("Invalid file name")

    extension = get_file_extension(filename)
    if extension not in allowed_extensions:
        raise ValidationError(f"File type not allowed: .{extension}")

    size = file_size(file.stream)
    if size == 0:
        raise ValidationError("The selected file is empty")
    if size > max_size:
        max_size_mb = max_size / (1024 * 1024)
        raise ValidationError(f"File too large ({size / (1024 * 1024):.2f} MB). Maximum: {max_size_mb:.0f} MB")

    content_type = file.mimetype or MIME_TYPES.get(extension, 'application/octet-stream')
    return filename, file.stream, content_type


def prepare_image(file, max_size=MAX_FILE_SIZE):
    return prepare_upload(file, ALLOWED_IMAGE_EXTENSIONS, max_size)


def prepare_attachment(file, max_size=MAX_FILE_SIZE):
    return prepare_upload(file, ALLOWED_ATTACHMENT_EXTENSIONS, max_size)
