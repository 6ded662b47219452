"""
Updates service
Announcements: list, create and delete through the REST API.
"""

from flask import current_app

from ..common.file_validation import has_upload, prepare_attachment
from ..common.validation import require_fields, sanitize_string
from ..config.logging_config import content_logger
from ..gateway import get_api_client
from .listing import fetch_list
from .models import Update, unwrap_collection

ADMIN_LIST_ENDPOINT = '/updates'
PUBLIC_LIST_ENDPOINT = '/all_updates'
CREATE_ENDPOINT = '/upload_updates'
DELETE_ENDPOINT = '/delete_update/{id}'

SEARCH_FIELDS = ('title', 'description')


def list_updates_service(search=''):
    return fetch_list(
        lambda: get_api_client().get(ADMIN_LIST_ENDPOINT),
        Update.from_api, 'updates', search=search, fields=SEARCH_FIELDS,
    )


def list_public_updates_service(search=''):
    return fetch_list(
        lambda: get_api_client().get(PUBLIC_LIST_ENDPOINT),
        Update.from_api, 'public updates', search=search, fields=SEARCH_FIELDS,
    )


def find_update_service(update_id):
    """
    Looks the update up in the signed-in account's list; None when absent.
    API failures are raised, not reported as a missing update.
    """
    payload = get_api_client().get(ADMIN_LIST_ENDPOINT)
    for row in unwrap_collection(payload):
        if isinstance(row, dict):
            update = Update.from_api(row)
            if update.id == str(update_id):
                return update
    return None


def create_update_service(form, attachment=None):
    """
    Creates an announcement.

    Args:
        form: mapping with 'title', 'description' and 'type'
        attachment: optional werkzeug FileStorage, sent as the 'fileUrl' part

    Raises:
        ValidationError: a required field is blank or the attachment is refused
    """
    values = require_fields(form, ('title', 'description', 'type'))
    data = {
        'title': sanitize_string(values['title'], max_length=200),
        'description': sanitize_string(values['description'], max_length=10000),
        'type': sanitize_string(values['type'], max_length=50),
    }

    if has_upload(attachment):
        files = {'fileUrl': prepare_attachment(attachment, current_app.config.get('MAX_UPLOAD_SIZE'))}
        payload = get_api_client().post(CREATE_ENDPOINT, data=data, files=files)
    else:
        payload = get_api_client().post(CREATE_ENDPOINT, json=data)
    content_logger.info(f"Update created: {data['title']} ({data['type']})")

    if isinstance(payload, dict):
        created = payload.get('data') if isinstance(payload.get('data'), dict) else payload
        if created.get('title'):
            return Update.from_api(created)
    return Update(id='', title=data['title'], description=data['description'], type=data['type'])


def delete_update_service(update_id):
    get_api_client().delete(DELETE_ENDPOINT.format(id=update_id))
    content_logger.info(f"Update {update_id} deleted")
