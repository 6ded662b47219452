"""
Events service
List, read, create and delete school events through the REST API.
"""

from flask import current_app

from ..common.exceptions import ApiResponseError
from ..common.file_validation import has_upload, prepare_image
from ..common.validation import require_fields, sanitize_string
from ..config.logging_config import content_logger
from ..gateway import get_api_client
from .listing import fetch_list
from .models import Event

ADMIN_LIST_ENDPOINT = '/events'
PUBLIC_LIST_ENDPOINT = '/all_events'
PUBLIC_DETAIL_ENDPOINT = '/single_event/{id}'
CREATE_ENDPOINT = '/upload_events'
DELETE_ENDPOINT = '/delete_event/{id}'

ADMIN_SEARCH_FIELDS = ('title', 'description')
PUBLIC_SEARCH_FIELDS = ('title',)


def list_events_service(search=''):
    """Events of the signed-in account, searchable by title and description."""
    return fetch_list(
        lambda: get_api_client().get(ADMIN_LIST_ENDPOINT),
        Event.from_api, 'events', search=search, fields=ADMIN_SEARCH_FIELDS,
    )


def list_public_events_service(search=''):
    """Published events, searchable by title only."""
    return fetch_list(
        lambda: get_api_client().get(PUBLIC_LIST_ENDPOINT),
        Event.from_api, 'public events', search=search, fields=PUBLIC_SEARCH_FIELDS,
    )


def get_public_event_service(event_id):
    """
    Returns the published event, or None when the API does not know the id.
    """
    try:
        payload = get_api_client().get(PUBLIC_DETAIL_ENDPOINT.format(id=event_id))
    except ApiResponseError as e:
        if e.not_found:
            return None
        raise
    if isinstance(payload, dict) and isinstance(payload.get('data'), dict):
        payload = payload['data']
    if not isinstance(payload, dict) or not payload:
        return None
    return Event.from_api(payload)


def list_other_events_service(current_id):
    """Published events except `current_id`, for the "other events" strip of the detail page."""
    state = list_public_events_service()
    return [event for event in state.items if event.id != str(current_id)]


def create_event_service(form, image=None):
    """
    Creates an event. Required fields are checked before anything is sent.

    Args:
        form: mapping with 'title' and 'description'
        image: optional werkzeug FileStorage

    Returns:
        Event built from the API answer (falls back to the submitted values)
    """
    values = require_fields(form, ('title', 'description'))
    data = {
        'title': sanitize_string(values['title'], max_length=200),
        'description': sanitize_string(values['description'], max_length=10000),
    }

    files = None
    if has_upload(image):
        files = {'imageUrl': prepare_image(image, current_app.config.get('MAX_UPLOAD_SIZE'))}

    if files:
        payload = get_api_client().post(CREATE_ENDPOINT, data=data, files=files)
    else:
        payload = get_api_client().post(CREATE_ENDPOINT, json=data)
    content_logger.info(f"Event created: {data['title']}")

    if isinstance(payload, dict):
        created = payload.get('data') if isinstance(payload.get('data'), dict) else payload
        if created.get('title'):
            return Event.from_api(created)
    return Event(id='', title=data['title'], description=data['description'])


def delete_event_service(event_id):
    get_api_client().delete(DELETE_ENDPOINT.format(id=event_id))
    content_logger.info(f"Event {event_id} deleted")


__all__ = [
    'list_events_service', 'list_public_events_service', 'get_public_event_service',
    'list_other_events_service', 'create_event_service', 'delete_event_service',
]
