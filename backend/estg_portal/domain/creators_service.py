"""
Content creator accounts service
Read-only list with delete, restricted to administrators.
"""

from ..config.logging_config import management_logger
from ..gateway import get_api_client
from .listing import fetch_list
from .models import ContentCreator, unwrap_collection

LIST_ENDPOINT = '/account/creators'
DELETE_ENDPOINT = '/account/creators/{id}'

SEARCH_FIELDS = ('username', 'email')


def list_creators_service(search=''):
    """Returns every content creator account."""
    return fetch_list(
        lambda: get_api_client().get(LIST_ENDPOINT),
        ContentCreator.from_api, 'content creators', search=search, fields=SEARCH_FIELDS,
    )


def find_creator_service(creator_id):
    """None only when the list was fetched and the id is not in it."""
    payload = get_api_client().get(LIST_ENDPOINT)
    for row in unwrap_collection(payload):
        if isinstance(row, dict):
            creator = ContentCreator.from_api(row)
            if creator.id == str(creator_id):
                return creator
    return None


def delete_creator_service(creator_id, admin_username=None):
    """
    Deletes a content creator account.

    Returns:
        the API's confirmation message, if it sent one
    """
    payload = get_api_client().delete(DELETE_ENDPOINT.format(id=creator_id))
    management_logger.info(f"Content creator {creator_id} deleted by {admin_username or 'unknown'}")
    if isinstance(payload, dict):
        return payload.get('message')
    return None
