from flask import Blueprint, abort, current_app, flash, redirect, render_template, request, url_for

from ..common.exceptions import ApiError
from ..common.pagination import ShowMore, get_show_arg
from ..config.logging_config import content_logger
from ..constants import EMPTY_STATES, NO_MATCH_STATES
from ..domain.events_service import get_public_event_service, list_other_events_service, list_public_events_service
from ..domain.updates_service import list_public_updates_service

public_bp = Blueprint('public', __name__)

HOME_PREVIEW_SIZE = 3


def _search_term():
    return (request.args.get('q') or '').strip()


@public_bp.route('/')
def index():
    events = list_public_events_service()
    updates = list_public_updates_service()
    return render_template(
        'public/index.html',
        events=events.items[:HOME_PREVIEW_SIZE],
        updates=updates.items[:HOME_PREVIEW_SIZE],
    )


@public_bp.route('/events')
def events():
    """Published events, title search, 'See More' paging through ?show=."""
    state = list_public_events_service(_search_term())
    filtered = state.filtered
    window = ShowMore(
        shown=get_show_arg(current_app.config['PUBLIC_PAGE_SIZE']),
        step=current_app.config['PUBLIC_PAGE_STEP'],
        total=len(filtered),
    )
    return render_template(
        'public/events.html',
        state=state,
        events=window.slice(filtered),
        window=window,
        empty_state=EMPTY_STATES['public_events'],
        no_match_state=NO_MATCH_STATES['public_events'],
    )


@public_bp.route('/events/<event_id>')
def event_detail(event_id):
    try:
        event = get_public_event_service(event_id)
    except ApiError as e:
        content_logger.error(f"Error fetching event {event_id}: {e.message} {e.details}")
        flash(e.message, 'error')
        return redirect(url_for('public.events'))
    if event is None:
        abort(404)

    others = list_other_events_service(event.id or event_id)
    window = ShowMore(
        shown=get_show_arg(current_app.config['RELATED_PAGE_SIZE'], param='more'),
        step=current_app.config['RELATED_PAGE_SIZE'],
        total=len(others),
    )
    return render_template(
        'public/event_detail.html',
        event=event,
        others=window.slice(others),
        window=window,
    )


@public_bp.route('/updates')
def updates():
    """Published announcements; long descriptions are cut unless ?expand=<id>."""
    state = list_public_updates_service(_search_term())
    filtered = state.filtered
    window = ShowMore(
        shown=get_show_arg(current_app.config['PUBLIC_PAGE_SIZE']),
        step=current_app.config['PUBLIC_PAGE_STEP'],
        total=len(filtered),
    )
    return render_template(
        'public/updates.html',
        state=state,
        updates=window.slice(filtered),
        window=window,
        expanded=request.args.get('expand'),
        excerpt_length=current_app.config['UPDATE_EXCERPT_LENGTH'],
        empty_state=EMPTY_STATES['public_updates'],
        no_match_state=NO_MATCH_STATES['public_updates'],
    )
