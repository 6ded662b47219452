from flask import Blueprint, abort, flash, g, redirect, render_template, request, url_for

from ..blueprints.auth import login_required
from ..common.error_handlers import handle_view_errors
from ..common.exceptions import ApiAuthError, ApiError, ValidationError
from ..config.logging_config import content_logger, security_logger
from ..constants import (
    ADMIN_TABS,
    DEFAULT_TAB,
    EMPTY_STATES,
    NO_MATCH_STATES,
    TAB_CREATORS,
    TAB_EVENTS,
    TAB_PROFILE,
    TAB_UPDATES,
    UPDATE_TYPES,
)
from ..domain.creators_service import list_creators_service
from ..domain.events_service import create_event_service, delete_event_service, list_events_service
from ..domain.updates_service import (
    create_update_service,
    delete_update_service,
    find_update_service,
    list_updates_service,
)

adminpanel_bp = Blueprint('adminpanel', __name__)

PROFILE_FIELDS = ('email', 'username', 'password')


@adminpanel_bp.before_request
@login_required
def before_request():
    """Every panel page goes through the session gate."""
    pass


def visible_tabs(profile):
    """Tabs the role may open, in sidebar order."""
    role = profile.role if profile else None
    return [(key, label) for key, label, roles in ADMIN_TABS if roles is None or role in roles]


def _resolve_tab(requested):
    allowed = [key for key, _ in visible_tabs(g.profile)] + [TAB_PROFILE]
    if requested in allowed:
        return requested
    if requested == TAB_CREATORS:
        security_logger.warning(f"Role {g.profile.role} asked for the content creators tab")
    return DEFAULT_TAB


def _panel_redirect(tab, search=''):
    if search:
        return redirect(url_for('adminpanel.panel', tab=tab, q=search))
    return redirect(url_for('adminpanel.panel', tab=tab))


@adminpanel_bp.route('/adminpanel')
def panel():
    tab = _resolve_tab(request.args.get('tab', DEFAULT_TAB))
    search = (request.args.get('q') or '').strip()

    context = {
        'tab': tab,
        'search': search,
        'state': None,
        'empty_state': EMPTY_STATES.get(tab),
        'no_match_state': NO_MATCH_STATES.get(tab),
    }

    if tab == TAB_UPDATES:
        state = list_updates_service(search)
        if state.error:
            flash("Failed to fetch updates", 'error')
        context['state'] = state
    elif tab == TAB_EVENTS:
        context['state'] = list_events_service(search)
    elif tab == TAB_CREATORS:
        context['state'] = list_creators_service(search)
    else:
        edit = request.args.get('edit')
        context['edit'] = edit if edit in PROFILE_FIELDS else None
        context['show_backup'] = request.args.get('show_backup') == '1'

    return render_template('admin/panel.html', **context)


@adminpanel_bp.route('/adminpanel/events/<event_id>/delete', methods=['POST'])
@handle_view_errors(message="Failed to delete the event. Please try again.", keep_search=True, tab=TAB_EVENTS)
def delete_event(event_id):
    delete_event_service(event_id)
    flash("Event deleted successfully!", 'success')
    return _panel_redirect(TAB_EVENTS, request.form.get('q', ''))


@adminpanel_bp.route('/adminpanel/updates/<update_id>/delete', methods=['POST'])
@handle_view_errors(message="Failed to delete the update. Please try again.", keep_search=True, tab=TAB_UPDATES)
def delete_update(update_id):
    delete_update_service(update_id)
    flash("Update deleted successfully!", 'success')
    return _panel_redirect(TAB_UPDATES, request.form.get('q', ''))


@adminpanel_bp.route('/createevent', methods=['GET', 'POST'])
def create_event():
    """Event form. Required fields are checked before anything reaches the API."""
    if request.method == 'GET':
        return render_template('admin/create_event.html', form={})

    try:
        create_event_service(request.form, request.files.get('imageUrl'))
    except ValidationError as e:
        flash(e.message, 'warning')
        return render_template('admin/create_event.html', form=request.form), 400
    except ApiAuthError:
        raise
    except ApiError as e:
        content_logger.error(f"Error creating event: {e.message}")
        flash("Failed to create event. Please try again.", 'error')
        return render_template('admin/create_event.html', form=request.form), 502

    flash("Event created successfully!", 'success')
    return redirect(url_for('adminpanel.panel', tab=TAB_EVENTS))


@adminpanel_bp.route('/createupdate', methods=['GET', 'POST'])
def create_update():
    if request.method == 'GET':
        return render_template('admin/create_update.html', form={}, types=UPDATE_TYPES)

    try:
        create_update_service(request.form, request.files.get('fileUrl'))
    except ValidationError as e:
        flash(e.message, 'warning')
        return render_template('admin/create_update.html', form=request.form, types=UPDATE_TYPES), 400
    except ApiAuthError:
        raise
    except ApiError as e:
        content_logger.error(f"Error creating update: {e.message}")
        flash("Failed to create update. Please try again.", 'error')
        return render_template('admin/create_update.html', form=request.form, types=UPDATE_TYPES), 502

    flash("Update created successfully!", 'success')
    return redirect(url_for('adminpanel.panel', tab=TAB_UPDATES))


@adminpanel_bp.route('/update/<update_id>')
@handle_view_errors(tab=TAB_UPDATES)
def view_update(update_id):
    update = find_update_service(update_id)
    if update is None:
        abort(404)
    return render_template('admin/view_update.html', update=update)
