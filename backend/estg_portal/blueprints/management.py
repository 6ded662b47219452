from flask import Blueprint, flash, g, redirect, render_template, request, url_for

from ..blueprints.auth import admin_required, login_required
from ..common.error_handlers import handle_view_errors
from ..common.exceptions import ApiAuthError, ApiError
from ..config.logging_config import management_logger
from ..constants import TAB_CREATORS
from ..domain.creators_service import delete_creator_service, find_creator_service

management_bp = Blueprint('management', __name__, url_prefix='/adminpanel/creators')


@management_bp.before_request
@login_required
@admin_required
def before_request():
    """Content creator accounts are managed by administrators only."""
    pass


def _creators_tab():
    return redirect(url_for('adminpanel.panel', tab=TAB_CREATORS))


@management_bp.route('/<creator_id>/delete', methods=['GET', 'POST'])
@handle_view_errors(message="Failed to delete content creator.", tab=TAB_CREATORS)
def delete_creator(creator_id):
    """
    GET renders the confirmation prompt; POST carries the choice
    (`action=confirm` deletes, anything else cancels).
    """
    if request.method == 'GET':
        try:
            creator = find_creator_service(creator_id)
        except ApiAuthError:
            raise
        except ApiError as e:
            management_logger.error(f"Could not load content creator {creator_id}: {e.message}")
            flash(e.message, 'error')
            return _creators_tab()
        if creator is None:
            flash("Content creator not found.", 'error')
            return _creators_tab()
        return render_template('admin/confirm_delete.html', creator=creator)

    if request.form.get('action') != 'confirm':
        management_logger.info(f"Deletion of content creator {creator_id} cancelled by {g.profile.username}")
        flash("Deletion cancelled", 'info')
        return _creators_tab()

    message = delete_creator_service(creator_id, g.profile.username)
    flash(message or "Content creator deleted successfully", 'success')
    return _creators_tab()
