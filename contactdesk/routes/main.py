"""Landing page."""

from flask import Blueprint, current_app, send_from_directory

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Serve the static landing page."""
    page = current_app.config.get('LANDING_PAGE', 'index.html')
    return send_from_directory(current_app.static_folder, page)
