"""JSON API endpoints for contact submissions."""

from flask import Blueprint, current_app, jsonify, request

api_bp = Blueprint('api', __name__)


def _submission_payload():
    """Request body as a dict, from JSON or a url-encoded form."""
    if request.is_json:
        data = request.get_json(silent=True)
        return data if isinstance(data, dict) else {}
    return request.form.to_dict()


@api_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Save a contact submission and notify the owner."""
    handler = current_app.extensions['submission_handler']
    return jsonify(handler.submit(_submission_payload()))


@api_bp.route('/send-email', methods=['POST'])
def send_email():
    """Send the owner notification without saving the submission."""
    handler = current_app.extensions['submission_handler']
    outcome = handler.send_only(_submission_payload())
    return jsonify(outcome.to_dict()), 200 if outcome.success else 500


@api_bp.route('/contacts')
def list_contacts():
    """All contacts with their email log entries."""
    store = current_app.extensions['record_store']
    return jsonify(store.list_contacts())


@api_bp.route('/contacts/<int:contact_id>')
def get_contact(contact_id):
    """Single contact with its first email log entry."""
    store = current_app.extensions['record_store']
    contact = store.get_contact(contact_id)

    if contact is None:
        return jsonify({'error': 'Contact not found'}), 404

    return jsonify(contact)


@api_bp.route('/health')
def health():
    """Database reachability and email configuration status."""
    store = current_app.extensions['record_store']
    email_config = current_app.extensions['notifier'].validate_configuration()

    return jsonify({
        'status': 'OK',
        'database': 'Connected' if store.ping() else 'Disconnected',
        'email': 'Configured' if email_config['is_valid'] else 'Not configured',
        'missingConfig': email_config['missing']
    })
