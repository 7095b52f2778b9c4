"""Contact form JSON API."""

from flask import Blueprint, jsonify, request, current_app
from contactdesk.errors import ValidationError, NotFound, PersistenceError
from contactdesk.validation import validate_submission, validate_status, replace_fields

contact_bp = Blueprint('contact', __name__)


def get_store():
    """The ContactStore registered on the current app."""
    return current_app.extensions['contact_store']


def _payload():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error(exc):
    return jsonify({'message': exc.public_message}), exc.status_code


@contact_bp.route('', methods=['POST'])
def submit():
    """Store a new contact form submission."""
    try:
        fields = validate_submission(_payload())
        contact = get_store().insert(fields)
    except ValidationError as e:
        return _error(e)
    except PersistenceError as e:
        current_app.logger.exception('Error saving contact')
        return _error(e)

    current_app.logger.info('Contact form submission: %r', contact)
    return jsonify({'message': 'Message sent successfully!'})


@contact_bp.route('', methods=['GET'])
def list_contacts():
    """All submissions, newest first."""
    try:
        contacts = get_store().list_all()
    except PersistenceError as e:
        current_app.logger.exception('Error fetching contacts')
        return _error(e)

    return jsonify({'data': [c.to_dict() for c in contacts]})


@contact_bp.route('/<contact_id>', methods=['PUT'])
def update_contact(contact_id):
    """Overwrite the editable fields of a submission."""
    try:
        contact = get_store().replace_by_id(contact_id, replace_fields(_payload()))
        if contact is None:
            raise NotFound()
    except NotFound as e:
        return _error(e)
    except PersistenceError as e:
        current_app.logger.exception('Error updating contact %s', contact_id)
        return _error(e)

    return jsonify({'message': 'Contact updated successfully'})


@contact_bp.route('/<contact_id>/status', methods=['PATCH'])
def update_status(contact_id):
    """Move a submission to another status."""
    try:
        status = validate_status(_payload().get('status'))
        contact = get_store().patch_status_by_id(contact_id, status)
        if contact is None:
            raise NotFound()
    except (ValidationError, NotFound) as e:
        return _error(e)
    except PersistenceError as e:
        current_app.logger.exception('Error updating contact status %s', contact_id)
        return _error(e)

    return jsonify({'message': 'Status updated successfully'})


@contact_bp.route('/<contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    """Remove a submission."""
    try:
        if not get_store().delete_by_id(contact_id):
            raise NotFound()
    except NotFound as e:
        return _error(e)
    except PersistenceError as e:
        current_app.logger.exception('Error deleting contact %s', contact_id)
        return _error(e)

    return jsonify({'message': 'Contact deleted successfully'})
