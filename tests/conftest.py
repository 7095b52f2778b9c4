import pytest

from contactdesk import create_app


@pytest.fixture
def app():
    return create_app('testing')


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def stored(app):
    """Snapshot of the stored records, read in a fresh app context."""
    def snapshot():
        with app.app_context():
            store = app.extensions['contact_store']
            return [c.to_dict() for c in store.list_all()]
    return snapshot


@pytest.fixture
def valid_submission():
    return {
        'name': 'John Doe',
        'email': 'john@example.com',
        'phone': '555-0100',
        'service': 'Web Design',
        'message': 'I would like a quote for a new website.'
    }


@pytest.fixture
def sample_contact(app, valid_submission):
    """A stored submission, returned as its public dict."""
    with app.app_context():
        return app.extensions['contact_store'].insert(valid_submission).to_dict()
