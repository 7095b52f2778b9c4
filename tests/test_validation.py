import pytest

from contactdesk.errors import ValidationError
from contactdesk.validation import validate_submission, validate_status, replace_fields


class TestValidateSubmission:

    def test_returns_clean_fields(self):
        fields = validate_submission({
            'name': 'A', 'email': 'a@x.com', 'service': 'S', 'message': 'hi',
            'status': 'resolved', 'extra': 'ignored'
        })

        assert fields == {
            'name': 'A', 'email': 'a@x.com', 'phone': '', 'service': 'S', 'message': 'hi'
        }

    def test_keeps_phone(self):
        fields = validate_submission({
            'name': 'A', 'email': 'a@x.com', 'phone': '123', 'service': 'S', 'message': 'hi'
        })

        assert fields['phone'] == '123'

    def test_email_format_not_checked(self):
        fields = validate_submission({
            'name': 'A', 'email': 'not-an-email', 'service': 'S', 'message': 'hi'
        })

        assert fields['email'] == 'not-an-email'

    @pytest.mark.parametrize('payload', [
        {},
        {'name': 'A', 'email': 'a@x.com', 'service': 'S'},
        {'name': 'A', 'email': '', 'service': 'S', 'message': 'hi'},
        {'name': 'A', 'email': 'a@x.com', 'service': None, 'message': 'hi'},
        {'name': ['A'], 'email': 'a@x.com', 'service': 'S', 'message': 'hi'},
    ])
    def test_rejects_missing_or_empty(self, payload):
        with pytest.raises(ValidationError) as excinfo:
            validate_submission(payload)

        assert excinfo.value.public_message == 'All required fields must be filled.'
        assert excinfo.value.status_code == 400

    def test_numbers_and_booleans_become_text(self):
        fields = validate_submission({
            'name': 42, 'email': 'a@x.com', 'phone': 5551234, 'service': True, 'message': 1.5
        })

        assert fields == {
            'name': '42', 'email': 'a@x.com', 'phone': '5551234',
            'service': 'true', 'message': '1.5'
        }


class TestValidateStatus:

    @pytest.mark.parametrize('status', ['new', 'in-progress', 'resolved'])
    def test_accepts_enumerated(self, status):
        assert validate_status(status) == status

    @pytest.mark.parametrize('status', ['NEW', 'in progress', 'resolved ', 'closed', None, 1])
    def test_rejects_anything_else(self, status):
        with pytest.raises(ValidationError):
            validate_status(status)


class TestReplaceFields:

    def test_absent_keys_are_none(self):
        assert replace_fields({'name': 'B'}) == {
            'name': 'B', 'email': None, 'phone': None, 'service': None, 'message': None
        }

    def test_status_is_not_editable(self):
        assert 'status' not in replace_fields({'status': 'resolved'})

    def test_empty_strings_pass_through(self):
        assert replace_fields({'phone': ''})['phone'] == ''
