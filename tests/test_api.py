"""
Tests for the JSON API endpoints
"""
from unittest.mock import patch

from jobapps.errors import StorageError
from jobapps.models import NOT_FOUND


LINKEDIN_TEXT = "Location: San Francisco, CA\nCompany: Acme Corp"


def save(client, **payload):
    return client.post('/api/v1/applications', json=payload)


class TestTrackEndpoint:
    def test_track_returns_draft(self, client):
        response = client.post('/api/v1/applications/track',
                               json={'raw_text': LINKEDIN_TEXT, 'platform': 'linkedin'})
        data = response.get_json()

        assert response.status_code == 200
        assert data['company'] == "Acme Corp"
        assert data['position'] == NOT_FOUND
        assert data['app_id'] is None
        assert data['state'] == 'draft'
        assert data['report']['found']['location'] is True
        assert client.get('/api/v1/applications').get_json()['total'] == 0

    def test_unsupported_platform(self, client):
        response = client.post('/api/v1/applications/track',
                               json={'raw_text': LINKEDIN_TEXT, 'platform': 'indeed'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'unsupported_platform'

    def test_empty_input(self, client):
        response = client.post('/api/v1/applications/track', json={'platform': 'linkedin'})

        assert response.status_code == 400
        assert response.get_json()['error'] == 'empty_input'

    def test_not_json(self, client):
        response = client.post('/api/v1/applications/track', data='nope')
        assert response.status_code == 400

    def test_invalid_fields_use_error_shape(self, client):
        response = client.post('/api/v1/applications/track',
                               json={'raw_text': 123, 'platform': 'linkedin'})
        data = response.get_json()

        assert response.status_code == 400
        assert data['error'] == 'validation_error'
        assert 'raw_text' in data['errors']


class TestSaveEndpoints:
    def test_create(self, client):
        response = save(client, company="Acme Corp", position="Engineer")
        data = response.get_json()

        assert response.status_code == 201
        assert data['app_id'] is not None
        assert data['status'] == 'SUBMITTED'
        assert data['date_applied'] is not None
        assert data['location'] == NOT_FOUND

    def test_update_with_app_id(self, client):
        created = save(client, company="Acme Corp").get_json()
        created['status'] = 'PHONE_SCREEN'

        response = client.post('/api/v1/applications', json=created)

        assert response.status_code == 200
        assert response.get_json()['status'] == 'PHONE_SCREEN'
        assert client.get('/api/v1/applications').get_json()['total'] == 1

    def test_put(self, client):
        created = save(client, company="Acme Corp").get_json()

        response = client.put(f"/api/v1/applications/{created['app_id']}",
                              json={'company': "Acme Corporation", 'notes': "Onsite next week"})

        assert response.status_code == 200
        assert response.get_json()['company'] == "Acme Corporation"
        assert response.get_json()['date_applied'] == created['date_applied']

    def test_put_unknown(self, client):
        response = client.put('/api/v1/applications/404', json={'company': "Acme"})
        assert response.status_code == 404

    def test_invalid_status(self, client):
        response = save(client, company="Acme", status="INTERVIEWING")

        assert response.status_code == 400
        assert 'status' in response.get_json()['errors']
        assert client.get('/api/v1/applications').get_json()['applications'] == []

    def test_storage_error(self, client, app):
        store = app.extensions['record_store']
        with patch.object(store, 'save', side_effect=StorageError('Failed to save application')):
            response = save(client, company="Acme")

        assert response.status_code == 503
        assert response.get_json()['error'] == 'storage_error'


class TestReadEndpoints:
    def test_list_empty(self, client):
        response = client.get('/api/v1/applications')

        assert response.status_code == 200
        assert response.get_json() == {'applications': [], 'total': 0}

    def test_get_and_delete(self, client):
        created = save(client, company="Acme").get_json()
        url = f"/api/v1/applications/{created['app_id']}"

        assert client.get(url).get_json()['company'] == "Acme"
        assert client.delete(url).status_code == 200
        assert client.get(url).status_code == 404

    def test_search(self, client):
        save(client, company="Acme Corp", position="Engineer", notes="met at meetup")
        save(client, company="Globex", position="Engineer")

        by_company = client.get('/api/v1/applications/search?q=acme').get_json()
        by_notes = client.get('/api/v1/applications/search?q=meetup&mode=full_text').get_json()
        by_position = client.get('/api/v1/applications/search?q=engineer&mode=position').get_json()

        assert [a['company'] for a in by_company['applications']] == ["Acme Corp"]
        assert by_notes['total'] == 1
        assert by_position['total'] == 2

    def test_search_bad_mode(self, client):
        response = client.get('/api/v1/applications/search?q=acme&mode=fuzzy')
        assert response.status_code == 400
