"""Custom home builder wizard endpoints."""

import pytest
import requests

from buildmyhome.extensions import db as _db
from buildmyhome.models import Inquiry, Package, SavedPlan


SNAPSHOT_KEY = 'homeBuilderDetails'

ALL_MATERIALS = {'flooring': '1', 'walls': '5', 'kitchen': '3', 'bathroom': '4', 'doors': '6'}


def _advance_to_summary(client):
    client.post('/custom-builder/next')
    client.post('/custom-builder/next', json={'floorPlan': 'open', 'ceilingHeight': 'high', 'windowStyle': 'large'})
    client.post('/custom-builder/materials', json={'materials': ALL_MATERIALS})
    client.post('/custom-builder/next')
    return client.post('/custom-builder/next', json={'interiorType': 'premium', 'appliances': ['ac']})


def test_initial_state(client):
    data = client.get('/custom-builder/state').get_json()
    assert data['step'] == 'basics'
    assert data['canAdvance'] is True
    assert data['config']['landAreaSqFt'] == 1000
    assert data['config']['estimatedCostRupees'] == 2200000


def test_update_recomputes_and_persists(client):
    response = client.post('/custom-builder/update', json={'landAreaSqFt': 1200, 'floors': 2, 'interiorType': 'premium'})
    assert response.status_code == 200
    response = client.post('/custom-builder/materials', json={'category': 'flooring', 'item': '1'})
    assert response.get_json()['config']['estimatedCostRupees'] == 3993000

    with client.session_transaction() as sess:
        snapshot = sess[SNAPSHOT_KEY]
    assert snapshot['config']['landAreaSqFt'] == 1200
    assert snapshot['config']['estimatedCostRupees'] == 3993000
    assert snapshot['step'] == 'basics'


def test_invalid_update_returns_field(client):
    response = client.post('/custom-builder/update', json={'floors': 0})
    assert response.status_code == 400
    assert response.get_json()['field'] == 'floors'

    response = client.post('/custom-builder/update', json={'houseType': 'castle'})
    assert response.get_json()['field'] == 'houseType'


def test_blocked_next_reports_without_error(client):
    client.post('/custom-builder/update', json={'landAreaSqFt': 0})
    response = client.post('/custom-builder/next')
    assert response.status_code == 200
    data = response.get_json()
    assert data['ok'] is False
    assert data['canAdvance'] is False
    assert 'message' not in data
    assert client.get('/custom-builder/state').get_json()['step'] == 'basics'


def test_materials_step_requires_required_categories(client):
    client.post('/custom-builder/next')
    client.post('/custom-builder/next')
    state = client.get('/custom-builder/state').get_json()
    assert state['step'] == 'materials'
    assert state['canAdvance'] is False
    assert state['missingMaterials'] == ['flooring', 'walls', 'kitchen', 'bathroom', 'doors']

    client.post('/custom-builder/materials', json={'materials': ALL_MATERIALS})
    assert client.post('/custom-builder/next').get_json()['step'] == 'interiors'


@pytest.mark.parametrize('materials', [['flooring'], 'flooring'])
def test_materials_must_be_an_object(client, materials):
    response = client.post('/custom-builder/materials', json={'materials': materials})
    assert response.status_code == 400
    assert response.get_json()['field'] == 'materials'
    assert client.get('/custom-builder/state').get_json()['config']['materials'] == {}


def test_builder_inquiry_rejects_numeric_phone(client):
    _advance_to_summary(client)
    response = client.post('/custom-builder/inquiry', json={
        'fullName': 'Meera Nair',
        'phoneNumber': 9988776655,
        'location': 'Kochi',
    })
    assert response.status_code == 400
    assert 'phoneNumber' in response.get_json()['errors']
    assert Inquiry.query.count() == 0


def test_full_walk_and_back(client):
    summary = _advance_to_summary(client).get_json()
    assert summary['step'] == 'summary'
    assert summary['config']['interiorType'] == 'premium'
    assert summary['config']['design']['ceilingHeight'] == 'high'

    back = client.post('/custom-builder/back').get_json()
    assert back['step'] == 'interiors'
    assert back['config'] == summary['config']


def test_reload_restores_state(client):
    _advance_to_summary(client)
    before = client.get('/custom-builder/state').get_json()

    with client.session_transaction() as sess:
        assert sess[SNAPSHOT_KEY]['step'] == 'summary'

    after = client.get('/custom-builder/state').get_json()
    assert after['config'] == before['config']
    assert after['step'] == 'summary'


def test_reset_clears_snapshot(client):
    client.post('/custom-builder/update', json={'landAreaSqFt': 3000})
    data = client.post('/custom-builder/reset').get_json()
    assert data['step'] == 'basics'
    assert data['config']['landAreaSqFt'] == 1000

    with client.session_transaction() as sess:
        assert SNAPSHOT_KEY not in sess


def test_start_from_package(client, catalog):
    package = Package.query.filter_by(name='Luxury 3BHK Villa').one()
    data = client.post('/custom-builder/start', json={'packageId': package.id}).get_json()
    assert data['packageId'] == package.id
    assert data['config']['landAreaSqFt'] == 1800
    assert data['config']['bedrooms'] == 3
    assert data['config']['houseType'] == 'contemporary'

    assert client.post('/custom-builder/start', json={'packageId': 999}).status_code == 404


def test_interiors_toggle(client):
    client.post('/custom-builder/interiors', json={'toggleAppliance': 'microwave'})
    data = client.post('/custom-builder/interiors', json={'toggleAppliance': 'ac'}).get_json()
    assert data['config']['interiors']['appliances'] == ['ac', 'microwave']


def test_save_plan_twice_shows_already_saved(client):
    client.post('/custom-builder/update', json={'landAreaSqFt': 1500})
    first = client.post('/custom-builder/save-plan').get_json()
    assert first['saved'] is True

    client.post('/custom-builder/update', json={'bedrooms': 4})
    second = client.post('/custom-builder/save-plan').get_json()
    assert second['saved'] is False
    assert second['alreadySaved'] is True
    assert 'already' in second['message']
    assert second['count'] == 1

    assert SavedPlan.query.count() == 1


def test_inquiry_attaches_configuration(client):
    _advance_to_summary(client)
    response = client.post('/custom-builder/inquiry', json={
        'fullName': 'Meera Nair',
        'phoneNumber': '9988776655',
        'location': 'Kochi',
    })
    assert response.status_code == 201
    assert response.get_json()['ok'] is True

    inquiry = Inquiry.query.one()
    assert inquiry.source == Inquiry.SOURCE_BUILDER
    assert inquiry.custom_package['interiorType'] == 'premium'
    assert inquiry.custom_package['materials'] == ALL_MATERIALS


def test_inquiry_requires_location(client):
    response = client.post('/custom-builder/inquiry', json={'fullName': 'Meera Nair', 'phoneNumber': '9988776655'})
    assert response.status_code == 400
    assert 'location' in response.get_json()['errors']


def test_inquiry_storage_failure_keeps_state(client, monkeypatch):
    _advance_to_summary(client)

    def failing_commit():
        raise RuntimeError('database unavailable')

    # Requests reuse the test app context, so they share this session.
    monkeypatch.setattr(_db.session(), 'commit', failing_commit)
    response = client.post('/custom-builder/inquiry', json={
        'fullName': 'Meera Nair',
        'phoneNumber': '9988776655',
        'location': 'Kochi',
    })
    monkeypatch.undo()

    assert response.status_code == 500
    assert response.get_json()['ok'] is False
    state = client.get('/custom-builder/state').get_json()
    assert state['step'] == 'summary'
    assert state['config']['interiorType'] == 'premium'


def test_estimate_pdf(client):
    client.post('/custom-builder/update', json={'landAreaSqFt': 1200})
    response = client.get('/custom-builder/estimate.pdf')
    assert response.status_code == 200
    assert response.mimetype == 'application/pdf'
    assert response.data.startswith(b'%PDF')


class TestRemoteEstimator:
    @pytest.fixture
    def app_overrides(self):
        return {'ESTIMATOR_API_URL': 'http://estimator.test/api/calculate-cost'}

    def test_remote_estimate_is_adopted(self, client, monkeypatch, fake_response):
        monkeypatch.setattr(requests, 'post', lambda *a, **kw: fake_response(200, {'estimatedCostRupees': 4242000}))
        data = client.post('/custom-builder/update', json={'landAreaSqFt': 1200}).get_json()
        assert data['config']['estimatedCostRupees'] == 4242000

    def test_remote_failure_still_updates_estimate(self, client, monkeypatch):
        def refuse(*args, **kwargs):
            raise requests.ConnectionError('refused')

        monkeypatch.setattr(requests, 'post', refuse)
        data = client.post('/custom-builder/update', json={'landAreaSqFt': 1500}).get_json()
        assert data['config']['estimatedCostRupees'] == 3300000
