"""Remote estimator client and local fallback."""

import logging

import pytest
import requests

from buildmyhome.domain.estimation import estimate_cost
from buildmyhome.domain.home_configuration import HomeConfiguration
from buildmyhome.services.estimator_client import EstimationService, EstimationUnavailable, RemoteEstimator


URL = 'http://estimator.test/api/calculate-cost'


@pytest.fixture
def config():
    return HomeConfiguration(land_area_sqft=1200, floors=2, interior_type='premium', materials={'flooring': '1'})


def test_remote_value_is_used(monkeypatch, config, fake_response):
    captured = {}

    def fake_post(url, json=None, timeout=None, headers=None):
        captured.update(url=url, json=json, timeout=timeout)
        return fake_response(200, {'estimatedCostRupees': 4100000})

    monkeypatch.setattr(requests, 'post', fake_post)
    service = EstimationService(RemoteEstimator(URL, timeout=2))

    assert service.estimate(config) == 4100000
    assert service.last_source == 'remote'
    assert captured['url'] == URL
    assert captured['timeout'] == 2
    assert captured['json']['landAreaSqFt'] == 1200
    assert captured['json']['materials'] == {'flooring': '1'}


def test_network_error_falls_back(monkeypatch, config, caplog):
    def fake_post(*args, **kwargs):
        raise requests.ConnectionError('connection refused')

    monkeypatch.setattr(requests, 'post', fake_post)
    service = EstimationService(RemoteEstimator(URL))

    with caplog.at_level(logging.WARNING, logger='buildmyhome.services.estimator_client'):
        assert service.estimate(config) == 3993000
    assert service.last_source == 'fallback'
    assert 'Remote estimate unavailable' in caplog.text


@pytest.mark.parametrize('status, payload', [
    (500, {'message': 'boom'}),
    (400, {'message': 'Must be at least 100', 'field': 'landAreaSqFt'}),
    (200, {'estimate': 1}),
    (200, {'estimatedCostRupees': 'lots'}),
    (200, ValueError('not json')),
])
def test_bad_responses_fall_back(monkeypatch, config, fake_response, status, payload):
    monkeypatch.setattr(requests, 'post', lambda *a, **kw: fake_response(status, payload))
    service = EstimationService(RemoteEstimator(URL))

    assert service.estimate(config) == estimate_cost(config)
    assert service.last_source == 'fallback'


def test_remote_client_raises_unavailable(monkeypatch, config, fake_response):
    monkeypatch.setattr(requests, 'post', lambda *a, **kw: fake_response(503, {}))
    with pytest.raises(EstimationUnavailable):
        RemoteEstimator(URL).estimate(config)


def test_without_url_estimates_locally(config):
    service = EstimationService.from_config({'ESTIMATOR_API_URL': None})
    assert service.remote is None
    assert service.estimate(config) == 3993000
    assert service.last_source == 'local'


def test_from_config_builds_remote_client():
    service = EstimationService.from_config({'ESTIMATOR_API_URL': URL, 'ESTIMATOR_TIMEOUT_SECONDS': 1.5})
    assert isinstance(service.remote, RemoteEstimator)
    assert service.remote.timeout == 1.5
