"""
Estimation gateway for the custom home builder.

The builder asks the authoritative estimator first (``POST`` to
``ESTIMATOR_API_URL``). Any failure - network error, non-2xx status or a body
without an integer ``estimatedCostRupees`` - is logged and answered by the
local copy of the same formula, so an estimate is always available.

Usage:
    from buildmyhome.services.estimator_client import EstimationService

    service = EstimationService.from_config(current_app.config)
    rupees = service.estimate(config)
"""

import logging

import requests

from buildmyhome.domain.estimation import estimate_cost


logger = logging.getLogger(__name__)


class EstimationUnavailable(Exception):
    """The remote estimator could not produce a usable answer."""


class RemoteEstimator:
    """Thin HTTP client for the estimation endpoint."""

    def __init__(self, url, timeout=3.0, session=None):
        self.url = url
        self.timeout = timeout
        self._http = session or requests

    def estimate(self, config):
        try:
            response = self._http.post(
                self.url,
                json=config.to_estimate_payload(),
                timeout=self.timeout,
                headers={'Content-Type': 'application/json'},
            )
        except requests.RequestException as exc:
            raise EstimationUnavailable(f'Request to {self.url} failed: {exc}') from exc

        if not 200 <= response.status_code < 300:
            raise EstimationUnavailable(f'Estimator returned status {response.status_code}: {response.text[:200]}')

        try:
            value = response.json()['estimatedCostRupees']
        except (ValueError, KeyError, TypeError) as exc:
            raise EstimationUnavailable(f'Malformed estimator response: {exc}') from exc

        if isinstance(value, bool) or not isinstance(value, int):
            raise EstimationUnavailable(f'Estimator returned a non-integer estimate: {value!r}')
        return value


class EstimationService:
    """Remote-first estimator with a local fallback.

    ``last_source`` records which path produced the latest value
    ('remote', 'fallback' or 'local') for diagnostics.
    """

    def __init__(self, remote=None):
        self.remote = remote
        self.last_source = None

    @classmethod
    def from_config(cls, config):
        url = config.get('ESTIMATOR_API_URL')
        if not url:
            return cls()
        return cls(RemoteEstimator(url, timeout=config.get('ESTIMATOR_TIMEOUT_SECONDS', 3.0)))

    def estimate(self, config):
        if self.remote is None:
            self.last_source = 'local'
            return estimate_cost(config)

        try:
            value = self.remote.estimate(config)
            self.last_source = 'remote'
            return value
        except EstimationUnavailable as exc:
            logger.warning('Remote estimate unavailable, using local formula: %s', exc)
            self.last_source = 'fallback'
            return estimate_cost(config)
