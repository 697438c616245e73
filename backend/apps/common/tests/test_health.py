import json
import unittest
from unittest import mock

import redis as redis_lib
import requests
from django.test import override_settings

from apps.common import views


class HealthViewsUnitTests(unittest.TestCase):
    def test_live_health_returns_alive_payload(self):
        response = views.live_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'alive')

    @mock.patch('apps.common.views.os.getenv', return_value=None)
    @mock.patch('apps.common.views._backend_check', return_value={'status': 'ok', 'latency_ms': 1.23})
    def test_ready_health_ok_when_dependencies_pass(self, mock_backend_check, _mock_getenv):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 200)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'ok')
        self.assertEqual(payload['checks']['backend'], mock_backend_check.return_value)
        self.assertEqual(payload['checks']['redis']['status'], 'skipped')

    @mock.patch('apps.common.views.os.getenv', return_value='redis://localhost')
    @mock.patch('apps.common.views._redis_ping', return_value={'status': 'fail', 'error': 'unreachable'})
    @mock.patch('apps.common.views._backend_check', return_value={'status': 'fail', 'error': 'refused'})
    def test_ready_health_degraded_on_dependency_failure(self, mock_backend_check, mock_redis_ping, _mock_getenv):
        response = views.ready_health(None)
        self.assertEqual(response.status_code, 503)
        payload = json.loads(response.content)
        self.assertEqual(payload['status'], 'degraded')
        self.assertEqual(payload['checks']['backend'], mock_backend_check.return_value)
        self.assertEqual(payload['checks']['redis'], mock_redis_ping.return_value)

    @override_settings(BACKEND_API_URL='http://backend/api')
    @mock.patch('apps.common.views.requests.get')
    def test_backend_check_counts_any_http_answer(self, mock_get):
        mock_get.return_value = mock.Mock(status_code=404)
        result = views._backend_check()
        self.assertEqual(result['status'], 'ok')
        self.assertEqual(result['http_status'], 404)

    @override_settings(BACKEND_API_URL='http://backend/api')
    @mock.patch('apps.common.views.requests.get', side_effect=requests.ConnectionError('refused'))
    def test_backend_check_fails_on_transport_error(self, _mock_get):
        self.assertEqual(views._backend_check()['status'], 'fail')

    @override_settings(BACKEND_API_URL='')
    def test_backend_check_skipped_without_url(self):
        self.assertEqual(views._backend_check()['status'], 'skipped')

    @mock.patch('apps.common.views.redis_lib.from_url')
    def test_redis_ping_reports_connection_errors(self, mock_from_url):
        mock_from_url.return_value.ping.side_effect = redis_lib.ConnectionError('refused')
        result = views._redis_ping('redis://localhost')
        self.assertEqual(result['status'], 'fail')
        self.assertIn('refused', result['error'])
