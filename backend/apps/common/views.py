import os
import time

import redis as redis_lib
import requests
from django.conf import settings
from django.http import JsonResponse

from .logger import get_logger

logger = get_logger(__name__).bind(component='common', layer='health')


def _redis_ping(url: str, timeout: float = 0.3):
    """Session storage check; cart and wishlist degrade to empty while this fails."""
    try:
        client = redis_lib.from_url(url, socket_connect_timeout=timeout, socket_timeout=timeout)
        if client.ping():
            return {'status': 'ok'}
        logger.warning('Redis answered the ping with a falsy reply')
        return {'status': 'fail', 'error': 'unexpected ping reply'}
    except redis_lib.RedisError as e:
        logger.warning('Redis health check failed', error=str(e))
        return {'status': 'fail', 'error': str(e)}


def _backend_check(timeout: float = 1.0):
    """Any HTTP answer from the backend counts as reachable; only transport errors fail."""
    url = getattr(settings, 'BACKEND_API_URL', '')
    if not url:
        return {'status': 'skipped', 'detail': 'BACKEND_API_URL not set'}
    started = time.monotonic()
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning('Backend health check failed', url=url, error=str(e))
        return {'status': 'fail', 'error': str(e)}
    latency = round((time.monotonic() - started) * 1000, 2)
    return {'status': 'ok', 'http_status': response.status_code, 'latency_ms': latency}


def live_health(request):
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe over the backend service and the Redis session store."""
    redis_url = os.getenv('REDIS_URL')
    checks = {
        'backend': _backend_check(),
        'redis': _redis_ping(redis_url) if redis_url else {'status': 'skipped', 'detail': 'REDIS_URL not set'},
    }
    failing = sorted(name for name, result in checks.items() if result.get('status') == 'fail')
    if failing:
        logger.warning('Readiness probe degraded', failing_components=failing)
        return JsonResponse({'status': 'degraded', 'checks': checks}, status=503)
    logger.debug('Readiness probe passed')
    return JsonResponse({'status': 'ok', 'checks': checks})
