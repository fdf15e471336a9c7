"""
API Middleware
==============
Rate limiting, authentication, and request handling middleware.
"""
import time
import hashlib
import threading
from functools import wraps
from collections import defaultdict
from typing import Callable, Optional, Tuple
from flask import request, jsonify, g

from news_translator.config import config
from news_translator.utils.logging import get_logger


class RateLimiter:
    """
    In-memory per-client rate limiter.

    Keeps request timestamps of the last minute for each client.
    """

    def __init__(self, requests_per_minute: int = 60):
        self.requests_per_minute = requests_per_minute
        self.requests: dict = defaultdict(list)
        self.lock = threading.Lock()
        self.logger = get_logger().api_logger

    def _get_client_id(self) -> str:
        """Get unique client identifier."""
        # Use X-Forwarded-For if behind proxy
        forwarded = request.headers.get('X-Forwarded-For')
        if forwarded:
            ip = forwarded.split(',')[0].strip()
        else:
            ip = request.remote_addr or 'unknown'

        api_key = request.headers.get('X-API-Key', '')
        return hashlib.sha256(f"{ip}:{api_key}".encode()).hexdigest()[:16]

    def is_allowed(self, client_id: str = None, now: float = None) -> Tuple[bool, dict]:
        """
        Record a request and check it against the limit.

        Returns:
            Tuple of (allowed, info_dict)
        """
        client_id = client_id or self._get_client_id()
        now = now if now is not None else time.time()
        window_start = now - 60

        with self.lock:
            recent = [ts for ts in self.requests[client_id] if ts > window_start]
            self.requests[client_id] = recent

            if len(recent) >= self.requests_per_minute:
                retry_after = int(recent[0] - window_start + 1)
                self.logger.warning(f"Rate limit hit for client {client_id}")
                return False, {
                    'limit': self.requests_per_minute,
                    'remaining': 0,
                    'reset': retry_after
                }

            recent.append(now)
            return True, {
                'limit': self.requests_per_minute,
                'remaining': self.requests_per_minute - len(recent),
                'reset': 60
            }

    def reset(self):
        with self.lock:
            self.requests.clear()


# Global instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter(config.security.rate_limit_per_minute)
    return _rate_limiter


def rate_limit(f: Callable) -> Callable:
    """Rate limiting decorator."""
    @wraps(f)
    def decorated(*args, **kwargs):
        allowed, info = get_rate_limiter().is_allowed()
        g.rate_limit_info = info

        if not allowed:
            return jsonify({
                'error': 'Rate limit exceeded',
                'retry_after': info['reset']
            }), 429

        return f(*args, **kwargs)

    return decorated


def require_api_key(f: Callable) -> Callable:
    """Check X-API-Key when API_KEY is configured."""
    @wraps(f)
    def decorated(*args, **kwargs):
        expected = config.security.api_key
        if not expected:
            return f(*args, **kwargs)

        api_key = request.headers.get('X-API-Key')
        if not api_key:
            return jsonify({'error': 'API key required'}), 401
        if api_key != expected:
            return jsonify({'error': 'Invalid API key'}), 403

        return f(*args, **kwargs)

    return decorated


def add_rate_limit_headers(response):
    """Add rate limit headers to response."""
    if hasattr(g, 'rate_limit_info'):
        info = g.rate_limit_info
        response.headers['X-RateLimit-Limit'] = str(info['limit'])
        response.headers['X-RateLimit-Remaining'] = str(info['remaining'])
        response.headers['X-RateLimit-Reset'] = str(info['reset'])
    return response
