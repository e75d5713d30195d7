"""
Request throttles shared by all apps.

DRF rate strings only support a single unit (``10/m``). The throttles
here also accept a multiplier, so ``1000/15m`` means 1000 requests per
fifteen minutes. Every throttle is keyed by client IP (respecting
``NUM_PROXIES``), since the app has no user accounts.
"""

import re

from rest_framework.throttling import SimpleRateThrottle

_RATE = re.compile(r'^(?P<num>\d+)/(?P<multiplier>\d*)(?P<unit>[smhd])')
_UNIT_SECONDS = {'s': 1, 'm': 60, 'h': 3600, 'd': 86400}


class WindowedRateThrottle(SimpleRateThrottle):
    """Client-IP throttle whose rate may use a multi-unit window."""

    def parse_rate(self, rate):
        if rate is None:
            return (None, None)
        match = _RATE.match(rate)
        if not match:
            raise ValueError(f"Invalid throttle rate: {rate!r}")
        multiplier = int(match.group('multiplier') or 1)
        duration = multiplier * _UNIT_SECONDS[match.group('unit')]
        return (int(match.group('num')), duration)

    def get_cache_key(self, request, view):
        return self.cache_format % {
            'scope': self.scope,
            'ident': self.get_ident(request),
        }


class GeneralRateThrottle(WindowedRateThrottle):
    """Applied to every API request."""
    scope = 'general'
