from config.throttling import WindowedRateThrottle


class AdminLoginThrottle(WindowedRateThrottle):
    """Limit password attempts per client IP."""

    scope = 'admin_login'
