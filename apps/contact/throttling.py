from config.throttling import WindowedRateThrottle


class ContactThrottle(WindowedRateThrottle):
    """Limit contact form submissions per client IP."""

    scope = 'contact'
