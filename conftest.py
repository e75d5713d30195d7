import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_cache():
    """Throttle counters and admin sessions live in the cache; start each test empty."""
    cache.clear()
    yield
    cache.clear()
