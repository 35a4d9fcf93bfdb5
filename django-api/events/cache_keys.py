"""Cache keys shared by the views and the invalidation signals.

Responses are cached under the current generation (the cache ``version``).
Every write advances the generation, so a read that fetched rows before a
write and stores them after it lands in a generation nobody reads again.
"""

from django.core.cache import cache

EVENT_LIST_KEY = "events:list"
GENERATION_KEY = "events-meta:generation"


def event_detail_key(event_id: str) -> str:
    return f"events:detail:{event_id}"


def current_generation() -> int:
    cache.add(GENERATION_KEY, 1, timeout=None)
    return cache.get(GENERATION_KEY, 1)


def advance_generation() -> int:
    try:
        return cache.incr(GENERATION_KEY)
    except ValueError:
        # Key was evicted or never set.
        cache.add(GENERATION_KEY, 2, timeout=None)
        return cache.get(GENERATION_KEY, 2)
