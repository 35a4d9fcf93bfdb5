"""Django signals for cache invalidation."""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.cache_keys import advance_generation
from events.models import Event

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate cached event responses when an event is saved or deleted."""
    generation = advance_generation()
    logger.debug(f"Event {instance.id} changed; cache generation is now {generation}")
