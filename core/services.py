"""
Active-event manager.

Only one Event may be active at a time. The active event is never cached
here: every caller asks the database through get_active_event().
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from .exceptions import ActiveEventExists
from .models import AGE_GROUPS, DISTANCES, DIVISIONS, Event, event_name

logger = logging.getLogger(__name__)


def list_events():
    return list(Event.objects.order_by('-created_at', '-id'))


def get_active_event():
    return Event.objects.filter(active=True).first()


def _check_choice(field, value, options):
    if value not in options:
        raise ValidationError(
            {field: f"{value!r} is not one of: {', '.join(options)}"}
        )


def create_event(division, distance, age_group):
    """
    Deactivate whatever is running and start a new active event.

    The deactivate/insert pair runs in one transaction with the active rows
    locked, so a failed insert leaves the old event running. Two racing
    creators do not both succeed: the second one blocks on the lock, then its
    insert hits the single_active_event constraint and the IntegrityError
    propagates. The first creator wins.
    """
    _check_choice('division', division, DIVISIONS)
    _check_choice('distance', distance, DISTANCES)
    _check_choice('age_group', age_group, AGE_GROUPS)

    with transaction.atomic():
        running = list(Event.objects.select_for_update().filter(active=True))
        if running and not getattr(settings, 'XC_SUPERSEDE_ACTIVE_EVENT', True):
            raise ActiveEventExists(running[0])
        for old in running:
            # save() rather than update() so post_save reaches live displays
            old.active = False
            old.save(update_fields=['active'])
            logger.info("Superseded event %s (%s)", old.pk, old.name)

        event = Event.objects.create(
            name=event_name(division, age_group, distance),
            division=division,
            distance=distance,
            age_group=age_group,
            active=True,
        )
    logger.info("Created active event %s (%s)", event.pk, event.name)
    return event


def end_event(event_id):
    """Mark the event inactive. Ending a missing or already ended event is a no-op."""
    with transaction.atomic():
        event = Event.objects.select_for_update().filter(pk=event_id).first()
        if event is None or not event.active:
            logger.debug("end_event(%s): nothing to end", event_id)
            return event
        event.active = False
        event.save(update_fields=['active'])
    logger.info("Ended event %s (%s)", event.pk, event.name)
    return event
