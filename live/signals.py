# live/signals.py
import logging

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from core.models import Event
from results.models import Result
from .broadcast import EVENTS_GROUP, RESULTS_GROUP, broadcast_change_sync

logger = logging.getLogger(__name__)


def _publish(collection, payload):
    """
    Send the change once the surrounding transaction commits, so listeners
    refetching on notification see the new rows. A failed broadcast is logged
    and never breaks the request that made the change.
    """
    def send():
        try:
            broadcast_change_sync(collection, payload)
        except Exception:
            logger.exception("Broadcast to %s failed: %s", collection, payload)

    transaction.on_commit(send)


@receiver(post_save, sender=Event)
def on_event_saved(sender, instance, created, **kwargs):
    _publish(EVENTS_GROUP, {
        "collection": EVENTS_GROUP,
        "action": "insert" if created else "update",
        "id": instance.pk,
        "event_id": instance.pk,
    })


@receiver(post_delete, sender=Event)
def on_event_deleted(sender, instance, **kwargs):
    _publish(EVENTS_GROUP, {
        "collection": EVENTS_GROUP,
        "action": "delete",
        "id": instance.pk,
        "event_id": instance.pk,
    })


@receiver(post_save, sender=Result)
def on_result_saved(sender, instance, created, **kwargs):
    _publish(RESULTS_GROUP, {
        "collection": RESULTS_GROUP,
        "action": "insert" if created else "update",
        "id": instance.pk,
        "event_id": instance.event_id,
    })


@receiver(post_delete, sender=Result)
def on_result_deleted(sender, instance, **kwargs):
    _publish(RESULTS_GROUP, {
        "collection": RESULTS_GROUP,
        "action": "delete",
        "id": instance.pk,
        "event_id": instance.event_id,
    })
