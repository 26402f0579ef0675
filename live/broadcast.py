# live/broadcast.py
from channels.layers import get_channel_layer
from asgiref.sync import async_to_sync

EVENTS_GROUP = "events"
RESULTS_GROUP = "results"
COLLECTION_GROUPS = (EVENTS_GROUP, RESULTS_GROUP)


def broadcast_change_sync(collection: str, payload: dict, msg_type: str = "collection_change"):
    """
    Synchronous helper (for sync contexts, e.g. model signals).
    """
    layer = get_channel_layer()
    async_to_sync(layer.group_send)(
        collection,
        {"type": msg_type, "message": payload},
    )

