"""
Per-display state behind the live screens.

A bridge belongs to one open display (one websocket connection). It tracks
which event is active and the projection of its results, and decides how
much to refetch when a change notification arrives on the "events" or
"results" group. Everything here is synchronous ORM work; consumers wrap the
calls with database_sync_to_async.
"""
import logging

from core.services import get_active_event
from results.leaderboard import project
from results.services import event_results
from .broadcast import EVENTS_GROUP, RESULTS_GROUP
from .serializers import snapshot

logger = logging.getLogger(__name__)


class LiveUpdateBridge:

    def __init__(self, limit=None):
        # None shows every result (data entry), an int caps the board
        self.limit = limit
        self.event = None
        self.rows = []

    @property
    def event_id(self):
        return self.event.pk if self.event else None

    def refresh(self):
        """Full refetch: active event, then its results."""
        self.event = get_active_event()
        self.refresh_results()

    def refresh_results(self):
        if self.event is None:
            self.rows = []
            return
        ranked = project(event_results(self.event.pk)).ranked
        self.rows = ranked if self.limit is None else ranked[:self.limit]

    def on_event_change(self, message=None):
        """Refetch the active event; results only when the event switched. Returns True if it switched."""
        previous_id = self.event_id
        self.event = get_active_event()
        if self.event_id != previous_id:
            logger.debug("Active event changed %s -> %s", previous_id, self.event_id)
            self.refresh_results()
            return True
        return False

    def on_result_change(self, message=None):
        """Refetch results of the tracked event. Returns False for other events' changes."""
        if self.event is None:
            return False
        if message and message.get("event_id") not in (None, self.event_id):
            return False
        self.refresh_results()
        return True

    def handle(self, message):
        """Dispatch a change notification by collection name. Returns True if the view changed."""
        collection = (message or {}).get("collection")
        if collection == EVENTS_GROUP:
            return self.on_event_change(message)
        if collection == RESULTS_GROUP:
            return self.on_result_change(message)
        logger.warning("Ignoring notification for unknown collection %r", collection)
        return False

    def snapshot(self):
        return snapshot(self.event, self.rows)
