# live/consumers.py
from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.conf import settings

from .bridge import LiveUpdateBridge
from .broadcast import COLLECTION_GROUPS


class LeaderboardConsumer(AsyncJsonWebsocketConsumer):
    """Pushes the top of the active event's leaderboard whenever it changes."""

    def get_limit(self):
        return settings.XC_LEADERBOARD_SIZE

    async def connect(self):
        self.bridge = LiveUpdateBridge(limit=self.get_limit())
        for group in COLLECTION_GROUPS:
            await self.channel_layer.group_add(group, self.channel_name)
        await self.accept()
        await database_sync_to_async(self.bridge.refresh)()
        await self.send_snapshot()

    async def disconnect(self, close_code):
        # stop listening once the screen is gone
        for group in COLLECTION_GROUPS:
            await self.channel_layer.group_discard(group, self.channel_name)

    # Channels maps "type": "collection_change" -> method name "collection_change"
    async def collection_change(self, event):
        changed = await database_sync_to_async(self.bridge.handle)(event.get("message"))
        if changed:
            await self.send_snapshot()

    async def receive_json(self, content):
        cmd = content.get("cmd")
        if cmd == "refresh":
            await database_sync_to_async(self.bridge.refresh)()
            await self.send_snapshot()
        else:
            await self.send_json({"type": "info", "message": f"server: unknown cmd {cmd!r}"})

    async def send_snapshot(self):
        payload = await database_sync_to_async(self.bridge.snapshot)()
        await self.send_json(payload)


class EntryConsumer(LeaderboardConsumer):
    """Data-entry screen: every result of the active event, not just the top."""

    def get_limit(self):
        return None
