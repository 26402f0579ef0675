# live/serializers.py
from rest_framework import serializers

from core.models import Event
from results.leaderboard import house_color, lighten
from results.models import Result
from results.timing import display_time


class EventSerializer(serializers.ModelSerializer):
    class Meta:
        model = Event
        fields = ['id', 'name', 'division', 'distance', 'age_group', 'active', 'created_at']
        read_only_fields = fields


class ResultSerializer(serializers.ModelSerializer):
    class Meta:
        model = Result
        fields = ['id', 'event', 'runner_name', 'house', 'time', 'created_at']
        read_only_fields = fields


class RankedResultSerializer(serializers.Serializer):
    """A RankedResult flattened for the displays: rank, medal and house colours."""
    rank = serializers.IntegerField()
    podium = serializers.BooleanField()
    medal = serializers.CharField(allow_null=True)
    id = serializers.IntegerField(source='result.pk')
    runner_name = serializers.CharField(source='result.runner_name')
    house = serializers.CharField(source='result.house')
    time = serializers.SerializerMethodField()
    colors = serializers.SerializerMethodField()

    def get_time(self, row):
        return display_time(row.result.time)

    def get_colors(self, row):
        color = house_color(row.result.house)
        return {
            "bg": color.bg,
            "text": color.text,
            "border": color.border,
            "row_bg": lighten(color.bg),
        }


def snapshot(event, rows):
    """Payload pushed to displays: the tracked event and its ranked rows."""
    message = None
    if event is None:
        message = "No active event found. Please create a new event."
    elif not rows:
        message = "No results yet."
    return {
        "type": "snapshot",
        "event": EventSerializer(event).data if event else None,
        "results": RankedResultSerializer(rows, many=True).data,
        "message": message,
    }
