from django.db import models
from core.models import Event

HOUSES = [
    'Sheaffe',
    'Garran',
    'Burgmann',
    'Garnsey',
    'Hay',
    'Blaxland',
    'Edwards',
    'Middelton',
    'Eddison',
    'Jones',
]


class Result(models.Model):
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name='results')
    runner_name = models.CharField(max_length=100)
    house = models.CharField(max_length=20, choices=[(h, h) for h in HOUSES])
    time = models.CharField(max_length=16)  # MM:SS.ms
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        # insertion order; the leaderboard keeps it for equal times
        ordering = ['created_at', 'id']
        indexes = [
            models.Index(fields=['event', 'created_at'], name='result_event_created_idx'),
        ]

    def __str__(self):
        return f"{self.runner_name} ({self.house}) - {self.time}"
