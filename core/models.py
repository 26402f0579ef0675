from django.db import models
from django.db.models import Q

DIVISIONS = ['Boys', 'Girls']
DISTANCES = ['1km', '2km', '3km', '4km', '5km', '6km']
AGE_GROUPS = ['12', '13', '14', '15', '16', '17', '18', 'Open']
OPEN_AGE_GROUP = 'Open'


def age_group_label(age_group):
    return age_group if age_group == OPEN_AGE_GROUP else f"{age_group} Years"


def event_name(division, age_group, distance):
    """Display name, e.g. "Girls 14 Years 3km" or "Boys Open 5km"."""
    return f"{division} {age_group_label(age_group)} {distance}"


class Event(models.Model):
    name = models.CharField(max_length=100)
    division = models.CharField(max_length=10, choices=[(d, d) for d in DIVISIONS])
    distance = models.CharField(max_length=10, choices=[(d, d) for d in DISTANCES])
    age_group = models.CharField(max_length=10, choices=[(a, a) for a in AGE_GROUPS])
    active = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']
        constraints = [
            # at most one active event
            models.UniqueConstraint(
                fields=['active'], condition=Q(active=True), name='single_active_event',
            ),
        ]

    def __str__(self):
        return f"{self.name} ({'active' if self.active else 'ended'})"
