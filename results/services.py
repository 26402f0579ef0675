"""Result recorder: validate a finish-time entry and store it."""
import logging

from django.core.exceptions import ValidationError

from core.models import Event
from .leaderboard import project
from .models import HOUSES, Result
from .timing import finish_time_from_parts

logger = logging.getLogger(__name__)


def add_result(event_id, runner_name, house, minutes, seconds, milliseconds):
    """
    Record a finish for the active event.

    All validation happens before the database is written. Callers should
    re-query the event's results afterwards instead of relying on the
    returned row, since other entry stations may be inserting too.
    """
    errors = {}
    if runner_name is not None and not isinstance(runner_name, str):
        errors['runner_name'] = ["Runner name must be text."]
        runner_name = ''
    else:
        runner_name = (runner_name or '').strip()
        if not runner_name:
            errors['runner_name'] = ["Runner name is required."]
    if house not in HOUSES:
        errors['house'] = [f"{house!r} is not a known house."]
    try:
        finish = finish_time_from_parts(minutes, seconds, milliseconds)
    except ValidationError as exc:
        errors.update(exc.message_dict)
    if errors:
        logger.info("Rejected result for event %s: %s", event_id, errors)
        raise ValidationError(errors)

    event = Event.objects.filter(pk=event_id).first()
    if event is None:
        raise ValidationError({'event': f"Event {event_id} does not exist."})
    if not event.active:
        raise ValidationError({'event': f"Event '{event.name}' has ended."})

    result = Result.objects.create(
        event=event, runner_name=runner_name, house=house, time=str(finish),
    )
    logger.info("Recorded %s (%s) %s in event %s",
                result.runner_name, result.house, result.time, event.pk)
    return result


def delete_result(result_id):
    """Remove a result. Returns False when it was already gone."""
    result = Result.objects.filter(pk=result_id).first()
    if result is None:
        logger.debug("delete_result(%s): already absent", result_id)
        return False
    result.delete()
    logger.info("Deleted result %s from event %s", result_id, result.event_id)
    return True


def event_results(event_id):
    """All results of one event in insertion order, ready for project()."""
    return list(Result.objects.filter(event_id=event_id).order_by('created_at', 'id'))


def event_projection(event_id):
    return project(event_results(event_id))
