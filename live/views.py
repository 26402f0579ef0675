# live/views.py
import json
import logging
from functools import wraps

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt

from core import services as events
from core.exceptions import ActiveEventExists
from core.models import AGE_GROUPS, DISTANCES, DIVISIONS, age_group_label
from results import services as recorder
from results.leaderboard import top_n
from results.models import HOUSES
from .serializers import EventSerializer, RankedResultSerializer, ResultSerializer, snapshot

logger = logging.getLogger(__name__)


def _token_ok(request):
    token = settings.ENTRY_API_TOKEN
    if not token:
        return True
    header = request.headers.get("Authorization", "")
    return header.startswith("Token ") and header.split(" ", 1)[1] == token


def _read_json(request):
    if not request.body:
        return {}
    data = json.loads(request.body.decode())
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object")
    return data


def api_view(*methods, mutating=False):
    """
    JSON endpoint wrapper: method check, optional token guard, and the
    mapping from service errors to HTTP status codes.
    """
    def decorator(func):
        @csrf_exempt
        @wraps(func)
        def wrapper(request, *args, **kwargs):
            if request.method not in methods:
                return JsonResponse({"error": f"{'/'.join(methods)} only"}, status=405)
            if mutating and request.method != "GET" and not _token_ok(request):
                return JsonResponse({"error": "Forbidden"}, status=403)
            try:
                return func(request, *args, **kwargs)
            except ValidationError as exc:
                detail = exc.message_dict if hasattr(exc, "error_dict") else exc.messages
                return JsonResponse({"error": "Invalid input", "fields": detail}, status=400)
            except ActiveEventExists as exc:
                return JsonResponse({"error": str(exc)}, status=409)
            except DatabaseError:
                logger.exception("Store error in %s", func.__name__)
                return JsonResponse({"error": "Store unavailable, try again"}, status=503)
        return wrapper
    return decorator


# ---------- screens ----------

def _board_rows(event):
    if event is None:
        return []
    return top_n(recorder.event_results(event.pk), settings.XC_LEADERBOARD_SIZE)


def entry(request):
    active = events.get_active_event()
    rows = recorder.event_projection(active.pk).ranked if active else []
    return render(request, "live/entry.html", {
        "event": active,
        "rows": RankedResultSerializer(rows, many=True).data,
        "divisions": DIVISIONS,
        "distances": DISTANCES,
        "age_groups": [(a, age_group_label(a)) for a in AGE_GROUPS],
        "houses": HOUSES,
        # staff sessions get the API token so the screen can write
        "api_token": settings.ENTRY_API_TOKEN if request.user.is_staff else "",
    })


def leaderboard(request):
    active = events.get_active_event()
    return render(request, "live/leaderboard.html", {
        "event": active,
        "rows": RankedResultSerializer(_board_rows(active), many=True).data,
    })


# ---------- JSON API ----------

@api_view("GET", "POST", mutating=True)
def event_collection(request):
    if request.method == "GET":
        return JsonResponse({"events": EventSerializer(events.list_events(), many=True).data})

    try:
        data = _read_json(request)
    except ValueError:
        return JsonResponse({"error": "Invalid JSON"}, status=400)
    event = events.create_event(
        data.get("division"), data.get("distance"), data.get("age_group"),
    )
    return JsonResponse({"status": "ok", "event": EventSerializer(event).data}, status=201)


@api_view("GET")
def active_event(request):
    event = events.get_active_event()
    return JsonResponse({"event": EventSerializer(event).data if event else None})


@api_view("POST", mutating=True)
def end_event(request, event_id):
    event = events.end_event(event_id)
    if event is None:
        return JsonResponse({"error": "Event not found"}, status=404)
    return JsonResponse({"status": "ok", "event": EventSerializer(event).data})


@api_view("POST", mutating=True)
def add_result(request, event_id):
    """
    JSON: { "runner_name": "Sam", "house": "Hay", "minutes": 5, "seconds": 3, "milliseconds": 7 }
    Header: Authorization: Token <ENTRY_API_TOKEN>   (optional)
    """
    try:
        data = _read_json(request)
    except ValueError:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    result = recorder.add_result(
        event_id,
        data.get("runner_name"),
        data.get("house"),
        data.get("minutes"),
        data.get("seconds"),
        data.get("milliseconds"),
    )
    return JsonResponse({"status": "ok", "result": ResultSerializer(result).data}, status=201)


@api_view("POST", mutating=True)
def delete_result(request, result_id):
    deleted = recorder.delete_result(result_id)
    return JsonResponse({"status": "ok", "deleted": deleted})


@api_view("GET")
def leaderboard_data(request):
    event = events.get_active_event()
    return JsonResponse(snapshot(event, _board_rows(event)))
