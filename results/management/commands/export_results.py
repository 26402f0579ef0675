# results/management/commands/export_results.py
import csv
import sys

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.models import Event
from core.services import get_active_event
from results.services import event_projection


class Command(BaseCommand):
    help = "Write the ranked results of an event (default: the active one) as CSV"

    def add_arguments(self, parser):
        parser.add_argument("--event", type=int, help="Event id; defaults to the active event")
        parser.add_argument("--output", help="CSV path; '-' for stdout. Defaults to /tmp/results_<id>_<ts>.csv")

    def handle(self, *args, **options):
        if options.get("event"):
            event = Event.objects.filter(pk=options["event"]).first()
            if event is None:
                raise CommandError(f"Event {options['event']} does not exist.")
        else:
            event = get_active_event()
            if event is None:
                raise CommandError("No active event; pass --event.")

        projection = event_projection(event.pk)
        if not len(projection):
            self.stdout.write(f"No results for {event.name}.")
            return

        fname = options.get("output")
        if not fname:
            ts = timezone.now().strftime("%Y%m%d%H%M%S")
            fname = f"/tmp/results_{event.pk}_{ts}.csv"

        if fname == "-":
            self._write(sys.stdout, event, projection)
            return
        with open(fname, "w", newline="") as f:
            self._write(f, event, projection)
        self.stdout.write(f"Exported {len(projection)} results of {event.name} to {fname}")

    def _write(self, f, event, projection):
        w = csv.writer(f)
        w.writerow(["event", "rank", "runner_name", "house", "time"])
        for row in projection.ranked:
            w.writerow([event.name, row.rank, row.result.runner_name, row.result.house, row.result.time])
