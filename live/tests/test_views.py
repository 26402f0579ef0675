import json
from unittest import mock

from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.test import TestCase, override_settings

from core.models import Event
from core.services import create_event
from results.models import Result
from results.services import add_result


def post_json(client, url, data=None, **extra):
    return client.post(url, data=json.dumps(data or {}), content_type="application/json", **extra)


class ScreenTests(TestCase):
    def test_entry_without_event_offers_create_form(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 200)
        self.assertContains(r, "Create New Event")

    def test_entry_with_event(self):
        event = create_event("Girls", "3km", "14")
        add_result(event.pk, "Sam", "Hay", 5, 3, 7)
        r = self.client.get("/")
        self.assertContains(r, "Girls 14 Years 3km")
        self.assertContains(r, "05:03.07")
        self.assertContains(r, "Add Result")

    def test_age_groups_are_labelled(self):
        r = self.client.get("/")
        self.assertContains(r, '<option value="12">12 Years</option>', html=True)
        self.assertContains(r, '<option value="Open">Open</option>', html=True)

    def test_screens_show_hour_bearing_times_like_the_live_feed(self):
        event = create_event("Boys", "6km", "Open")
        Result.objects.create(event=event, runner_name="Slow", house="Hay", time="1:02:03.04")
        for url in ("/", "/leaderboard/"):
            r = self.client.get(url)
            self.assertContains(r, "62:03.04")
            self.assertNotContains(r, "1:02:03.04")

    def test_leaderboard_empty_states(self):
        r = self.client.get("/leaderboard/")
        self.assertContains(r, "No active event found")
        create_event("Girls", "3km", "14")
        r = self.client.get("/leaderboard/")
        self.assertContains(r, "No results yet.")


class EventApiTests(TestCase):
    def test_create_list_and_end(self):
        r = post_json(self.client, "/api/events/", {"division": "Girls", "distance": "3km", "age_group": "14"})
        self.assertEqual(r.status_code, 201)
        event_id = r.json()["event"]["id"]
        self.assertEqual(r.json()["event"]["name"], "Girls 14 Years 3km")

        r = self.client.get("/api/events/")
        self.assertEqual([e["id"] for e in r.json()["events"]], [event_id])

        r = self.client.get("/api/events/active/")
        self.assertEqual(r.json()["event"]["id"], event_id)

        r = post_json(self.client, f"/api/events/{event_id}/end/")
        self.assertEqual(r.status_code, 200)
        self.assertFalse(r.json()["event"]["active"])
        # ending twice is harmless
        r = post_json(self.client, f"/api/events/{event_id}/end/")
        self.assertEqual(r.status_code, 200)
        self.assertIsNone(self.client.get("/api/events/active/").json()["event"])

    def test_create_validation_error(self):
        r = post_json(self.client, "/api/events/", {"division": "Mixed", "distance": "3km", "age_group": "14"})
        self.assertEqual(r.status_code, 400)
        self.assertIn("division", r.json()["fields"])

    def test_invalid_json(self):
        r = self.client.post("/api/events/", data="{nope", content_type="application/json")
        self.assertEqual(r.status_code, 400)

    def test_end_unknown_event(self):
        self.assertEqual(post_json(self.client, "/api/events/999/end/").status_code, 404)

    def test_method_not_allowed(self):
        self.assertEqual(self.client.get("/api/events/1/end/").status_code, 405)

    @override_settings(XC_SUPERSEDE_ACTIVE_EVENT=False)
    def test_conflict_when_superseding_is_off(self):
        create_event("Girls", "3km", "14")
        r = post_json(self.client, "/api/events/", {"division": "Boys", "distance": "2km", "age_group": "Open"})
        self.assertEqual(r.status_code, 409)

    def test_store_error_is_reported(self):
        with mock.patch("live.views.events.create_event", side_effect=DatabaseError("gone")):
            with self.assertLogs("live.views", level="ERROR"):
                r = post_json(self.client, "/api/events/", {"division": "Boys", "distance": "2km", "age_group": "Open"})
        self.assertEqual(r.status_code, 503)


class ResultApiTests(TestCase):
    def setUp(self):
        self.event = create_event("Girls", "3km", "14")

    def test_add_and_delete(self):
        r = post_json(self.client, f"/api/events/{self.event.pk}/results/",
                      {"runner_name": "Sam", "house": "Hay", "minutes": "5", "seconds": "3", "milliseconds": "7"})
        self.assertEqual(r.status_code, 201)
        self.assertEqual(r.json()["result"]["time"], "05:03.07")

        result_id = r.json()["result"]["id"]
        r = post_json(self.client, f"/api/results/{result_id}/delete/")
        self.assertEqual(r.json(), {"status": "ok", "deleted": True})
        r = post_json(self.client, f"/api/results/{result_id}/delete/")
        self.assertEqual(r.json(), {"status": "ok", "deleted": False})

    def test_rejects_out_of_range(self):
        r = post_json(self.client, f"/api/events/{self.event.pk}/results/",
                      {"runner_name": "Sam", "house": "Hay", "minutes": 5, "seconds": 75, "milliseconds": -3})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(set(r.json()["fields"]), {"seconds", "milliseconds"})
        self.assertFalse(Result.objects.exists())

    @override_settings(ENTRY_API_TOKEN="s3cret")
    def test_token_guard(self):
        url = f"/api/events/{self.event.pk}/results/"
        body = {"runner_name": "Sam", "house": "Hay", "minutes": 5, "seconds": 0, "milliseconds": 0}
        self.assertEqual(post_json(self.client, url, body).status_code, 403)
        r = post_json(self.client, url, body, HTTP_AUTHORIZATION="Token s3cret")
        self.assertEqual(r.status_code, 201)
        # reads stay open
        self.assertEqual(self.client.get("/api/leaderboard/").status_code, 200)
        self.assertEqual(Event.objects.count(), 1)

    def test_leaderboard_data_is_top_ten(self):
        for i in range(12):
            add_result(self.event.pk, f"R{i}", "Garran", 6, 59 - i, 0)
        data = self.client.get("/api/leaderboard/").json()
        self.assertEqual(data["event"]["name"], "Girls 14 Years 3km")
        self.assertEqual(len(data["results"]), 10)
        self.assertEqual(data["results"][0]["runner_name"], "R11")
        self.assertEqual([row["rank"] for row in data["results"]], list(range(1, 11)))
        self.assertIsNone(data["message"])

    def test_non_text_runner_name(self):
        r = post_json(self.client, f"/api/events/{self.event.pk}/results/",
                      {"runner_name": 42, "house": "Hay", "minutes": 5, "seconds": 0, "milliseconds": 0})
        self.assertEqual(r.status_code, 400)
        self.assertIn("runner_name", r.json()["fields"])
        self.assertFalse(Result.objects.exists())

    def test_huge_minutes_rejected(self):
        r = post_json(self.client, f"/api/events/{self.event.pk}/results/",
                      {"runner_name": "Sam", "house": "Hay", "minutes": "123456789012345",
                       "seconds": 0, "milliseconds": 0})
        self.assertEqual(r.status_code, 400)
        self.assertEqual(set(r.json()["fields"]), {"minutes"})


@override_settings(ENTRY_API_TOKEN="s3cret")
class EntryScreenTokenTests(TestCase):
    def setUp(self):
        self.event = create_event("Girls", "3km", "14")

    def test_staff_screen_carries_token_and_can_write(self):
        staff = get_user_model().objects.create_user("marshal", password="pw", is_staff=True)
        self.client.force_login(staff)
        r = self.client.get("/")
        self.assertContains(r, '<script id="api-token" type="application/json">"s3cret"</script>')

        # the screen sends the embedded token on every write
        r = post_json(self.client, f"/api/events/{self.event.pk}/results/",
                      {"runner_name": "Sam", "house": "Hay", "minutes": "5", "seconds": "3", "milliseconds": "7"},
                      HTTP_AUTHORIZATION="Token s3cret")
        self.assertEqual(r.status_code, 201)
        r = post_json(self.client, f"/api/events/{self.event.pk}/end/", HTTP_AUTHORIZATION="Token s3cret")
        self.assertEqual(r.status_code, 200)

    def test_anonymous_screen_gets_no_token(self):
        r = self.client.get("/")
        self.assertNotContains(r, "s3cret")
        self.assertContains(r, '<script id="api-token" type="application/json">""</script>')
