from types import SimpleNamespace

from django.test import SimpleTestCase

from results.leaderboard import (
    DEFAULT_HOUSE_COLOR, HOUSE_COLORS, house_color, lighten, medal_for, project, top_n,
)
from results.models import HOUSES


def row(time, name="runner"):
    return SimpleNamespace(time=time, runner_name=name, house="Hay", pk=None)


class ProjectTests(SimpleTestCase):
    def test_ties_keep_input_order(self):
        first, fastest, second = row("05:03.07", "a"), row("04:59.99", "b"), row("05:03.07", "c")
        projection = project([first, fastest, second])
        self.assertEqual([r.result for r in projection.ranked], [fastest, first, second])
        self.assertEqual([r.rank for r in projection.ranked], [1, 2, 3])

    def test_numeric_not_lexicographic(self):
        slow, quick = row("100:00.00"), row("99:59.99")
        self.assertEqual([r.result for r in project([slow, quick]).ranked], [quick, slow])

    def test_podium_and_remaining(self):
        rows = [row(f"0{i}:00.00") for i in range(1, 6)]
        projection = project(reversed(rows))
        self.assertEqual([r.result for r in projection.podium], rows[:3])
        self.assertEqual([r.result for r in projection.remaining], rows[3:])
        self.assertTrue(all(r.podium for r in projection.podium))
        self.assertFalse(any(r.podium for r in projection.remaining))
        self.assertEqual([r.medal for r in projection.ranked], ["gold", "silver", "bronze", None, None])

    def test_short_lists(self):
        self.assertEqual(project([]).ranked, [])
        projection = project([row("01:00.00"), row("00:59.00")])
        self.assertEqual(len(projection.podium), 2)
        self.assertEqual(projection.remaining, [])

    def test_unparseable_times_sort_last(self):
        bad, good = row("??"), row("10:00.00")
        self.assertEqual([r.result for r in project([bad, good]).ranked], [good, bad])


class TopNTests(SimpleTestCase):
    def test_caps_at_n(self):
        rows = [row(f"{i:02d}:00.00") for i in range(15)]
        self.assertEqual(len(top_n(rows, 10)), 10)
        self.assertEqual(top_n(rows, 10)[0].result, rows[0])

    def test_fewer_than_n(self):
        rows = [row("03:00.00"), row("02:00.00")]
        self.assertEqual(len(top_n(rows, 10)), 2)
        self.assertEqual(top_n([], 10), [])


class HouseColorTests(SimpleTestCase):
    def test_every_house_has_a_color(self):
        self.assertEqual(set(HOUSE_COLORS), set(HOUSES))

    def test_unknown_house_gets_default(self):
        self.assertEqual(house_color("Nowhere"), DEFAULT_HOUSE_COLOR)
        self.assertEqual(house_color("Burgmann").bg, "#FCCC00")

    def test_lighten(self):
        self.assertEqual(lighten("#000000"), "#cccccc")
        self.assertEqual(lighten("#ffffff"), "#ffffff")

    def test_medal_for(self):
        self.assertEqual(medal_for(1), "gold")
        self.assertIsNone(medal_for(4))
        self.assertIsNone(medal_for(0))
