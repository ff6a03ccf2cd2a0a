from django.test import SimpleTestCase

from gamification.levels import LevelProgress, badge_level, progress_to_next_level


class BadgeLevelTest(SimpleTestCase):
    def test_tier_boundaries(self):
        self.assertEqual(badge_level(0).name, "New Guy")
        self.assertEqual(badge_level(199).name, "New Guy")
        self.assertEqual(badge_level(200).name, "Casual")
        self.assertEqual(badge_level(499).name, "Casual")
        self.assertEqual(badge_level(500).name, "Member")
        self.assertEqual(badge_level(999).name, "Member")
        self.assertEqual(badge_level(1000).name, "Real Longshore")
        self.assertEqual(badge_level(25000).name, "Real Longshore")


class ProgressTest(SimpleTestCase):
    def test_progress_within_first_tier(self):
        self.assertEqual(progress_to_next_level(50), LevelProgress(50, 200, 25))

    def test_progress_floors_percent(self):
        # 299 xp: 99 of 300 in the Casual tier -> 33%
        self.assertEqual(progress_to_next_level(299), LevelProgress(99, 300, 33))

    def test_progress_at_tier_start(self):
        self.assertEqual(progress_to_next_level(500), LevelProgress(0, 500, 0))

    def test_top_tier_is_complete(self):
        self.assertEqual(progress_to_next_level(1500), LevelProgress(1500, 1500, 100))
