import unittest

import numpy as np

from moon_lander.core.collision import LandingLimits, evaluate_touchdown
from moon_lander.core.model import Craft
from moon_lander.core.terrain import PADDED, Pad, Terrain

LIMITS = LandingLimits(speed_limit=6.0, angle_limit=0.5)


class TestEvaluateTouchdown(unittest.TestCase):
    def setUp(self):
        # pad over x in [100, 300] at y=500, slope elsewhere
        xs = np.array([0.0, 100.0, 200.0, 300.0, 400.0])
        ys = np.array([450.0, 500.0, 500.0, 500.0, 460.0])
        self.terrain = Terrain(
            xs=xs, ys=ys, pads=(Pad(1, 3),), policy=PADDED, width=400.0, height=700.0
        )

    def craft_at(self, x, bottom, vx=0.0, vy=0.0, angle=0.0) -> Craft:
        c = Craft(position=np.array([x, bottom - 30.0]), velocity=np.array([vx, vy]), angle=angle)
        return c

    def test_no_contact_above_ground(self):
        self.assertIsNone(evaluate_touchdown(self.craft_at(150.0, 499.0, vy=2.0), self.terrain, LIMITS))

    def test_contact_exactly_at_ground(self):
        td = evaluate_touchdown(self.craft_at(150.0, 500.0, vy=2.0), self.terrain, LIMITS)
        self.assertIsNotNone(td)
        self.assertTrue(td.safe)
        self.assertEqual(td.segment, 1)
        self.assertEqual(td.reason, "landed")

    def test_too_fast_is_a_crash(self):
        td = evaluate_touchdown(self.craft_at(150.0, 505.0, vx=4.5, vy=4.5), self.terrain, LIMITS)
        self.assertFalse(td.safe)
        self.assertAlmostEqual(td.speed, float(np.hypot(4.5, 4.5)))
        self.assertEqual(td.reason, "too_fast_or_tilted")

    def test_tilted_is_a_crash(self):
        td = evaluate_touchdown(self.craft_at(150.0, 505.0, vy=1.0, angle=-0.5), self.terrain, LIMITS)
        self.assertFalse(td.safe)

    def test_off_pad_is_a_crash(self):
        td = evaluate_touchdown(self.craft_at(50.0, 480.0, vy=1.0), self.terrain, LIMITS)
        self.assertIsNotNone(td)
        self.assertFalse(td.in_safe_zone)
        self.assertFalse(td.safe)
        self.assertEqual(td.reason, "outside_safe_zone")
        self.assertAlmostEqual(td.ground_y, 475.0)

    def test_outside_terrain_has_no_contact(self):
        self.assertIsNone(evaluate_touchdown(self.craft_at(-5.0, 900.0), self.terrain, LIMITS))
        self.assertIsNone(evaluate_touchdown(self.craft_at(401.0, 900.0), self.terrain, LIMITS))


if __name__ == "__main__":
    unittest.main()
