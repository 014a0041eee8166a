import unittest

import numpy as np

from moon_lander.core.instruments import compute_telemetry, round_half_up
from moon_lander.core.model import Craft


class TestTelemetry(unittest.TestCase):
    def test_projection(self):
        c = Craft(position=np.array([10.0, 100.0]), velocity=np.array([-1.25, 1.25]), fuel=99.5)
        t = compute_telemetry(c, 600.0)
        self.assertEqual(t.altitude, 400)
        self.assertEqual(t.vertical_speed, 1.3)
        self.assertEqual(t.horizontal_speed, -1.2)
        self.assertEqual(t.fuel, 100)

    def test_floors_at_zero(self):
        c = Craft(position=np.array([10.0, 590.0]), fuel=0.0)
        t = compute_telemetry(c, 600.0)
        self.assertEqual(t.altitude, 0)
        self.assertEqual(t.fuel, 0)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(2.5), 3.0)
        self.assertEqual(round_half_up(-2.5), -2.0)
        self.assertEqual(round_half_up(0.04, 1), 0.0)


if __name__ == "__main__":
    unittest.main()
