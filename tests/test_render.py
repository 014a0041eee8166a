import os
import random
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame

from moon_lander.core.config import RENDER_CFG
from moon_lander.core.instruments import Telemetry
from moon_lander.core.model import InputSnapshot
from moon_lander.core.simulation import Simulation
from moon_lander.render import SceneRenderer, hsl_color, telemetry_lines


class TestRender(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def setUp(self):
        self.size = (800, 600)
        self.surface = pygame.Surface(self.size)
        self.sim = Simulation(*self.size, rng=np.random.default_rng(4))
        self.renderer = SceneRenderer(self.size, rng=random.Random(4))

    def test_draws_flying_scene(self):
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())
        self.assertEqual(tuple(self.surface.get_at((400, 599)))[:3], RENDER_CFG.terrain_fill_color)

    def test_draws_landing_then_restart(self):
        x_start, x_end, pad_y = self.sim.terrain.pad_span(self.sim.terrain.pads[0])
        craft = self.sim.craft
        craft.x = (x_start + x_end) / 2.0
        craft.y = pad_y - craft.height - 1.0
        craft.vy = 1.0
        self.sim.tick(InputSnapshot())
        for _ in range(30):
            self.sim.tick(InputSnapshot())
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())

        self.sim.tick(InputSnapshot(restart=True))
        self.sim.tick(InputSnapshot(thrust=True))
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())

    def test_resize_rebuilds_starfield(self):
        self.renderer.resize((320, 320))
        self.assertLessEqual(len(self.renderer.stars), RENDER_CFG.max_stars)
        for star in self.renderer.stars:
            self.assertLess(star.y, 320 * RENDER_CFG.star_band_factor)

    def test_restart_reseeds_starfield(self):
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())
        stars = self.renderer.stars
        self.sim.tick(InputSnapshot())
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())
        self.assertIs(self.renderer.stars, stars)

        self.sim.restart()
        self.renderer.draw(self.surface, self.sim.snapshot(), self.sim.telemetry())
        self.assertIsNot(self.renderer.stars, stars)

    def test_hsl_color(self):
        red = hsl_color(0.0, 0.5)
        self.assertGreater(red.r, 250)
        self.assertLess(red.g, 5)
        faded = hsl_color(45.0, 0.75, 0.5)
        self.assertAlmostEqual(faded.a, 127, delta=2)

    def test_telemetry_lines(self):
        lines = telemetry_lines(Telemetry(altitude=12, vertical_speed=-1.5, horizontal_speed=0.0, fuel=80))
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("ALTITUDE"))
        self.assertIn("-1.5", lines[1])


if __name__ == "__main__":
    unittest.main()
