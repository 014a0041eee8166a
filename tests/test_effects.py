import unittest

import numpy as np

from moon_lander.core.config import EFFECTS_CFG
from moon_lander.core.effects import Particle, ParticleTracker


class TestParticleTracker(unittest.TestCase):
    def setUp(self):
        self.tracker = ParticleTracker(rng=np.random.default_rng(0))

    def test_thrust_batch(self):
        self.tracker.emit_thrust(100.0, 200.0, 0.0, 1.0)
        particles = self.tracker.particles
        self.assertEqual(len(particles), EFFECTS_CFG.thrust_count)
        for p in particles:
            self.assertEqual(p.max_life, EFFECTS_CFG.thrust_life)
            self.assertLessEqual(abs(p.x - 100.0), 5.0)
            self.assertGreater(p.vy, 1.0)
            self.assertTrue(30.0 <= p.hue <= 60.0)

    def test_explosion_batch(self):
        self.tracker.emit_explosion(10.0, 20.0)
        particles = self.tracker.particles
        self.assertEqual(len(particles), 20)
        for p in particles:
            self.assertEqual((p.x, p.y), (10.0, 20.0))
            self.assertEqual(p.life, 60)
            self.assertLessEqual(abs(p.vx), 5.0)
            self.assertLessEqual(abs(p.vy), 5.0)

    def test_particle_lives_exactly_max_life_ticks(self):
        self.tracker.add(Particle(0.0, 0.0, 50.0, -50.0, life=5, max_life=5, hue=0.0, lightness=0.5))
        for _ in range(4):
            self.tracker.advance()
            self.assertEqual(len(self.tracker), 1)
        self.tracker.advance()
        self.assertEqual(len(self.tracker), 0)

    def test_advance_moves_by_velocity(self):
        self.tracker.add(Particle(1.0, 2.0, 0.5, -1.5, life=3, max_life=3, hue=0.0, lightness=0.5))
        self.tracker.advance()
        p = self.tracker.particles[0]
        self.assertEqual((p.x, p.y, p.life), (1.5, 0.5, 2))
        self.assertAlmostEqual(p.alpha, 2 / 3)

    def test_particles_view_is_immutable(self):
        self.tracker.emit_explosion(0.0, 0.0)
        view = self.tracker.particles
        self.assertIsInstance(view, tuple)
        self.tracker.clear()
        self.assertEqual(len(view), 20)
        self.assertEqual(len(self.tracker), 0)


if __name__ == "__main__":
    unittest.main()
