import unittest

from moon_lander.core.timekeeping import FixedStepAccumulator, FrameTimer


class TestFixedStepAccumulator(unittest.TestCase):
    def test_pays_out_whole_ticks_and_keeps_remainder(self):
        acc = FixedStepAccumulator(step=0.1, max_substeps=10)
        acc.accrue(0.25)
        self.assertEqual(acc.consume(), 2)
        self.assertAlmostEqual(acc.value, 0.05)
        acc.accrue(0.05)
        self.assertEqual(acc.consume(), 1)
        self.assertEqual(acc.consume(), 0)

    def test_rate_is_independent_of_frame_rate(self):
        fast = FixedStepAccumulator(step=1 / 60, max_substeps=5)
        slow = FixedStepAccumulator(step=1 / 60, max_substeps=5)
        fast_ticks = 0
        for _ in range(144):
            fast.accrue(1 / 144)
            fast_ticks += fast.consume()
        slow_ticks = 0
        for _ in range(30):
            slow.accrue(1 / 30)
            slow_ticks += slow.consume()
        self.assertIn(fast_ticks, (59, 60))
        self.assertIn(slow_ticks, (59, 60))

    def test_drops_backlog_past_max_substeps(self):
        acc = FixedStepAccumulator(step=0.1, max_substeps=3)
        acc.accrue(1.0)
        self.assertEqual(acc.consume(), 3)
        self.assertEqual(acc.value, 0.0)

    def test_ignores_negative_time(self):
        acc = FixedStepAccumulator(step=0.1, max_substeps=3)
        acc.accrue(-1.0)
        self.assertEqual(acc.consume(), 0)

    def test_rejects_bad_step(self):
        with self.assertRaises(ValueError):
            FixedStepAccumulator(step=0.0, max_substeps=3)


class TestFrameTimer(unittest.TestCase):
    def test_tick_is_non_negative(self):
        timer = FrameTimer()
        self.assertGreaterEqual(timer.tick(), 0.0)


if __name__ == "__main__":
    unittest.main()
