import csv
import json
import tempfile
import unittest
from pathlib import Path

import numpy as np

from moon_lander.core.logging_utils import RunLogger
from moon_lander.core.model import InputSnapshot
from moon_lander.core.simulation import Simulation


def read_rows(path: Path) -> list[dict]:
    with path.open(newline="") as fh:
        return list(csv.DictReader(fh))


class TestRunLogger(unittest.TestCase):
    def test_creates_unique_run_dirs(self):
        with tempfile.TemporaryDirectory() as tmp:
            with RunLogger(tmp, run_id="demo") as a, RunLogger(tmp, run_id="demo") as b:
                self.assertNotEqual(a.run_dir, b.run_dir)
            self.assertEqual((Path(tmp) / "last_run.txt").read_text(encoding="utf-8"), "demo_1")

    def test_meta_is_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            with RunLogger(tmp) as logger:
                logger.write_meta({"profile": "padded", "seed": 3})
            meta = json.loads(logger.meta_path.read_text(encoding="utf-8"))
            self.assertEqual(meta["seed"], 3)

    def test_simulation_writes_telemetry_and_events(self):
        with tempfile.TemporaryDirectory() as tmp:
            with RunLogger(tmp) as logger:
                sim = Simulation(800, 600, rng=np.random.default_rng(2), logger=logger)
                for _ in range(40):
                    sim.tick(InputSnapshot())
                x_start, x_end, pad_y = sim.terrain.pad_span(sim.terrain.pads[0])
                sim.craft.x = (x_start + x_end) / 2.0
                sim.craft.y = pad_y - sim.craft.height - 1.0
                sim.craft.vy = 12.0
                sim.tick(InputSnapshot())
                sim.tick(InputSnapshot(restart=True))

            ts = read_rows(logger.timeseries_path)
            self.assertEqual(list(ts[0].keys()), RunLogger.TIMESERIES_HEADER)
            ticks = [int(float(row["tick"])) for row in ts]
            self.assertEqual(ticks[:3], [0, 20, 40])
            self.assertIn("crashed", [row["phase"] for row in ts])

            events = read_rows(logger.events_path)
            self.assertEqual([row["type"] for row in events], ["crashed", "restart"])
            details = json.loads(events[0]["details"])
            self.assertTrue(details["in_safe_zone"])
            self.assertEqual(details["reason"], "too_fast_or_tilted")
            self.assertGreater(float(events[0]["speed"]), 12.0)


if __name__ == "__main__":
    unittest.main()
