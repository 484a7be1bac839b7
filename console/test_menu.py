#!/usr/bin/env python3
"""
Scripted sessions through the text menu.
"""

from __future__ import annotations

import os
import tempfile
import time
import unittest
from typing import List

from console.clock import TickClock
from console.generator import VehicleGenerator
from console.menu import MenuDriver, prompt_capacity
from main import _format_wall
from queue_engine.engine import QueueEngine
from queue_engine.event_log import Action


class _Script:
    """Feeds canned answers to ``read``; raises EOFError when exhausted."""

    def __init__(self, answers: List[str]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError
        return self._answers.pop(0)


class MenuDriverTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.report_path = os.path.join(self._tmp.name, "report.txt")
        self.output: List[str] = []

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _driver(self, answers: List[str], capacity: int = 5) -> MenuDriver:
        clock = TickClock()
        return MenuDriver(
            QueueEngine(capacity, clock=clock),
            VehicleGenerator(seed=5),
            clock,
            report_path=self.report_path,
            read=_Script(answers),
            write=self.output.append,
        )

    def _text(self) -> str:
        return "\n".join(self.output)

    def test_full_session(self) -> None:
        driver = self._driver([
            "1", "2", "3",      # ids 1, 2, 3 (3 is emergency)
            "4",                # emergency preempts
            "7", "2",           # search hit
            "11", "1",          # remove
            "7", "1",           # search miss
            "99",               # bad choice
            "7", "abc",         # bad id
            "0",
        ])
        driver.run()

        text = self._text()
        self.assertIn("Vehicle 1 (Private", text)
        self.assertIn("Processed vehicle 3:", text)
        self.assertIn("Vehicle ID: 2", text)
        self.assertIn("Vehicle 1 removed from queue.", text)
        self.assertIn("Vehicle not found!", text)
        self.assertIn("Invalid choice!", text)
        self.assertIn("'abc' is not a valid vehicle ID.", text)
        self.assertIn(f"Report generated: {self.report_path}", text)

        self.assertEqual([v.id for v in driver.engine.iterate_queue()], [2])
        self.assertTrue(os.path.exists(self.report_path))

    def test_full_queue_message(self) -> None:
        driver = self._driver(["1", "1", "0"], capacity=1)
        driver.run()
        self.assertIn("Queue is full! Vehicle rejected.", self._text())
        self.assertEqual(driver.engine.size(), 1)

    def test_process_on_empty_queue(self) -> None:
        self._driver(["4", "5", "6", "10", "0"]).run()
        text = self._text()
        self.assertIn("Queue is empty, nothing to process.", text)
        self.assertIn("No emergency vehicles waiting.", text)
        self.assertIn("Queue is empty.", text)
        self.assertIn("Snapshot is empty.", text)

    def test_sort_does_not_change_processing(self) -> None:
        driver = self._driver(["1", "2", "3", "9", "8", "5", "0"])
        driver.run()
        text = self._text()
        self.assertIn("Snapshot sorted by priority: [3, 2, 1]", text)
        self.assertIn("Snapshot sorted by arrival time: [1, 2, 3]", text)
        self.assertIn("Processed emergency vehicle 3:", text)
        self.assertEqual([v.id for v in driver.engine.iterate_queue()], [1, 2])

        processed = driver.engine.events.filter(Action.PROCESS)
        self.assertEqual([e.vehicle.id for e in processed], [3])

    def test_eof_ends_session_and_writes_report(self) -> None:
        self._driver(["1"]).run()
        self.assertTrue(os.path.exists(self.report_path))
        with open(self.report_path, encoding="utf-8") as fh:
            self.assertIn("Time 1: ADMIT Private -", fh.read())

    def test_report_failure_is_reported(self) -> None:
        driver = self._driver(["12", "0"])
        driver.report_path = os.path.join(self._tmp.name, "no", "such", "dir.txt")
        with self.assertLogs("menu", level="ERROR"):
            driver.run()
        self.assertIn("Could not write report", self._text())

    def test_menu_banner_shows_occupancy(self) -> None:
        self._driver(["3", "0"], capacity=4).run()
        self.assertIn("Queue: 1/4  Emergency waiting: 1", self._text())


class PromptCapacityTests(unittest.TestCase):
    def test_reprompts_until_positive(self) -> None:
        output: List[str] = []
        capacity = prompt_capacity(_Script(["x", "0", "3"]), output.append)
        self.assertEqual(capacity, 3)
        self.assertEqual(output, ["'x' is not a number.", "Capacity must be positive."])


class WallStampFormatTests(unittest.TestCase):
    def test_wall_stamp_renders_local_time(self) -> None:
        stamp = time.mktime((2026, 3, 14, 13, 5, 9, 0, 0, -1))
        self.assertEqual(_format_wall(stamp), "13:05:09")
        self.assertEqual(_format_wall(int(stamp)), "13:05:09")


if __name__ == "__main__":
    unittest.main()
