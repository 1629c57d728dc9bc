"""Introduce Parameter Object.

Goal: combine data items that travel together into a single value object.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace

from refactoring_catalog.base import RefactorBase
from refactoring_catalog.registry import entry_point

STATION = {
    "name": "ZB1",
    "readings": [
        {"temp": 47, "time": "2016-11-10 09:10"},
        {"temp": 53, "time": "2016-11-10 09:20"},
        {"temp": 58, "time": "2016-11-10 09:30"},
        {"temp": 53, "time": "2016-11-10 09:40"},
        {"temp": 51, "time": "2016-11-10 09:50"},
    ],
}

OPERATING_PLAN = SimpleNamespace(temperature_floor=48, temperature_ceiling=57)


@dataclass(frozen=True)
class NumberRange:
    min: int
    max: int

    def contains(self, value) -> bool:
        return self.min <= value <= self.max


class BeforeRefactor(RefactorBase):
    # Two values from OPERATING_PLAN, under different names than the
    # parameters of readings_outside_range
    def alerts(self):
        return self.readings_outside_range(
            STATION,
            OPERATING_PLAN.temperature_floor,
            OPERATING_PLAN.temperature_ceiling,
        )

    def readings_outside_range(self, station, min, max):
        return [r for r in station["readings"] if r["temp"] < min or r["temp"] > max]


class Refactor1(RefactorBase):
    """Change Function Declaration to add the new object as a parameter."""

    def alerts(self):
        return self.readings_outside_range(
            STATION,
            OPERATING_PLAN.temperature_floor,
            OPERATING_PLAN.temperature_ceiling,
            None,
        )

    def readings_outside_range(self, station, min, max, range):
        return [r for r in station["readings"] if r["temp"] < min or r["temp"] > max]


class Refactor2(RefactorBase):
    """Callers build the range; max is read from it."""

    def alerts(self):
        range = NumberRange(OPERATING_PLAN.temperature_floor, OPERATING_PLAN.temperature_ceiling)
        return self.readings_outside_range(STATION, OPERATING_PLAN.temperature_floor, range)

    def readings_outside_range(self, station, min, range):
        return [r for r in station["readings"] if r["temp"] < min or r["temp"] > range.max]


class Refactor3(RefactorBase):
    """Remove the remaining loose parameter."""

    def alerts(self):
        range = NumberRange(OPERATING_PLAN.temperature_floor, OPERATING_PLAN.temperature_ceiling)
        return self.readings_outside_range(STATION, range)

    def readings_outside_range(self, station, range):
        return [
            r for r in station["readings"] if r["temp"] < range.min or r["temp"] > range.max
        ]


class Refactor4(RefactorBase):
    """Behavior moves into the value object."""

    def alerts(self):
        range = NumberRange(OPERATING_PLAN.temperature_floor, OPERATING_PLAN.temperature_ceiling)
        return self.readings_outside_range(STATION, range)

    def readings_outside_range(self, station, range):
        return [r for r in station["readings"] if not range.contains(r["temp"])]


@entry_point("FirstSetOfRefactorings::IntroduceParameterObject")
class Tests:
    EXPECTATION = [
        {"temp": 47, "time": "2016-11-10 09:10"},
        {"temp": 58, "time": "2016-11-10 09:30"},
    ]

    def run(self):
        return [
            klass().alerts() == self.EXPECTATION
            for klass in (BeforeRefactor, Refactor1, Refactor2, Refactor3, Refactor4)
        ]
