from __future__ import annotations

from enum import Enum


class Scenario(str, Enum):
    NONE = ""
    FOG_ISLAND = "SC_FOG"
    FOUR_ISLANDS = "SC_4ISL"
    THROUGH_THE_DESERT = "SC_TTD"
    PIRATE_ISLANDS = "SC_PIRI"
    FORGOTTEN_TRIBE = "SC_FTRI"

    @property
    def label(self) -> str:
        return SCENARIO_LABELS[self]

    @classmethod
    def from_key(cls, key: str) -> "Scenario":
        normalized = key.strip().upper()
        for scenario in cls:
            if scenario.value == normalized or scenario.name == normalized:
                return scenario
        raise ValueError(f"Unknown scenario: {key!r}")


SCENARIO_LABELS = {
    Scenario.NONE: "Sea board",
    Scenario.FOG_ISLAND: "Fog Island",
    Scenario.FOUR_ISLANDS: "Four Islands",
    Scenario.THROUGH_THE_DESERT: "Through the Desert",
    Scenario.PIRATE_ISLANDS: "Pirate Islands",
    Scenario.FORGOTTEN_TRIBE: "Forgotten Tribe",
}
