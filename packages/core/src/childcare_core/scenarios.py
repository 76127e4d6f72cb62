"""Saved what-if scenarios.

A scenario store keeps named parameter sets so a user can come back to a
comparison later. Stores hold inputs only; results are always
recalculated. Two implementations are provided:

- InMemoryScenarioStore: process-local, for tests and embedding
- JsonFileScenarioStore: a single JSON array on disk
"""

import json
from pathlib import Path
from typing import Protocol, Union
from uuid import uuid4

import structlog
from pydantic import BaseModel, Field, TypeAdapter

from .exceptions import ScenarioNotFoundError
from .models import HouseholdParameters

logger = structlog.get_logger()


def _new_scenario_id() -> str:
    return uuid4().hex


class SavedScenario(BaseModel):
    """A named set of household parameters."""

    id: str = Field(default_factory=_new_scenario_id)
    name: str = Field(min_length=1)
    parameters: HouseholdParameters = Field(default_factory=HouseholdParameters)


_SCENARIO_LIST = TypeAdapter(list[SavedScenario])


class ScenarioStore(Protocol):
    """Key/value store for saved scenarios, keyed by scenario id."""

    def get_all(self) -> list[SavedScenario]:
        ...

    def get(self, scenario_id: str) -> SavedScenario:
        ...

    def put(self, scenario: SavedScenario) -> SavedScenario:
        ...

    def delete(self, scenario_id: str) -> None:
        ...


class InMemoryScenarioStore:
    """Scenario store backed by a dict. Preserves insertion order."""

    def __init__(self) -> None:
        self._scenarios: dict[str, SavedScenario] = {}

    def get_all(self) -> list[SavedScenario]:
        return list(self._scenarios.values())

    def get(self, scenario_id: str) -> SavedScenario:
        try:
            return self._scenarios[scenario_id]
        except KeyError:
            raise ScenarioNotFoundError(
                f"No saved scenario with id {scenario_id}",
                scenario_id=scenario_id,
            ) from None

    def put(self, scenario: SavedScenario) -> SavedScenario:
        """Insert or replace a scenario by id."""
        self._scenarios[scenario.id] = scenario
        return scenario

    def delete(self, scenario_id: str) -> None:
        """Remove a scenario. Deleting an unknown id is a no-op."""
        self._scenarios.pop(scenario_id, None)


class JsonFileScenarioStore:
    """Scenario store persisted as a JSON array.

    The whole file is read on every call and rewritten on every change;
    saved scenario lists are small.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> list[SavedScenario]:
        if not self.path.exists():
            return []
        raw = self.path.read_text(encoding="utf-8")
        if not raw.strip():
            return []
        return _SCENARIO_LIST.validate_json(raw)

    def _save(self, scenarios: list[SavedScenario]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [
            {
                "id": scenario.id,
                "name": scenario.name,
                "parameters": scenario.parameters.to_mapping(),
            }
            for scenario in scenarios
        ]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def get_all(self) -> list[SavedScenario]:
        return self._load()

    def get(self, scenario_id: str) -> SavedScenario:
        for scenario in self._load():
            if scenario.id == scenario_id:
                return scenario
        raise ScenarioNotFoundError(
            f"No saved scenario with id {scenario_id}",
            scenario_id=scenario_id,
        )

    def put(self, scenario: SavedScenario) -> SavedScenario:
        """Insert or replace a scenario by id."""
        scenarios = [s for s in self._load() if s.id != scenario.id]
        scenarios.append(scenario)
        self._save(scenarios)
        logger.info("scenario_saved", scenario_id=scenario.id, name=scenario.name, path=str(self.path))
        return scenario

    def delete(self, scenario_id: str) -> None:
        """Remove a scenario. Deleting an unknown id is a no-op."""
        scenarios = self._load()
        remaining = [s for s in scenarios if s.id != scenario_id]
        if len(remaining) != len(scenarios):
            self._save(remaining)
            logger.info("scenario_deleted", scenario_id=scenario_id, path=str(self.path))


__all__ = [
    "SavedScenario",
    "ScenarioStore",
    "InMemoryScenarioStore",
    "JsonFileScenarioStore",
]
