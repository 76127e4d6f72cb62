"""Tests for saved scenario stores."""

import json
from decimal import Decimal

import pytest

from childcare_core import HouseholdParameters, ScenarioNotFoundError
from childcare_core.scenarios import (
    InMemoryScenarioStore,
    JsonFileScenarioStore,
    SavedScenario,
)


@pytest.fixture
def part_time_scenario() -> SavedScenario:
    return SavedScenario(
        name="Part time",
        parameters=HouseholdParameters(days_off_per_week_1=Decimal("2")),
    )


class TestSavedScenario:
    """Test suite for SavedScenario."""

    def test_generates_unique_ids(self):
        assert SavedScenario(name="a").id != SavedScenario(name="b").id

    def test_name_required(self):
        with pytest.raises(ValueError):
            SavedScenario(name="")


class TestInMemoryScenarioStore:
    """Test suite for InMemoryScenarioStore."""

    def test_put_and_get_all(self, part_time_scenario: SavedScenario):
        store = InMemoryScenarioStore()
        store.put(part_time_scenario)

        assert store.get_all() == [part_time_scenario]
        assert store.get(part_time_scenario.id) == part_time_scenario

    def test_put_replaces_same_id(self, part_time_scenario: SavedScenario):
        store = InMemoryScenarioStore()
        store.put(part_time_scenario)
        renamed = part_time_scenario.model_copy(update={"name": "Three days"})
        store.put(renamed)

        assert [s.name for s in store.get_all()] == ["Three days"]

    def test_delete(self, part_time_scenario: SavedScenario):
        store = InMemoryScenarioStore()
        store.put(part_time_scenario)

        store.delete(part_time_scenario.id)
        store.delete("never-saved")

        assert store.get_all() == []

    def test_get_missing_raises(self):
        with pytest.raises(ScenarioNotFoundError) as exc_info:
            InMemoryScenarioStore().get("missing")

        assert exc_info.value.scenario_id == "missing"


class TestJsonFileScenarioStore:
    """Test suite for JsonFileScenarioStore."""

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonFileScenarioStore(tmp_path / "none.json").get_all() == []

    def test_blank_file_is_empty(self, tmp_path):
        path = tmp_path / "blank.json"
        path.write_text("   ")

        assert JsonFileScenarioStore(path).get_all() == []

    def test_persists_across_instances(self, tmp_path, part_time_scenario: SavedScenario):
        path = tmp_path / "nested" / "scenarios.json"
        JsonFileScenarioStore(path).put(part_time_scenario)

        loaded = JsonFileScenarioStore(path).get(part_time_scenario.id)

        assert loaded == part_time_scenario
        assert loaded.parameters.days_off_per_week_1 == Decimal("2")

    def test_file_uses_flat_camel_case_parameters(self, tmp_path, part_time_scenario: SavedScenario):
        path = tmp_path / "scenarios.json"
        JsonFileScenarioStore(path).put(part_time_scenario)

        data = json.loads(path.read_text())

        assert data[0]["name"] == "Part time"
        assert data[0]["parameters"]["daysOffPerWeek1"] == "2"

    def test_delete(self, tmp_path, part_time_scenario: SavedScenario):
        store = JsonFileScenarioStore(tmp_path / "scenarios.json")
        other = SavedScenario(name="Other")
        store.put(part_time_scenario)
        store.put(other)

        store.delete(part_time_scenario.id)

        assert [s.id for s in store.get_all()] == [other.id]

    def test_get_missing_raises(self, tmp_path):
        with pytest.raises(ScenarioNotFoundError):
            JsonFileScenarioStore(tmp_path / "scenarios.json").get("missing")
