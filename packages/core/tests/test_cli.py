"""Tests for the command-line interface."""

import json
from decimal import Decimal

import pytest

from childcare_core.cli import build_parser, collect_parameters, main


@pytest.fixture
def store_path(clean_env):
    return str(clean_env / "scenarios.json")


class TestCollectParameters:
    """Test suite for turning options into HouseholdParameters."""

    def test_defaults_when_no_options(self):
        args = build_parser().parse_args([])

        params = collect_parameters(args)

        assert params.income_1 == Decimal("92000")

    def test_options_override(self):
        args = build_parser().parse_args(
            [
                "--income-1", "$120,000",
                "--childcare-type", "centre-based",
                "--number-of-children-in-childcare", "2",
                "--no-expecting-another-baby",
            ]
        )

        params = collect_parameters(args)

        assert params.income_1 == Decimal("120000")
        assert params.childcare_type.value == "centre-based"
        assert params.number_of_children_in_childcare == 2
        assert params.expecting_another_baby is False

    def test_malformed_amount_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--income-1", "1.2.3"])

        assert exc_info.value.code == 2
        assert "Could not parse amount" in capsys.readouterr().err


class TestMain:
    """Test suite for the childcare-whatif entry point."""

    def test_text_output(self, store_path, capsys):
        assert main(["--store", store_path]) == 0

        out = capsys.readouterr().out
        assert "Take home after childcare:  $120,486.30" in out
        assert "Family Take Home After Childcare" in out

    def test_json_output(self, store_path, capsys):
        assert main(["--store", store_path, "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["with_children"]) == Decimal("120486.3008")
        assert Decimal(data["child_care_cost"]) == Decimal("19099.6992")

    def test_save_list_load_delete(self, store_path, capsys):
        assert main(["--store", store_path, "--days-off-per-week-1", "1", "--save", "Fridays"]) == 0
        capsys.readouterr()

        assert main(["--store", store_path, "--list"]) == 0
        scenario_id, name = capsys.readouterr().out.split()
        assert name == "Fridays"

        assert main(["--store", store_path, "--load", scenario_id, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert Decimal(data["financials"]["parent_1"]["adjusted_income"]) == Decimal("73600")

        assert main(["--store", store_path, "--delete", scenario_id]) == 0
        assert main(["--store", store_path, "--list"]) == 0
        assert capsys.readouterr().out == ""

    def test_unknown_saved_scenario(self, store_path, capsys):
        assert main(["--store", store_path, "--load", "missing"]) == 2

        assert "missing" in capsys.readouterr().err

    def test_zero_work_days_is_an_error(self, store_path, capsys):
        assert main(["--store", store_path, "--work-days-per-week-2", "0"]) == 2

        assert "Work days per week" in capsys.readouterr().err

    def test_invalid_configuration(self, store_path, monkeypatch, capsys):
        monkeypatch.setenv("CHILDCARE_LOG_LEVEL", "LOUD")

        assert main(["--store", store_path]) == 2

        assert "log_level" in capsys.readouterr().err
