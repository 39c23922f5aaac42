"""
Tests for the command line interface.
"""

import pytest
from typer.testing import CliRunner

from businesshours.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep any businesshours.yaml in the working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config_file(tmp_path):
    config_path = tmp_path / "calendar.yaml"
    config_path.write_text(
        "calendar:\n"
        "  holidays: [2023-01-03]\n",
        encoding="utf-8",
    )
    return config_path


class TestCheckCommand:

    def test_inside(self):
        result = runner.invoke(app, ["check", "2023-01-02 10:00"])

        assert result.exit_code == 0
        assert "is within business hours" in result.output

    def test_outside(self):
        result = runner.invoke(app, ["check", "2023-01-07 10:00"])

        assert result.exit_code == 0
        assert "is outside business hours" in result.output

    def test_holiday_option(self):
        result = runner.invoke(app, ["check", "2023-01-02 10:00", "--holiday", "2023-01-02"])

        assert result.exit_code == 0
        assert "outside" in result.output

    def test_holiday_from_config_file(self, config_file):
        result = runner.invoke(app, ["check", "2023-01-03 10:00", "--config", str(config_file)])

        assert result.exit_code == 0
        assert "outside" in result.output

    def test_invalid_start_of_day(self):
        result = runner.invoke(app, ["check", "2023-01-02 10:00", "--start-of-day", "9"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["check", "2023-01-02 10:00", "--config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1


class TestIntervalCommand:

    def test_three_days(self):
        result = runner.invoke(app, ["interval", "2023-01-02 09:00", "2023-01-04 17:00"])

        assert result.exit_code == 0
        assert "24 business hours" in result.output

    def test_with_holiday_in_config(self, config_file):
        result = runner.invoke(app, [
            "interval", "2023-01-02 09:00", "2023-01-04 17:00", "--config", str(config_file),
        ])

        assert result.exit_code == 0
        assert "16 business hours" in result.output

    def test_inverted_interval(self):
        result = runner.invoke(app, ["interval", "2023-01-04 17:00", "2023-01-02 09:00"])

        assert result.exit_code == 1
        assert "Error" in result.output


class TestAddCommand:

    def test_forward_over_weekend(self):
        result = runner.invoke(app, ["add", "2023-01-06 15:00", "4"])

        assert result.exit_code == 0
        assert "Monday, 2023-01-09 11:00" in result.output

    def test_backward_over_weekend(self):
        result = runner.invoke(app, ["add", "2023-01-09 09:00", "--", "-5"])

        assert result.exit_code == 0
        assert "Friday, 2023-01-06 12:00" in result.output

    def test_custom_working_days(self):
        result = runner.invoke(app, [
            "add", "2023-01-06 15:00", "4",
            *[arg for day in range(6) for arg in ("--working-day", str(day))],
        ])

        assert result.exit_code == 0
        assert "Saturday, 2023-01-07 11:00" in result.output

    def test_timezone(self):
        result = runner.invoke(app, ["add", "2023-01-06 15:00", "4", "--timezone", "Asia/Tokyo"])

        assert result.exit_code == 0
        assert "Monday, 2023-01-09 11:00" in result.output

    def test_unknown_timezone(self):
        result = runner.invoke(app, ["add", "2023-01-06 15:00", "4", "--timezone", "Nowhere/Land"])

        assert result.exit_code == 1


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "businesshours" in result.output
