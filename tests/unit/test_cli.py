"""CLI tests using click's CliRunner."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from distributor_permissions.cli.main import cli

_CSV_TEXT = (
    "City Code,Province Code,Country Code,City Name,Province Name,Country Name\n"
    "CHENNAI,TAMILNADU,IN,Chennai,Tamil Nadu,India\n"
    "BANGALORE,KARNATAKA,IN,Bangalore,Karnataka,India\n"
    "HUBLI,KARNATAKA,IN,Hubli,Karnataka,India\n"
)


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cities_csv(tmp_path: Path) -> str:
    path = tmp_path / "cities.csv"
    path.write_text(_CSV_TEXT, encoding="utf-8")
    return str(path)


@pytest.fixture()
def distributors_yaml(tmp_path: Path) -> str:
    path = tmp_path / "distributors.yaml"
    path.write_text(
        "distributors:\n"
        "  - name: SOUTH\n"
        "    include: [IN]\n"
        "    exclude: [CHENNAI-TAMILNADU-IN]\n"
        "  - name: NORTH\n"
        "    include: [US]\n",
        encoding="utf-8",
    )
    return str(path)


class TestEvaluateCommand:
    def test_builtin_distributors_text(self, runner: CliRunner, cities_csv: str) -> None:
        result = runner.invoke(cli, ["evaluate", "--locations", cities_csv])
        assert result.exit_code == 0
        output = result.output
        assert "DISTRIBUTOR1 Permissions:" in output
        assert "Chennai, Tamil Nadu, India: false" in output
        assert (
            output.index("DISTRIBUTOR1")
            < output.index("DISTRIBUTOR2")
            < output.index("DISTRIBUTOR3")
        )

    def test_json_output(
        self, runner: CliRunner, cities_csv: str, distributors_yaml: str
    ) -> None:
        result = runner.invoke(
            cli,
            [
                "evaluate",
                "-l",
                cities_csv,
                "-d",
                distributors_yaml,
                "--format",
                "json",
                "--workers",
                "2",
            ],
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        names = [entry["distributor"] for entry in payload["distributors"]]
        assert names == ["SOUTH", "NORTH"]
        assert [r["allowed"] for r in payload["distributors"][0]["results"]] == [
            False,
            True,
            True,
        ]

    def test_config_file_supplies_everything(
        self, runner: CliRunner, cities_csv: str, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "run.yaml"
        config_path.write_text(
            f"locations_path: {cities_csv}\n"
            "output_format: json\n"
            "distributors:\n"
            "  - name: ONLY\n"
            "    include: [HUBLI-KARNATAKA-IN]\n",
            encoding="utf-8",
        )
        result = runner.invoke(cli, ["evaluate", "--config", str(config_path)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["distributors"][0]["distributor"] == "ONLY"

    def test_table_output(self, runner: CliRunner, cities_csv: str) -> None:
        result = runner.invoke(cli, ["evaluate", "-l", cities_csv, "-f", "table"])
        assert result.exit_code == 0
        assert "DISTRIBUTOR3" in result.output

    def test_missing_source_fails_without_report(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        result = runner.invoke(
            cli, ["evaluate", "--locations", str(tmp_path / "missing.csv")]
        )
        assert result.exit_code == 1
        assert "Permissions:" not in result.output

    def test_malformed_record_fails_without_report(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        path = tmp_path / "bad.csv"
        path.write_text(_CSV_TEXT + "PUNE,MAHARASHTRA\n", encoding="utf-8")
        result = runner.invoke(cli, ["evaluate", "--locations", str(path)])
        assert result.exit_code == 1
        assert "Permissions:" not in result.output

    def test_bad_distributor_config_fails(
        self, runner: CliRunner, cities_csv: str, tmp_path: Path
    ) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("distributors: nope\n", encoding="utf-8")
        result = runner.invoke(cli, ["evaluate", "-l", cities_csv, "-d", str(path)])
        assert result.exit_code == 1

    def test_no_locations_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["evaluate"])
        assert result.exit_code == 2

    def test_verbose_flag_accepted(self, runner: CliRunner, cities_csv: str) -> None:
        result = runner.invoke(cli, ["--verbose", "evaluate", "-l", cities_csv])
        assert result.exit_code == 0


class TestCheckCommand:
    def test_check_builtin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "CHENNAI-TAMILNADU-IN"])
        assert result.exit_code == 0
        assert "DISTRIBUTOR2" in result.output
        assert "DENIED" in result.output

    def test_check_with_file(self, runner: CliRunner, distributors_yaml: str) -> None:
        result = runner.invoke(cli, ["check", "NEWYORK-NY-US", "-d", distributors_yaml])
        assert result.exit_code == 0
        assert "NORTH" in result.output
        assert "ALLOWED" in result.output


class TestVersionCommand:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert "distributor-permissions" in result.output
