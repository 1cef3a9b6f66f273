"""End-to-end tests for the command line interface."""

import json

import pytest
import yaml

from flight_patterns.cli.main import main, parse_args


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr().out


@pytest.mark.e2e
class TestPassengerCommands:

    def test_passengers_list(self, capsys):
        data = json.loads(run_cli(capsys, "passengers", "list"))
        rows = data["passengers"]
        assert [(r["category"], r["cost"], r["baggage_allowance"]) for r in rows] == [
            ("standard", 100.0, 10.0),
            ("economic", 50.0, 0.0),
            ("business", 200.0, 50.0),
        ]

    def test_quote_business(self, capsys):
        data = json.loads(run_cli(capsys, "passengers", "quote", "--wrap", "business", "--extra-kg", "10"))
        quote = data["quote"]
        assert quote["cost"] == 400.0
        assert quote["can_buy_extra_baggage"] is True
        assert quote["extra_baggage_cost"] == 1350.0

    def test_quote_defaults(self, capsys):
        quote = json.loads(run_cli(capsys, "passengers", "quote"))["quote"]
        assert quote["name"] == "Okan Yücel"
        assert quote["wraps"] == ["economic", "business"]

    def test_quote_yaml(self, capsys):
        data = yaml.safe_load(run_cli(capsys, "--format", "yaml", "passengers", "quote", "--wrap", "economic"))
        assert data["quote"]["category"] == "economic"
        assert data["quote"]["can_buy_extra_baggage"] is False

    def test_quote_table(self, capsys):
        out = run_cli(capsys, "--format", "table", "passengers", "quote", "--name", "Ali")
        assert "Extra baggage cost" in out
        assert "Ali" in out

    def test_unknown_wrap_exits_with_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["passengers", "quote", "--wrap", "first"])
        assert exc.value.code == 1
        assert "Unknown wrap 'first'" in capsys.readouterr().out

    def test_wraps(self, capsys):
        data = json.loads(run_cli(capsys, "passengers", "wraps"))
        assert data["wraps"] == [
            {"name": "business", "class": "BusinessPassenger"},
            {"name": "economic", "class": "EconomicPassenger"},
        ]

    def test_passengers_list_table(self, capsys):
        out = run_cli(capsys, "--format", "table", "passengers", "list")
        assert "Category" in out
        assert "economic" in out


@pytest.mark.e2e
class TestFriendCommands:

    def test_friends_list(self, capsys):
        data = json.loads(run_cli(capsys, "friends", "list"))
        assert [f["name"] for f in data["friends"]] == ["Okan", "Uğur", "Ali"]

    def test_friends_add(self, capsys):
        data = json.loads(run_cli(capsys, "friends", "add", "Burak", "Inner", "Male", "39"))
        assert data["friends"][-1] == {"name": "Burak", "surname": "Inner", "genre": "Male", "age": 39}

    def test_friends_delete(self, capsys):
        data = json.loads(run_cli(capsys, "friends", "delete", "0"))
        assert [f["name"] for f in data["friends"]] == ["Uğur", "Ali"]

    def test_friends_delete_out_of_range(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["friends", "delete", "10"])
        assert exc.value.code == 1
        assert "Friend with ID 10 not found" in capsys.readouterr().out

    def test_friends_list_output(self, capsys):
        out = run_cli(capsys, "--format", "list", "friends", "list")
        assert "Surname" in out
        assert "Özışık" in out


@pytest.mark.e2e
class TestGlobalOptions:

    def test_missing_resource(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "No resource specified" in capsys.readouterr().out

    def test_missing_action(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["friends"])
        assert exc.value.code == 1

    def test_output_file(self, capsys, tmp_path):
        target = tmp_path / "out.json"
        out = run_cli(capsys, "--output", str(target), "passengers", "list")
        assert "Output written to" in out
        assert json.loads(target.read_text(encoding="utf-8"))["passengers"][0]["cost"] == 100.0

    def test_invalid_config_file(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--config", str(tmp_path / "missing.json"), "passengers", "list"])
        assert exc.value.code == 1
        assert "Configuration file not found" in capsys.readouterr().out

    def test_config_file_demo_defaults(self, capsys, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"demo": {"passenger_name": "Uğur Özışık", "wraps": []}}), encoding="utf-8")
        quote = json.loads(run_cli(capsys, "--config", str(path), "passengers", "quote"))["quote"]
        assert quote["name"] == "Uğur Özışık"
        assert quote["category"] == "standard"

    def test_parse_args_collects_wraps(self):
        args = parse_args(["passengers", "quote", "--wrap", "economic", "--wrap", "business"])
        assert args.wraps == ["economic", "business"]
        assert args.format == "json"
