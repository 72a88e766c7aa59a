"""
Tests for the command-line interface.
"""
import pandas as pd
import pytest

from product_selector.cli import product_selector_cli
from product_selector.cli.product_selector_cli import main, parse_args


@pytest.fixture
def cli_connector(connector, monkeypatch):
    monkeypatch.setattr(product_selector_cli, "SnowflakeConnector", lambda: connector)
    return connector


class TestParseArgs:
    """Tests for argument parsing."""

    def test_filter_arguments(self):
        args = parse_args(["filter", "export.xlsx", "--price-min", "20", "--days-max", "30",
                           "--shipping", "FBA,FBM", "--no-blacklist"])

        assert args.command == "filter"
        assert args.price_min == 20.0
        assert args.price_max is None
        assert args.days_since_launch_max == 30.0
        assert args.shipping == "FBA,FBM"
        assert args.no_blacklist is True

    def test_blacklist_arguments(self):
        args = parse_args(["blacklist", "set", "Kitchen & Dining", "Mugs"])

        assert args.action == "set"
        assert args.categories == ["Kitchen & Dining", "Mugs"]

    def test_verbose_after_subcommand(self):
        assert parse_args(["filter", "export.xlsx", "--verbose"]).verbose is True
        assert parse_args(["blacklist", "list"]).verbose is False

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_args([])


class TestFilterCommand:
    """Tests for the filter subcommand."""

    def test_filter_and_export(self, cli_connector, write_workbook, export_rows, tmp_path, capsys):
        cli_connector.flags["Napkins"] = True
        output = tmp_path / "out" / "filtered.csv"

        exit_code = main(["filter", write_workbook(export_rows), "--shipping", "FBA,FBM",
                          "--export", str(output)])

        assert exit_code == 0
        assert "Parsed 3 products, 2 match" in capsys.readouterr().out
        exported = pd.read_csv(output, encoding="utf-8-sig", dtype={"asin": str})
        assert exported["asin"].tolist() == ["B001", "B003"]

    def test_price_range(self, cli_connector, write_workbook, export_rows, capsys):
        exit_code = main(["filter", write_workbook(export_rows), "--price-min", "20", "--price-max", "30",
                          "--no-blacklist"])

        assert exit_code == 0
        assert "0 match" in capsys.readouterr().out

    def test_inverted_range_fails(self, cli_connector, write_workbook, export_rows):
        assert main(["filter", write_workbook(export_rows), "--price-min", "30", "--price-max", "20"]) == 1

    def test_invalid_upload_fails(self, cli_connector, capsys):
        assert main(["filter", "products.csv"]) == 1
        assert "Error" in capsys.readouterr().out


class TestBlacklistCommand:
    """Tests for the blacklist subcommand."""

    def test_set_check_and_list(self, cli_connector, capsys):
        assert main(["blacklist", "set", "Kitchen & Dining"]) == 0
        assert cli_connector.flags == {"KitchenDining": True}

        assert main(["blacklist", "check", "Kitchen & Dining", "Mugs"]) == 0
        out = capsys.readouterr().out
        assert "Kitchen & Dining: blacklisted" in out
        assert "Mugs: not blacklisted" in out

        assert main(["blacklist", "list"]) == 0
        assert capsys.readouterr().out.strip() == "KitchenDining"

    def test_unset_and_all(self, cli_connector, capsys):
        cli_connector.flags.update({"Mugs": True, "Napkins": True})

        assert main(["blacklist", "unset", "Mugs"]) == 0
        assert main(["blacklist", "all"]) == 0

        out = capsys.readouterr().out
        assert "[ ] Mugs" in out
        assert "[x] Napkins" in out

    def test_set_requires_category(self, cli_connector):
        assert main(["blacklist", "set"]) == 1

    def test_init_and_test(self, cli_connector):
        assert main(["blacklist", "init"]) == 0
        assert main(["blacklist", "test"]) == 0

    def test_unreachable_store(self, cli_connector):
        cli_connector.fail = True

        assert main(["blacklist", "test"]) == 1
        assert main(["blacklist", "set", "Mugs"]) == 1
