"""CLI tests using click's CliRunner against a JSON catalog file."""

import json

import pytest
from click.testing import CliRunner

from storefront.infrastructure.cli.main import cli

CATALOG = [
    {"id": 1, "title": "Red Shirt", "category": "apparel", "price": 20, "stock": 3},
    {"id": 2, "title": "Blue Mug", "category": "home", "price": 8, "stock": 0},
    {"id": 3, "title": "Red Mug", "category": "home", "price": 12.5, "stock": 2},
]


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return path


def _run(catalog_file, *args, input=None):
    runner = CliRunner()
    return runner.invoke(cli, ["--catalog-file", str(catalog_file), *args], input=input)


def _product_rows(output):
    return [line.split()[0] for line in output.splitlines() if line[:1].isdigit()]


class TestCatalogCommands:

    def test_list_all(self, catalog_file):
        result = _run(catalog_file, "catalog", "list")
        assert result.exit_code == 0, result.output
        assert "Products (3)" in result.output
        assert _product_rows(result.output) == ["1", "2", "3"]
        assert "Out of Stock" in result.output

    def test_list_filtered_and_sorted(self, catalog_file):
        result = _run(catalog_file, "catalog", "list", "--search", "RED", "--sort", "asc")
        assert result.exit_code == 0, result.output
        assert _product_rows(result.output) == ["3", "1"]

    def test_list_by_category(self, catalog_file):
        result = _run(catalog_file, "catalog", "list", "--category", "home", "--sort", "desc")
        assert _product_rows(result.output) == ["3", "2"]

    def test_list_nothing_found(self, catalog_file):
        result = _run(catalog_file, "catalog", "list", "--search", "sofa")
        assert result.exit_code == 0
        assert "No products found" in result.output

    def test_bad_sort_option(self, catalog_file):
        result = _run(catalog_file, "catalog", "list", "--sort", "sideways")
        assert result.exit_code != 0
        assert "Unknown sort order" in result.output

    def test_categories(self, catalog_file):
        result = _run(catalog_file, "catalog", "categories")
        assert result.exit_code == 0
        assert result.output.split() == ["apparel", "home"]

    def test_missing_catalog_reports_error_and_shows_empty_list(self, tmp_path):
        result = _run(tmp_path / "missing.json", "catalog", "list")
        assert result.exit_code == 0
        assert "Error loading products" in result.output
        assert "No products found" in result.output


class TestShopCommand:

    def test_cart_flow(self, catalog_file):
        script = "\n".join([
            "add 1",
            "add 1",
            "add 2",
            "cart",
            "quit",
        ]) + "\n"
        result = _run(catalog_file, "shop", input=script)
        assert result.exit_code == 0, result.output
        assert "Product 1 in cart: 2" in result.output
        assert "Product 2 not added" in result.output
        assert "Total Items: 2" in result.output
        assert "Total Price: $40.00" in result.output
        assert "Leaving with 2 item(s), total $40.00." in result.output

    def test_quantity_commands(self, catalog_file):
        script = "\n".join([
            "add 1",
            "dec 1",
            "inc 1",
            "inc 1",
            "inc 1",
            "qty 1 0",
            "qty 1 9",
            "remove 1",
            "cart",
        ]) + "\n"
        result = _run(catalog_file, "shop", input=script)
        assert result.exit_code == 0, result.output
        assert "use 'remove' instead" in result.output
        assert "Product 1 in cart: 3" in result.output
        assert "at its stock limit" in result.output
        assert "Your cart is empty" in result.output

    def test_filters_and_clear(self, catalog_file):
        script = "search mug\nsort desc\nclear\nquit\n"
        result = _run(catalog_file, "shop", input=script)
        assert result.exit_code == 0, result.output
        assert "search='mug' category='' sort=highToLow" in result.output
        assert "search='' category='' sort=none" in result.output

    def test_errors_do_not_end_the_session(self, catalog_file):
        script = "add 99\nfrobnicate\nqty 1 lots\nadd 3\nquit\n"
        result = _run(catalog_file, "shop", input=script)
        assert result.exit_code == 0, result.output
        assert "Product with ID '99' not found" in result.output
        assert "Unknown command 'frobnicate'" in result.output
        assert "Invalid quantity 'lots'" in result.output
        assert "Product 3 in cart: 1" in result.output

    def test_allow_overstock_flag(self, catalog_file):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["--allow-overstock", "--catalog-file", str(catalog_file), "shop"],
            input="add 3\nadd 3\nadd 3\nquit\n",
        )
        assert result.exit_code == 0, result.output
        assert "Product 3 in cart: 3" in result.output

    def test_end_of_input_ends_session(self, catalog_file):
        result = _run(catalog_file, "shop", input="add 1\n")
        assert result.exit_code == 0, result.output
        assert "Leaving with 1 item(s), total $20.00." in result.output
