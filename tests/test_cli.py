"""Tests for CLI."""

import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from openapi_sidebars.cli import app

runner = CliRunner()
FIXTURES = Path(__file__).parent / "fixtures"


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "build" in result.stdout
    assert "validate" in result.stdout
    assert "category" in result.stdout


def test_cli_no_args_shows_help():
    result = runner.invoke(app, [])
    # Exit code 2 is standard for "no command specified" (usage error)
    assert result.exit_code == 2
    assert "build" in result.output


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "openapi-sidebars" in result.stdout


# =============================================================================
# build
# =============================================================================


def test_build_to_stdout():
    result = runner.invoke(app, ["build", str(FIXTURES / "petstore_items.json")])

    assert result.exit_code == 0
    sidebar = json.loads(result.stdout)
    assert [item["label"] for item in sidebar] == [
        "Introduction",
        "pet",
        "store",
        "API",
    ]
    pet = sidebar[1]
    assert [link["docId"] for link in pet["items"]] == [
        "add-pet",
        "get-pet-by-id",
        "place-order",
    ]
    assert pet["items"][1]["className"] == "menu__list-item--deprecated"
    assert "className" not in pet["items"][0]
    assert [link["docId"] for link in sidebar[3]["items"]] == ["health"]


def test_build_writes_output_file(tmp_path: Path):
    output = tmp_path / "out" / "sidebar.json"

    result = runner.invoke(
        app,
        [
            "build",
            str(FIXTURES / "multi_source_items.yml"),
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 0
    assert "Generated" in result.output
    sidebar = json.loads(output.read_text(encoding="utf-8"))
    assert [item["label"] for item in sidebar] == ["Swagger Petstore", "yogurtstore"]


def test_build_yaml_format(tmp_path: Path):
    output = tmp_path / "sidebar.yml"

    result = runner.invoke(
        app,
        [
            "build",
            str(FIXTURES / "petstore_items.json"),
            "-o",
            str(output),
            "--format",
            "yaml",
        ],
    )

    assert result.exit_code == 0
    sidebar = yaml.safe_load(output.read_text(encoding="utf-8"))
    assert sidebar[0] == {
        "type": "link",
        "label": "Introduction",
        "href": "/api/introduction",
        "docId": "introduction",
    }


def test_build_dry_run_does_not_write(tmp_path: Path):
    output = tmp_path / "sidebar.json"

    result = runner.invoke(
        app,
        ["build", str(FIXTURES / "petstore_items.json"), "-o", str(output), "-n"],
    )

    assert result.exit_code == 0
    assert "Would generate" in result.output
    assert not output.exists()


def test_build_options_file_and_flag_override():
    result = runner.invoke(
        app,
        [
            "build",
            str(FIXTURES / "petstore_items.json"),
            "--options",
            str(FIXTURES / "options.yml"),
            "--no-collapsible",
        ],
    )

    assert result.exit_code == 0
    sidebar = json.loads(result.stdout)
    categories = [item for item in sidebar if item["type"] == "category"]
    assert categories
    for category in categories:
        # collapsed comes from the options file, collapsible from the flag
        assert category["collapsed"] is False
        assert category["collapsible"] is False


def test_build_default_options():
    result = runner.invoke(app, ["build", str(FIXTURES / "petstore_items.json")])

    sidebar = json.loads(result.stdout)
    assert sidebar[-1]["collapsible"] is True
    assert sidebar[-1]["collapsed"] is True


def test_build_missing_items_file():
    result = runner.invoke(app, ["build", "/nonexistent/items.json"])

    assert result.exit_code == 1
    assert "not found" in result.output.lower()


def test_build_invalid_items(tmp_path: Path):
    items = tmp_path / "items.yml"
    items.write_text("- type: page\n", encoding="utf-8")

    result = runner.invoke(app, ["build", str(items)])

    assert result.exit_code == 1
    assert "Error loading items" in result.output


def test_build_invalid_options():
    result = runner.invoke(
        app,
        [
            "build",
            str(FIXTURES / "petstore_items.json"),
            "--options",
            str(FIXTURES / "options_unknown_key.yml"),
        ],
    )

    assert result.exit_code == 1
    assert "Error loading options" in result.output


def test_build_unknown_format():
    result = runner.invoke(
        app, ["build", str(FIXTURES / "petstore_items.json"), "-f", "xml"]
    )

    assert result.exit_code == 1
    assert "Unsupported format" in result.output


def test_build_quiet_suppresses_messages(tmp_path: Path):
    output = tmp_path / "sidebar.json"

    result = runner.invoke(
        app,
        ["build", str(FIXTURES / "petstore_items.json"), "-o", str(output), "-q"],
    )

    assert result.exit_code == 0
    assert result.output == ""
    assert output.exists()


# =============================================================================
# validate
# =============================================================================


def test_validate_reports_counts():
    result = runner.invoke(app, ["validate", str(FIXTURES / "petstore_items.json")])

    assert result.exit_code == 0
    assert "Items valid" in result.output
    assert "Sources: 1" in result.output
    assert "API pages: 4" in result.output
    assert "Info pages: 1" in result.output
    assert "Tags: 2" in result.output


def test_validate_verbose_lists_pages():
    result = runner.invoke(
        app, ["validate", str(FIXTURES / "multi_source_items.yml"), "-v"]
    )

    assert result.exit_code == 0
    assert "yogurtstore/toppings/list" in result.output


def test_validate_missing_file():
    result = runner.invoke(app, ["validate", "/nonexistent/items.json"])

    assert result.exit_code == 1
    assert "File not found" in result.output


# =============================================================================
# category
# =============================================================================


def test_category_found():
    result = runner.invoke(
        app, ["category", str(FIXTURES / "categories" / "json"), "-v"]
    )

    assert result.exit_code == 0
    assert "_category_.json" in result.output
    assert "label: Pet Store" in result.output


def test_category_not_found():
    result = runner.invoke(app, ["category", str(FIXTURES / "categories" / "empty")])

    assert result.exit_code == 0
    assert "No category metadata file" in result.output


def test_category_invalid_file():
    result = runner.invoke(
        app, ["category", str(FIXTURES / "categories" / "invalid")]
    )

    assert result.exit_code == 1
    assert "looks invalid" in result.output
    assert "_category_.yml" in result.output


def test_category_missing_directory():
    result = runner.invoke(app, ["category", "/nonexistent/dir"])

    assert result.exit_code == 1


def test_build_options_from_full_plugin_entry():
    result = runner.invoke(
        app,
        [
            "build",
            str(FIXTURES / "petstore_items.json"),
            "--options",
            str(FIXTURES / "site_config_full_plugin.yml"),
        ],
    )

    assert result.exit_code == 0
    sidebar = json.loads(result.stdout)
    assert sidebar[-1]["collapsed"] is False


def test_build_scalar_plugins_reports_error(tmp_path: Path):
    options = tmp_path / "site.yml"
    options.write_text("plugins: 3\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["build", str(FIXTURES / "petstore_items.json"), "--options", str(options)],
    )

    assert result.exit_code == 1
    assert "Error loading options" in result.output
    assert "must be a list or mapping" in result.output


def test_validate_ignores_empty_tags(tmp_path: Path):
    items = tmp_path / "items.yml"
    items.write_text(
        """
- type: api
  title: List pets
  permalink: /api/list-pets
  id: list-pets
  source: petstore.yaml
  api:
    tags: ["", pets]
""",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["validate", str(items)])

    assert result.exit_code == 0
    assert "Tags: 1" in result.output
