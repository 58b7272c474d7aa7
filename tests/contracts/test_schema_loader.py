"""Tests for selector schema loading and validation."""

import json

import pytest

from src.contracts import (
    SCHEMAS_BASE_PATH,
    SchemaFileError,
    SchemaLoadError,
    SchemaValidationError,
    get_meta_schema,
    load_schema,
    validate_schema,
)
from src.engine import schema as helpers


class TestLoadSchema:
    """Tests for load_schema function."""

    def test_load_json(self, tmp_path):
        """Load a JSON schema file."""
        schema = {"selector": {"title": "h1"}, "scope": ["article"]}
        schema_file = tmp_path / "article.json"
        schema_file.write_text(json.dumps(schema))

        assert load_schema(schema_file) == schema

    def test_load_yaml(self, tmp_path):
        """Load a YAML schema file."""
        schema_file = tmp_path / "article.yaml"
        schema_file.write_text(
            "selector:\n"
            "  title: h1\n"
            "  price:\n"
            "    selector: .price\n"
            "    number: true\n"
            "scope: [article]\n"
        )

        assert load_schema(str(schema_file)) == {
            "selector": {"title": "h1", "price": {"selector": ".price", "number": True}},
            "scope": ["article"],
        }

    def test_load_bare_selector(self, tmp_path):
        """Load a schema that is just a selector string."""
        schema_file = tmp_path / "title.yml"
        schema_file.write_text("h1 | uppercase\n")
        assert load_schema(schema_file) == "h1 | uppercase"

    def test_not_found(self):
        """Verify SchemaLoadError raised for missing file."""
        with pytest.raises(SchemaLoadError) as exc_info:
            load_schema("/nonexistent/path/schema.json")

        assert "not found" in str(exc_info.value).lower()
        assert exc_info.value.schema_path == "/nonexistent/path/schema.json"

    def test_invalid_json(self, tmp_path):
        """Verify SchemaLoadError for malformed JSON."""
        bad_file = tmp_path / "bad.json"
        bad_file.write_text("{ invalid json }")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_schema(bad_file)

        assert "invalid json" in str(exc_info.value).lower()

    def test_invalid_yaml(self, tmp_path):
        """Verify SchemaLoadError for malformed YAML."""
        bad_file = tmp_path / "bad.yaml"
        bad_file.write_text("selector: [unclosed\n")

        with pytest.raises(SchemaLoadError) as exc_info:
            load_schema(bad_file)

        assert "invalid yaml" in str(exc_info.value).lower()


class TestValidateSchema:
    """Tests for structural validation against the meta schema."""

    def test_meta_schema_is_bundled(self):
        """Test the meta schema ships with the package."""
        assert (SCHEMAS_BASE_PATH / "selector.schema.json").exists()
        assert get_meta_schema()["title"] == "Selector schema"

    @pytest.mark.parametrize("schema", [
        "h1",
        ["li"],
        {"selector": "h1", "scope": ""},
        {"selector": ["li"], "scope": []},
        {"selector": {"title": "h1", "links": ["a@href"]}, "objTransforms": ["json"]},
        {"selector": {"nested": {"selector": {"deep": {"selector": "b", "trim": False}}}}},
        {"selector": ".price", "number": True, "int": True, "roundMode": "floor"},
        {"selector": "time", "date": True, "parse": ["DD/MM/YYYY", "YYYY-MM"], "format": "YYYY"},
    ])
    def test_valid(self, schema):
        """Test well-formed schemas pass."""
        validate_schema(schema)

    def test_helper_output_is_valid(self):
        """Test schemas built with the helpers pass validation."""
        validate_schema(helpers.obj({
            "title": helpers.string("h1"),
            "price": helpers.number(".price"),
            "stock": helpers.boolean(".stock", truthy="in stock"),
            "date": helpers.date("time"),
        }, [".item"]))

    @pytest.mark.parametrize("schema", [
        42,
        {"scope": "h1"},
        {"selector": "h1", "trim": "yes"},
        {"selector": ".price", "roundMode": "up"},
        {"selector": {"title": 5}},
    ])
    def test_invalid(self, schema):
        """Test malformed schemas are rejected with details."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema(schema)

        assert "Invalid selector schema" in str(exc_info.value)
        assert len(exc_info.value.errors) == 1


class TestSchemaFileErrors:
    """Tests for the schema file exception family."""

    def test_load_error_message(self):
        """Test the load error names the file and the reason."""
        error = SchemaLoadError("schemas/shop.yaml", "File not found")
        assert str(error) == "Cannot read selector schema 'schemas/shop.yaml': File not found"
        assert error.reason == "File not found"

    def test_validation_error_details(self):
        """Test the validation error lists each violation with its location."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema({"selector": {"price": {"selector": ".price", "trim": 1}}})

        [error] = exc_info.value.errors
        assert set(error) == {"path", "message"}
        assert error["message"] in exc_info.value.message

    def test_common_base(self, tmp_path):
        """Test both errors can be caught as SchemaFileError."""
        with pytest.raises(SchemaFileError):
            load_schema(tmp_path / "missing.json")
        with pytest.raises(SchemaFileError):
            validate_schema({"scope": "h1"})
