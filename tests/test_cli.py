"""Tests for the schemacheck command line."""

import json
import textwrap

import pytest
import structlog

from schemacheck.cli.main import (
    EXIT_ERROR,
    EXIT_INVALID,
    EXIT_VALID,
    build_parser,
    format_errors,
    load_reference,
    main,
)

SCHEMA_MODULE = textwrap.dedent(
    """
    from schemacheck import is_required, is_string

    user_schema = {
        "forename": [[is_required(is_string), "forename is required"]],
        "surname": [[is_required(is_string), "surname is required"]],
    }

    user_rules = {
        "forenameCannotEqualSurname": [
            [
                lambda user: user["forename"] != user["surname"],
                "forename cannot equal surname",
            ]
        ]
    }
    """
)


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def schema_module(tmp_path, monkeypatch):
    (tmp_path / "cli_user_schemas.py").write_text(SCHEMA_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_user_schemas"


@pytest.fixture
def write_document(tmp_path):
    def write(document, name="document.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document))
        return path

    return write


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main([str(arg) for arg in argv])
    return exc_info.value.code


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["doc.json", "mod:schema"])

        assert args.format == "raw"
        assert args.rules is None
        assert args.ignore_additional is False
        assert args.trace is False

    def test_rejects_unknown_format(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["doc.json", "mod:schema", "-f", "xml"])


class TestLoadReference:
    def test_resolves_attribute(self):
        assert load_reference("json:dumps") is json.dumps

    def test_resolves_dotted_attribute(self):
        assert load_reference("json:decoder.JSONDecoder") is json.decoder.JSONDecoder

    @pytest.mark.parametrize("reference", ["json", "json:", ":dumps"])
    def test_malformed_reference(self, reference):
        with pytest.raises(ValueError, match="Invalid reference"):
            load_reference(reference)

    def test_unknown_module(self):
        with pytest.raises(ValueError, match="Cannot import module"):
            load_reference("no_such_module_here:schema")

    def test_unknown_attribute(self):
        with pytest.raises(ValueError, match="has no attribute"):
            load_reference("json:no_such_attribute")


class TestFormatErrors:
    def test_raw_is_unchanged(self):
        errors = {"property": {"a": ["x"]}, "object": {}}

        assert format_errors(errors, "raw") is errors

    def test_message_format(self):
        errors = {"property": {"a": {"b": ["x", "y"]}}, "object": {}}

        assert format_errors(errors, "message") == {
            "property": [
                {"name": "a.b", "message": "x"},
                {"name": "a.b", "message": "y"},
            ],
            "object": [],
        }

    def test_property_format(self):
        errors = {"property": {"a": ["x", "y"]}, "object": {}}

        assert format_errors(errors, "property") == {
            "property": [{"name": "a", "messages": ["x", "y"]}],
            "object": [],
        }


class TestMain:
    def test_valid_document(self, schema_module, write_document, capsys):
        path = write_document({"forename": "Ada", "surname": "Lovelace"})

        code = run([path, f"{schema_module}:user_schema"])

        assert code == EXIT_VALID
        assert json.loads(capsys.readouterr().out) == {
            "is_valid": True,
            "errors": {"property": {}, "object": {}},
        }

    def test_invalid_document(self, schema_module, write_document, capsys):
        path = write_document({"forename": "Ada", "age": 36})

        code = run([path, f"{schema_module}:user_schema"])

        assert code == EXIT_INVALID
        assert json.loads(capsys.readouterr().out)["errors"]["property"] == {
            "surname": ["surname is required"],
            "age": ["Unexpected property."],
        }

    def test_object_rules_and_property_format(
        self, schema_module, write_document, capsys
    ):
        path = write_document({"forename": "Ada", "surname": "Ada"})

        code = run(
            [
                path,
                f"{schema_module}:user_schema",
                "--rules",
                f"{schema_module}:user_rules",
                "--format",
                "property",
            ]
        )

        assert code == EXIT_INVALID
        assert json.loads(capsys.readouterr().out)["errors"] == {
            "property": [],
            "object": [
                {
                    "name": "forenameCannotEqualSurname",
                    "messages": ["forename cannot equal surname"],
                }
            ],
        }

    def test_additional_property_options(self, schema_module, write_document, capsys):
        path = write_document({"forename": "Ada", "surname": "L", "age": 36})

        code = run(
            [path, f"{schema_module}:user_schema", "--additional-message", "unknown"]
        )
        assert code == EXIT_INVALID
        assert json.loads(capsys.readouterr().out)["errors"]["property"] == {
            "age": ["unknown"]
        }

        code = run([path, f"{schema_module}:user_schema", "--ignore-additional"])
        assert code == EXIT_VALID

    def test_non_object_document(self, schema_module, write_document, capsys):
        path = write_document(["not", "an", "object"])

        code = run([path, f"{schema_module}:user_schema"])

        assert code == EXIT_INVALID
        assert json.loads(capsys.readouterr().out)["errors"]["object"] == {
            "validObject": "Invalid object."
        }

    def test_output_file(self, schema_module, write_document, tmp_path, capsys):
        path = write_document({"forename": "Ada", "surname": "Lovelace"})
        output = tmp_path / "result.json"

        code = run([path, f"{schema_module}:user_schema", "-o", output, "--pretty"])

        assert code == EXIT_VALID
        assert capsys.readouterr().out == ""
        assert json.loads(output.read_text())["is_valid"] is True

    def test_trace_goes_to_stderr(self, schema_module, write_document, capsys):
        path = write_document({"forename": "Ada", "surname": "Lovelace"})

        code = run([path, f"{schema_module}:user_schema", "--trace"])

        captured = capsys.readouterr()
        assert code == EXIT_VALID
        assert json.loads(captured.out)["is_valid"] is True
        assert "Invoking tuple predicate for property 'forename'." in captured.err

    def test_missing_file(self, schema_module, tmp_path, capsys):
        code = run([tmp_path / "missing.json", f"{schema_module}:user_schema"])

        assert code == EXIT_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, schema_module, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        code = run([path, f"{schema_module}:user_schema"])

        assert code == EXIT_ERROR
        assert "Invalid JSON" in capsys.readouterr().err

    def test_bad_schema_reference(self, write_document, capsys):
        path = write_document({})

        code = run([path, "json:dumps"])

        assert code == EXIT_ERROR
        assert "Schema is not a valid object." in capsys.readouterr().err
