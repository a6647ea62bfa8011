"""Tests for scripts/inspect_xsd.py — CLI over the XSD queries.

Coverage strategy:
    - parse_args() defaults, env var fallback, CLI flag wins over env var
    - main() exit codes: 0 found, 1 not found, 2 file/parse/schema error
    - Rendered output for elements (type, occurs, inline restriction) and types
    - Subprocess invocation of the script
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from unittest import mock

import pytest

from inspect_xsd import main, parse_args
from xsd_query.types import XS

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "inspect_xsd.py"
SCRIPTS_DIR = SCRIPT.parent


class TestParseArgs:
    def test_defaults(self) -> None:
        """With no flags or env var the log level is WARNING."""
        with mock.patch.dict(os.environ, {}, clear=True):
            args = parse_args(["schema.xsd", "element", "root"])
        assert args.schema == Path("schema.xsd")
        assert args.subcommand == "element"
        assert args.name == "root"
        assert args.log_level == "WARNING"

    def test_env_var_fallback(self) -> None:
        """XSD_QUERY_LOG_LEVEL supplies the log level."""
        with mock.patch.dict(os.environ, {"XSD_QUERY_LOG_LEVEL": "DEBUG"}):
            args = parse_args(["schema.xsd", "type", "T"])
        assert args.log_level == "DEBUG"

    def test_cli_flag_wins_over_env_var(self) -> None:
        """--log-level overrides the env var."""
        with mock.patch.dict(os.environ, {"XSD_QUERY_LOG_LEVEL": "DEBUG"}):
            args = parse_args(["--log-level", "ERROR", "schema.xsd", "type", "T"])
        assert args.log_level == "ERROR"

    def test_subcommand_required(self) -> None:
        """Omitting the subcommand is a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["schema.xsd"])


class TestMain:
    def test_element_found(self, purchase_order_path: Path, capsys) -> None:
        """A found element prints its type and occurs range."""
        assert main([str(purchase_order_path), "element", "purchaseOrder"]) == 0
        out = capsys.readouterr().out
        assert "element purchaseOrder" in out
        assert "type: {urn:example:po}PurchaseOrderType" in out
        assert "occurs: 1..1" in out

    def test_element_with_inline_restriction(
        self, purchase_order_path: Path, capsys
    ) -> None:
        """An inline simpleType prints its base and facets."""
        assert main([str(purchase_order_path), "element", "sku"]) == 0
        out = capsys.readouterr().out
        assert "inline simpleType" in out
        assert "restriction base: {http://www.w3.org/2001/XMLSchema}string" in out
        assert "pattern=" in out

    def test_element_not_found(self, purchase_order_path: Path, capsys) -> None:
        """A nested-only element exits 1 with a message."""
        assert main([str(purchase_order_path), "element", "shipTo"]) == 1
        assert "No top-level element 'shipTo'" in capsys.readouterr().err

    def test_simple_type_with_facets(self, purchase_order_path: Path, capsys) -> None:
        """A simpleType prints every enumeration facet."""
        assert main([str(purchase_order_path), "type", "Color"]) == 0
        out = capsys.readouterr().out
        assert "simpleType Color" in out
        assert "restriction base: {http://www.w3.org/2001/XMLSchema}token" in out
        assert out.count("enumeration=") == 3

    def test_complex_type_without_restriction(
        self, purchase_order_path: Path, capsys
    ) -> None:
        """A complexType without restriction prints only its header."""
        assert main([str(purchase_order_path), "type", "USAddress"]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "complexType USAddress"

    def test_type_not_found(self, purchase_order_path: Path, capsys) -> None:
        """An unknown type exits 1 with a message."""
        assert main([str(purchase_order_path), "type", "Nope"]) == 1
        assert "No type 'Nope'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys) -> None:
        """A missing schema exits 2."""
        assert main([str(tmp_path / "absent.xsd"), "type", "T"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_malformed_occurs(self, tmp_path: Path, capsys) -> None:
        """A bad minOccurs is reported on stderr with exit code 2, not a traceback."""
        schema = tmp_path / "bad_occurs.xsd"
        schema.write_text(
            f'<xs:schema xmlns:xs="{XS}"><xs:element name="a" minOccurs="x"/></xs:schema>'
        )
        assert main([str(schema), "element", "a"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")
        assert "minOccurs='x'" in captured.err

    def test_colon_less_type_is_visible(self, tmp_path: Path, capsys) -> None:
        """A type value without ':' prints its missing name as '?'."""
        schema = tmp_path / "bare_type.xsd"
        schema.write_text(
            f'<xs:schema xmlns:xs="{XS}" xmlns:string="urn:s">'
            '<xs:element name="a" type="string"/></xs:schema>'
        )
        assert main([str(schema), "element", "a"]) == 0
        assert "type: {urn:s}?" in capsys.readouterr().out

    def test_malformed_file(self, tmp_path: Path, capsys) -> None:
        """A malformed schema exits 2 with a parse error."""
        bad = tmp_path / "bad.xsd"
        bad.write_text("<xs:schema")
        assert main([str(bad), "element", "x"]) == 2
        assert "parse error" in capsys.readouterr().err.lower()


class TestCLI:
    def test_subprocess_invocation(self, purchase_order_path: Path) -> None:
        """The script runs standalone and prints the type."""
        env = {**os.environ, "PYTHONPATH": str(SCRIPTS_DIR)}
        result = subprocess.run(
            [sys.executable, str(SCRIPT), str(purchase_order_path), "type", "ZipCode"],
            capture_output=True,
            text=True,
            env=env,
        )
        assert result.returncode == 0, result.stderr
        assert "simpleType ZipCode" in result.stdout
        assert "length='5'" in result.stdout

    def test_help(self) -> None:
        """--help documents the log level flag and env var."""
        env = {**os.environ, "PYTHONPATH": str(SCRIPTS_DIR)}
        result = subprocess.run(
            [sys.executable, str(SCRIPT), "--help"],
            capture_output=True,
            text=True,
            env=env,
        )
        assert result.returncode == 0
        assert "--log-level" in result.stdout
        assert "XSD_QUERY_LOG_LEVEL" in result.stdout
