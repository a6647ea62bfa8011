"""Shared pytest fixtures and helpers for the xsd_query test suite.

Module-level helpers (import directly):
    parse_xsd(text) — dedent + parse an inline schema string into an lxml tree.
    schema_text(body, extra_ns="") — wrap body in an <xs:schema> element.

pytest fixtures:
    purchase_order_path — path to tests/fixtures/purchase_order.xsd.
    purchase_order      — that schema parsed once per test.
    occurs_fixture      — OccursFixture singleton (YAML-driven test data).
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from lxml import etree

from xsd_query import parse_document
from xsd_query.types import XS

# Import after production imports so pythonpath=scripts:tests resolves fixtures/
from fixtures.fixture_loader import OccursFixture

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

# Loaded once at import time so parametrize decorators can use it.
_OCCURS_FIXTURE = OccursFixture()


# ─── Module-Level Helpers ─────────────────────────────────────────────────────


def schema_text(body: str, extra_ns: str = "") -> str:
    """Wrap body in an <xs:schema> root declaring the xs prefix (plus extra_ns)."""
    return (
        f'<xs:schema xmlns:xs="{XS}" {extra_ns}>\n'
        f"{textwrap.dedent(body)}\n"
        f"</xs:schema>"
    )


def parse_xsd(text: str) -> etree._ElementTree:
    """Parse an inline schema string (dedented) into an lxml tree."""
    return parse_document(textwrap.dedent(text).strip().encode("utf-8"))


# ─── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture
def purchase_order_path() -> Path:
    return FIXTURE_DIR / "purchase_order.xsd"


@pytest.fixture
def purchase_order(purchase_order_path: Path) -> etree._ElementTree:
    """The purchase order sample schema, freshly parsed."""
    return parse_document(purchase_order_path)


@pytest.fixture
def occurs_fixture() -> OccursFixture:
    return _OCCURS_FIXTURE
