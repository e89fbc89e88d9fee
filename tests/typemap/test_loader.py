from datetime import date
from decimal import Decimal

import pytest

from graphmap.typemap import TypeRegistry, load_type_links
from graphmap.typemap.testmods.scalars import DateScalar, DecimalScalar


def test_links_with_import_paths(tmp_path):
    registry = TypeRegistry()
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
strict_mode: true
links:
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:DecimalScalar"
  - type: "datetime.date"
    graphql_type: "graphmap.typemap.testmods.scalars.DateScalar"
        """,
        encoding="utf-8",
    )

    linked = load_type_links(str(cfg), registry)

    assert linked == 2
    assert registry.lookup(Decimal) is DecimalScalar
    assert registry.lookup(date) is DateScalar


def test_disabled_declarations_are_skipped(tmp_path):
    registry = TypeRegistry()
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
links:
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:DecimalScalar"
    enabled: false
        """,
        encoding="utf-8",
    )

    assert load_type_links(str(cfg), registry) == 0
    assert Decimal not in registry


def test_entrypoint_loading_monkeypatched(tmp_path, monkeypatch):
    registry = TypeRegistry()

    from importlib import metadata as importlib_metadata

    class DummyEP:
        def __init__(self, name):
            self.name = name

        def load(self):
            from graphmap.typemap.testmods.scalars import DATE_LINK

            return DATE_LINK

    class DummySelection(list):
        def select(self, group=None):
            if group == "graphmap.types":
                return [DummyEP("dates")]  # type: ignore[list-item]
            return []

    monkeypatch.setattr(importlib_metadata, "entry_points", lambda: DummySelection())

    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
links:
  - entrypoint: "dates"
        """,
        encoding="utf-8",
    )

    assert load_type_links(str(cfg), registry) == 1
    assert registry.lookup(date) is DateScalar


def test_strict_mode_failure_on_bad_graphql_type(tmp_path):
    registry = TypeRegistry()
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
strict_mode: true
links:
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:NOT_A_GRAPHQL_TYPE"
        """,
        encoding="utf-8",
    )

    with pytest.raises(RuntimeError, match="not a GraphQL type"):
        load_type_links(str(cfg), registry)


def test_strict_mode_failure_on_non_null_link(tmp_path):
    registry = TypeRegistry(strict=True)
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
links:
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:RequiredDecimal"
        """,
        encoding="utf-8",
    )

    with pytest.raises(RuntimeError, match="must be nullable"):
        load_type_links(str(cfg), registry)


def test_non_strict_mode_skips_invalid_declarations(tmp_path):
    registry = TypeRegistry()
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
strict_mode: false
links:
  - "not a mapping"
  - type: "decimal:Decimal"
  - type: "missing.module:Thing"
    graphql_type: "graphmap.typemap.testmods.scalars:DecimalScalar"
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:DecimalScalar"
        """,
        encoding="utf-8",
    )

    assert load_type_links(str(cfg), registry) == 1
    assert registry.lookup(Decimal) is DecimalScalar


def test_strict_mode_rejects_non_mapping_declaration(tmp_path):
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
links:
  - "not a mapping"
        """,
        encoding="utf-8",
    )

    with pytest.raises(ValueError, match="Invalid type link declaration"):
        load_type_links(str(cfg), TypeRegistry())


def test_missing_config_is_noop(tmp_path):
    registry = TypeRegistry()

    assert load_type_links(str(tmp_path / "missing.yaml"), registry) == 0
    assert len(registry) == 4


def test_config_path_from_settings(tmp_path, monkeypatch):
    from graphmap.config import settings

    registry = TypeRegistry()
    cfg = tmp_path / "links.yaml"
    cfg.write_text(
        """
links:
  - type: "decimal:Decimal"
    graphql_type: "graphmap.typemap.testmods.scalars:DecimalScalar"
        """,
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "type_links_config_path", str(cfg))

    assert load_type_links(registry=registry) == 1
    assert registry.lookup(Decimal) is DecimalScalar


def test_no_config_configured(monkeypatch):
    from graphmap.config import settings

    monkeypatch.setattr(settings, "type_links_config_path", None)

    assert load_type_links(registry=TypeRegistry()) == 0
