"""Configuration-driven type link loader.

Loads Python type to GraphQL type links from a YAML file and registers them.
File path is given explicitly or via settings.type_links_config_path.

Supports two declaration forms: type/graphql_type import paths, and
entrypoint. Strict mode is enabled by default and will fail on errors.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from importlib import import_module
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any

import yaml
from graphql import GraphQLType, is_type

from graphmap.config import settings
from graphmap.logging import get_logger

from .names import display_name
from .registry import TypeRegistry, type_registry

logger = get_logger(__name__)


ENTRYPOINT_GROUP = "graphmap.types"


@dataclass
class LoaderConfig:
    strict_mode: bool = True
    declarations: list[dict[str, Any]] | None = None


def _load_file_config(path: str) -> LoaderConfig | None:
    try:
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return None

    strict_mode = bool(data.get("strict_mode", True))
    declarations = list(data.get("links", []) or [])

    return LoaderConfig(strict_mode=strict_mode, declarations=declarations)


def _discover_config() -> LoaderConfig | None:
    """Discover config from settings.type_links_config_path."""
    if not settings.type_links_config_path:
        return None

    path = Path(settings.type_links_config_path)
    if not path.exists():
        logger.warning("Type links config path set but not found", path=str(path))
        return None

    cfg = _load_file_config(str(path))
    if cfg:
        logger.info("Loaded type links config from settings", path=str(path))
    return cfg


def _import_object(qualified_name: str) -> Any:
    if ":" in qualified_name:
        module_name, attr_name = qualified_name.split(":", 1)
    else:
        # Split on last dot for module path
        module_name, attr_name = qualified_name.rsplit(".", 1)

    module = import_module(module_name)
    return getattr(module, attr_name)


def _resolve_graphql_type(qualified_name: str) -> GraphQLType:
    obj = _import_object(qualified_name)
    if not is_type(obj):
        raise TypeError(f"Resolved object is not a GraphQL type: {qualified_name}")
    return obj


def _resolve_entrypoint(name: str) -> tuple[Any, GraphQLType]:
    try:
        group_filtered: Iterable[Any] = importlib_metadata.entry_points().select(
            group=ENTRYPOINT_GROUP
        )
    except Exception as e:  # pragma: no cover - edge cases
        raise RuntimeError(f"Failed to read entry points: {e}") from e

    for ep in group_filtered:
        if getattr(ep, "name", None) == name:
            obj = ep.load()
            if not (isinstance(obj, tuple) and len(obj) == 2 and is_type(obj[1])):
                raise TypeError(
                    f"Entry point '{name}' must provide a (python_type, graphql_type) pair"
                )
            return obj

    raise LookupError(f"Entry point not found: {name}")


def load_type_links(
    config_path: str | None = None, registry: TypeRegistry | None = None
) -> int:
    """Load and register type links according to configuration.

    Raises on errors when strict mode is enabled (default).

    Returns:
        Number of links registered
    """
    registry = registry if registry is not None else type_registry

    cfg: LoaderConfig | None
    if config_path:
        cfg = _load_file_config(config_path)
        if cfg:
            logger.info("Loaded type links config from explicit path", path=config_path)
    else:
        cfg = _discover_config()

    if not cfg or not cfg.declarations:
        logger.info("No type links configuration found; skipping type link loading")
        return 0

    strict_mode = cfg.strict_mode
    linked = 0

    for decl in cfg.declarations:
        if not isinstance(decl, dict):
            msg = f"Invalid type link declaration type: {type(decl)}"
            if strict_mode:
                raise ValueError(msg)
            logger.error(msg)
            continue

        if decl.get("enabled") is False:
            continue

        try:
            if "type" in decl and "graphql_type" in decl:
                python_type = _import_object(decl["type"])
                graphql_type = _resolve_graphql_type(decl["graphql_type"])
                source = {"type_path": decl["type"], "graphql_type_path": decl["graphql_type"]}
            elif "entrypoint" in decl:
                python_type, graphql_type = _resolve_entrypoint(decl["entrypoint"])
                source = {"entrypoint": decl["entrypoint"]}
            else:
                raise ValueError(
                    "Type link declaration must include either type and graphql_type, "
                    "or entrypoint"
                )

            registry.link(python_type, graphql_type)
            linked += 1
            logger.info(
                "Registered type link",
                type_name=display_name(python_type),
                graphql_type=str(graphql_type),
                **source,
            )

        except Exception as e:
            msg = f"Failed to load type link declaration: {e}"
            if strict_mode:
                raise RuntimeError(msg) from e
            logger.error(msg)
            continue

    logger.info(
        "Type link loading complete",
        requested=len(cfg.declarations),
        linked=linked,
        registered=len(registry),
        strict_mode=strict_mode,
    )
    return linked
