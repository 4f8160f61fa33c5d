"""Load pricing configurations from JSON files."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from studiocost.data.seed import DEFAULT_PRICING_CONFIG
from studiocost.exceptions import ConfigurationError
from studiocost.models.config import PricingConfig

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Tables that replace the seed table wholesale instead of merging into it
_REPLACED_TABLES = frozenset({"region_factors", "labor_shares"})


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if (
            key not in _REPLACED_TABLES
            and isinstance(current, dict)
            and isinstance(value, dict)
        ):
            merged[key] = _merge(current, value)
        else:
            merged[key] = value
    return merged


def pricing_config_from_dict(
    data: dict[str, Any],
    base: PricingConfig = DEFAULT_PRICING_CONFIG,
) -> PricingConfig:
    """Overlay ``data`` onto ``base`` and validate the result.

    Rate sections merge field by field, so an override only needs the
    rates being recalibrated. The region and labor-share tables are taken
    as given when present, since a partial table is usually a mistake
    that would silently fall back to defaults.
    """
    merged = _merge(base.model_dump(), data)
    try:
        return PricingConfig.model_validate(merged)
    except ValidationError as exc:
        msg = f"Invalid pricing config: {exc}"
        raise ConfigurationError(msg) from exc


def load_pricing_config(path: Path, base: PricingConfig = DEFAULT_PRICING_CONFIG) -> PricingConfig:
    """Read a JSON pricing configuration file.

    Raises:
        ConfigurationError: If the file cannot be read, is not a JSON
            object, or does not validate as a ``PricingConfig``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        msg = f"Could not read pricing config '{path}': {exc}"
        raise ConfigurationError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"Pricing config '{path}' is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Pricing config '{path}' must contain a JSON object"
        raise ConfigurationError(msg)

    config = pricing_config_from_dict(data, base)
    logger.info("Loaded pricing config version %s from %s", config.version, path)
    return config


def dump_pricing_config(config: PricingConfig, path: Path) -> None:
    """Write a pricing configuration as indented JSON."""
    path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
