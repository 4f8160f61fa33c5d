"""Project input model for the studio cost estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from studiocost.models.enums import (
    AssemblyPreset,
    CeilingAssembly,
    StructureMode,
    WallsAssembly,
    WindowPricingMode,
)

# Preset -> (walls, ceiling). Custom leaves the pair to the caller.
PRESET_ASSEMBLIES: dict[AssemblyPreset, tuple[WallsAssembly, CeilingAssembly]] = {
    AssemblyPreset.SPYS_MIX: (WallsAssembly.DOUBLE_STUD, CeilingAssembly.CLIPS),
    AssemblyPreset.ALL_CLIPS: (WallsAssembly.CLIPS, CeilingAssembly.CLIPS),
    AssemblyPreset.ALL_DOUBLE: (WallsAssembly.DOUBLE_STUD, CeilingAssembly.STANDARD),
}


def resolve_preset(preset: AssemblyPreset) -> tuple[WallsAssembly, CeilingAssembly] | None:
    """Return the assembly pair a preset implies, or None for custom."""
    return PRESET_ASSEMBLIES.get(preset)


def _implied_assemblies(preset: Any) -> tuple[WallsAssembly, CeilingAssembly] | None:
    # An unknown preset is left for field validation to report.
    try:
        return resolve_preset(AssemblyPreset(preset))
    except ValueError:
        return None


class ProjectInputs(BaseModel):
    """Everything the estimator needs to know about one studio project.

    Numeric fields reject NaN/Infinity and negative values outright; a
    planning estimate built on a silently coerced input is worse than no
    estimate. The drywall upper bound depends on the pricing config and is
    checked by the engine.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    region_code: str
    floor_area_sf: float = Field(gt=0)
    ceiling_height_ft: float = Field(gt=0)
    window_area_sf: float = Field(default=0.0, ge=0)
    door_count: int = Field(default=0, ge=0)
    assembly_preset: AssemblyPreset | None = None
    walls_assembly: WallsAssembly
    ceiling_assembly: CeilingAssembly
    drywall_layers_walls: int = Field(default=2, ge=1)
    drywall_layers_ceiling: int = Field(default=2, ge=1)
    window_pricing_mode: WindowPricingMode = WindowPricingMode.BY_AREA
    window_unit_count: int = Field(default=0, ge=0)
    mini_split_cost: float = Field(ge=0)
    erv_cost: float = Field(ge=0)
    structure_mode: StructureMode = StructureMode.EXISTING

    @model_validator(mode="before")
    @classmethod
    def apply_assembly_preset(cls, data: Any) -> Any:
        """Fill missing assemblies from a non-custom preset."""
        if not isinstance(data, dict):
            return data
        pair = _implied_assemblies(data.get("assembly_preset"))
        if pair is None:
            return data

        resolved = dict(data)
        for field_name, value in zip(("walls_assembly", "ceiling_assembly"), pair):
            if resolved.get(field_name) is None:
                resolved[field_name] = value
        return resolved

    @field_validator("walls_assembly", "ceiling_assembly")
    @classmethod
    def match_assembly_preset(cls, value: Any, info: ValidationInfo) -> Any:
        preset = info.data.get("assembly_preset")
        pair = resolve_preset(preset) if preset is not None else None
        if pair is None:
            return value
        implied = pair[0] if info.field_name == "walls_assembly" else pair[1]
        if value != implied:
            msg = f"{info.field_name} '{value}' conflicts with preset '{preset}', which implies '{implied}'"
            raise ValueError(msg)
        return value
