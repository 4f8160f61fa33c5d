"""Enums for the studio cost domain models.

These enums mirror the choices offered on the estimator's input form.
"""

from enum import StrEnum


class WallsAssembly(StrEnum):
    """Decoupling strategy for the wall surface."""

    CLIPS = "clips"
    DOUBLE_STUD = "double_stud"
    NONE = "none"


class CeilingAssembly(StrEnum):
    """Decoupling strategy for the ceiling surface."""

    CLIPS = "clips"
    STANDARD = "standard"


class AssemblyPreset(StrEnum):
    """Named wall/ceiling assembly pairs."""

    SPYS_MIX = "spys_mix"
    ALL_CLIPS = "all_clips"
    ALL_DOUBLE = "all_double"
    CUSTOM = "custom"


class WindowPricingMode(StrEnum):
    """How window openings are priced for the whole project."""

    BY_AREA = "by_area"
    BY_UNIT_COUNT = "by_unit_count"


class StructureMode(StrEnum):
    """Where the studio is built."""

    EXISTING = "existing"
    DETACHED = "detached"


class CostCategory(StrEnum):
    """Keys of the installed-cost line items."""

    # Interior assemblies
    WALLS_DECOUPLE = "walls_decouple"
    WALLS_DOUBLE = "walls_double"
    WALLS_DRYWALL = "walls_drywall"
    WALLS_INSUL = "walls_insul"
    CEIL_DECOUPLE = "ceil_decouple"
    CEIL_DRYWALL = "ceil_drywall"
    CEIL_INSUL = "ceil_insul"

    # Systems & finishes
    WINDOWS = "windows"
    DOORS = "doors"
    ELECTRICAL = "electrical"
    PAINT = "paint"
    FLOORING = "flooring"
    VENTILATION = "ventilation"
    MINISPLIT = "minisplit"

    # Detached shell
    SLAB = "slab"
    SIDING = "siding"
    ROOFING = "roofing"


class Confidence(StrEnum):
    """Confidence level attached to a documented assumption."""

    MEDIUM = "medium"
    LOW = "low"


ASSEMBLY_CATEGORIES: tuple[CostCategory, ...] = (
    CostCategory.WALLS_DECOUPLE,
    CostCategory.WALLS_DOUBLE,
    CostCategory.WALLS_DRYWALL,
    CostCategory.WALLS_INSUL,
    CostCategory.CEIL_DECOUPLE,
    CostCategory.CEIL_DRYWALL,
    CostCategory.CEIL_INSUL,
)

SYSTEMS_CATEGORIES: tuple[CostCategory, ...] = (
    CostCategory.WINDOWS,
    CostCategory.DOORS,
    CostCategory.ELECTRICAL,
    CostCategory.PAINT,
    CostCategory.FLOORING,
    CostCategory.VENTILATION,
    CostCategory.MINISPLIT,
)

SHARED_CATEGORIES: tuple[CostCategory, ...] = ASSEMBLY_CATEGORIES + SYSTEMS_CATEGORIES

SHELL_CATEGORIES: tuple[CostCategory, ...] = (
    CostCategory.SLAB,
    CostCategory.SIDING,
    CostCategory.ROOFING,
)
