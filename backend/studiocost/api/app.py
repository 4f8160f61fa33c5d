"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from studiocost.engine import ENGINE_VERSION
from studiocost.exceptions import InputValidationError, StudioCostError
from studiocost.models.enums import AssemblyPreset, StructureMode, WindowPricingMode
from studiocost.models.inputs import PRESET_ASSEMBLIES, ProjectInputs

if TYPE_CHECKING:
    from studiocost.engine import StudioCostEngine

logger = logging.getLogger(__name__)


def sample_inputs(engine: StudioCostEngine) -> ProjectInputs:
    """A 300 sf, 10 ft tall room in Tennessee with the SPYS mix assemblies."""
    mechanical = engine.config.mechanical
    return ProjectInputs(
        region_code="TN",
        floor_area_sf=300.0,
        ceiling_height_ft=10.0,
        window_area_sf=24.0,
        door_count=1,
        assembly_preset=AssemblyPreset.SPYS_MIX,
        drywall_layers_walls=2,
        drywall_layers_ceiling=2,
        window_pricing_mode=WindowPricingMode.BY_AREA,
        window_unit_count=2,
        mini_split_cost=mechanical.mini_split.default,
        erv_cost=mechanical.erv.default,
        structure_mode=StructureMode.DETACHED,
    )


def create_app(*, cost_engine: StudioCostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built engine (e.g. tests, or a recalibrated config).
        If not provided, one is created via ``create_engine`` on first
        request.
    """
    app = FastAPI(title="Studio Cost Estimator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:5173", "http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own engine
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> StudioCostEngine:
        eng: StudioCostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from studiocost.api.deps import create_engine

        eng = create_engine()
        logger.info("Created cost engine with config version %s", eng.config.version)
        app.state.cost_engine = eng
        return eng

    def _run(inputs: ProjectInputs) -> dict[str, Any]:
        engine = _get_cost_engine()
        try:
            breakdown = engine.estimate(inputs)
        except InputValidationError as exc:
            raise HTTPException(
                status_code=422,
                detail={"field": exc.field, "message": exc.message},
            ) from exc
        except StudioCostError as exc:
            logger.exception("Estimator error")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return {
            "breakdown": breakdown.model_dump(mode="json"),
            "summary_dict": breakdown.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(inputs: ProjectInputs) -> dict[str, Any]:
        return _run(inputs)

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        inputs = sample_inputs(_get_cost_engine())
        result = _run(inputs)
        result["inputs"] = inputs.model_dump(mode="json")
        return result

    # ------------------------------------------------------------------
    # GET /api/config, /api/presets
    # ------------------------------------------------------------------

    @app.get("/api/config")
    def pricing_config() -> dict[str, Any]:
        return _get_cost_engine().config.model_dump(mode="json")

    @app.get("/api/presets")
    def presets() -> dict[str, dict[str, str]]:
        return {
            preset.value: {"walls_assembly": walls.value, "ceiling_assembly": ceiling.value}
            for preset, (walls, ceiling) in PRESET_ASSEMBLIES.items()
        }

    return app
