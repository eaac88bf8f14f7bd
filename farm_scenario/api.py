"""FastAPI service for scenario simulation and economic planning."""
import io
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel, ConfigDict, Field

from . import __version__
from .config import API, CROP_PARAMS, SEASONS, LOG_LEVEL, LOG_FORMAT
from .orchestrator import ScenarioOrchestrator
from .params import (
    PARAM_RANGES, SimulationParams, ValidationError,
    default_params, ensure_valid, optimized_params,
)
from .report import history_to_frame

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Farm Scenario API",
    description="Yield, cost and profit planning for farming scenarios",
    version=__version__,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=API.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

_orchestrator = ScenarioOrchestrator()


def get_orchestrator() -> ScenarioOrchestrator:
    return _orchestrator


# ─────────────────────────────────────────────────────────────────────────────
# MODELS
# ─────────────────────────────────────────────────────────────────────────────

class ParamsInput(BaseModel):
    """
    Scenario inputs.

    Fields are untyped so that the engine sees the raw JSON values: type and
    range problems are both reported field by field in one 422 response.
    """
    model_config = ConfigDict(populate_by_name=True)

    irrigation_frequency: Any = Field(3, alias="irrigationFrequency", description="Waterings per week (1-7)")
    fertilizer_amount: Any = Field(50, alias="fertilizerAmount", description="kg/hectare (0-100)")
    pesticides: Any = Field(25, description="kg/hectare (0-60)")
    crop_type: Any = Field("wheat", alias="cropType", description="Crop type")
    season: Any = Field("rabi", description="rabi, kharif or zaid")
    land_size: Any = Field(2, alias="landSize", description="Hectares (0-10]")
    labor_cost: Any = Field(15000, alias="laborCost", description="₹/hectare")
    seed_cost: Any = Field(5000, alias="seedCost", description="₹/hectare")
    machinery: Any = Field(8000, description="₹/hectare")
    transportation: Any = Field(3000, description="₹/hectare")

    def to_params(self) -> SimulationParams:
        return SimulationParams.from_dict(self.model_dump())


class SimulateRequest(BaseModel):
    params: ParamsInput = Field(default_factory=ParamsInput)
    language: str = Field("en", description="Suggestion language (en, hi)")


class HealthResponse(BaseModel):
    status: str
    version: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


# ─────────────────────────────────────────────────────────────────────────────
# ENDPOINTS
# ─────────────────────────────────────────────────────────────────────────────

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__, "timestamp": _now()}


@app.get("/api/v1/crops")
async def list_crops():
    """List supported crops with baseline yield and price."""
    return {
        "crops": list(CROP_PARAMS.keys()),
        "parameters": {
            k: {
                "base_yield_t_ha": v["base_yield_t_ha"],
                "price_per_ton": v["price_per_ton"],
                "seasons": v["seasons"],
            }
            for k, v in CROP_PARAMS.items()
        },
    }


@app.get("/api/v1/seasons")
async def list_seasons():
    return {"seasons": SEASONS}


@app.get("/api/v1/params/defaults")
async def get_defaults():
    """Default scenario inputs and the valid range of each numeric field."""
    return {
        "params": default_params().to_dict(),
        "ranges": {name: rng.describe() for name, rng in PARAM_RANGES.items()},
    }


@app.post("/api/v1/params/optimize")
async def optimize(params: Optional[ParamsInput] = None):
    """Balanced preset applied to the given (or default) inputs."""
    base = params.to_params() if params is not None else default_params()
    try:
        ensure_valid(base)
    except ValidationError as e:
        raise HTTPException(422, detail=e.to_list())
    return {"params": optimized_params(base).to_dict()}


@app.post("/api/v1/simulate")
async def simulate(request: SimulateRequest, orchestrator: ScenarioOrchestrator = Depends(get_orchestrator)):
    """Run a scenario and add it to the comparison history."""
    try:
        result = orchestrator.run(request.params.to_params(), language=request.language)
    except ValidationError as e:
        raise HTTPException(422, detail=e.to_list())
    return {
        "result": result.to_dict(),
        "history_size": len(orchestrator.history),
        "timestamp": _now(),
    }


@app.get("/api/v1/history")
async def get_history(orchestrator: ScenarioOrchestrator = Depends(get_orchestrator)):
    records = orchestrator.get_history()
    return {
        "capacity": orchestrator.history.capacity,
        "records": [r.to_dict() for r in records],
    }


@app.delete("/api/v1/history")
async def clear_history(orchestrator: ScenarioOrchestrator = Depends(get_orchestrator)):
    orchestrator.clear_history()
    return {"records": []}


@app.get("/api/v1/history/export")
async def export_history(
    format: str = Query("csv"),
    language: str = Query("en"),
    orchestrator: ScenarioOrchestrator = Depends(get_orchestrator),
):
    """Comparison history as a downloadable CSV file."""
    if format.lower() != "csv":
        raise HTTPException(400, f"Unsupported export format '{format}'")
    buf = io.StringIO()
    history_to_frame(orchestrator.history, language).to_csv(buf, index=False)
    filename = f"scenario_comparison_{datetime.now(timezone.utc).date().isoformat()}.csv"
    return Response(
        content=buf.getvalue(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.post("/api/v1/reset")
async def reset(orchestrator: ScenarioOrchestrator = Depends(get_orchestrator)):
    """Restore default inputs and clear the active result. History is kept."""
    return {"params": orchestrator.reset().to_dict()}


# ─────────────────────────────────────────────────────────────────────────────
# RUN SERVER
# ─────────────────────────────────────────────────────────────────────────────

def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "farm_scenario.api:app",
        host=host or API.host,
        port=port or API.port,
        workers=API.workers,
        reload=API.reload,
    )


if __name__ == "__main__":
    run_server()
