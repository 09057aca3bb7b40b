"""
FastAPI web server — placement over HTTP.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from randomizer.config import ConfigError, load_config
from randomizer.placer import (
    LayoutError, Placer, RandomCoordinates, parse_layout, pass_to_dict,
    validate_pass,
)


log = logging.getLogger(__name__)

# ── App ────────────────────────────────────────────────────────────

app = FastAPI(title="Randomizer")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Request models ─────────────────────────────────────────────────

class ContainerModel(BaseModel):
    width: float
    height: float


class ItemModel(BaseModel):
    id: str
    width: float
    height: float


class ObstacleModel(BaseModel):
    id: str
    x: float
    y: float
    width: float
    height: float


class PlaceRequest(BaseModel):
    container: ContainerModel
    items: list[ItemModel] = Field(default_factory=list)
    obstacles: list[ObstacleModel] = Field(default_factory=list)
    spacing: float | None = None
    tries: int | None = None
    seed: int | None = None


# ── Routes ─────────────────────────────────────────────────────────

@app.get("/api/config")
def get_config():
    """Return the effective default settings."""
    return load_config().to_dict()


@app.post("/api/place")
def place(req: PlaceRequest):
    """Scatter the request's items and return one result per item."""
    try:
        layout = parse_layout(req.model_dump(exclude={"spacing", "tries", "seed"}))
        cfg = load_config().with_overrides(spacing=req.spacing, tries=req.tries)
    except (LayoutError, ConfigError) as e:
        raise HTTPException(422, str(e))

    placer = Placer(cfg.placement(), coordinates=RandomCoordinates(req.seed))
    placement = placer.position_all(layout.container, layout.items, layout.obstacles)
    log.info(
        "POST /api/place: %d item(s), %d obstacle(s) -> %d placed",
        len(layout.items), len(layout.obstacles), len(placement.placed),
    )

    body = pass_to_dict(placement)
    body["violations"] = validate_pass(placement, layout.obstacles)
    return body


# ── Entry point ────────────────────────────────────────────────────

def main(host: str = "127.0.0.1", port: int = 8000):
    import uvicorn
    uvicorn.run("randomizer.web.server:app", host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
