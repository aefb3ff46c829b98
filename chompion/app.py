from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .analytics.aggregator import compute_insights
from .analytics.behavior import compute_behavioral_metrics
from .analytics.models import BehavioralMetrics, InsightsReport
from .api_models import (
    CategoryCreate,
    CategoryOut,
    CuisineRequest,
    CuisineResponse,
    EntriesRequest,
    RatingsUpdate,
    RecomputeRequest,
    RecomputeResponse,
    ScoreRequest,
    ScoreResponse,
    WeightsUpdate,
)
from .categories.rebalancer import WeightRebalancer, seed_default_categories
from .categories.recompute import bulk_recompute
from .cuisine.classifier import classify
from .entries import service, store
from .entries.models import Entry, EntryDraft, RatingCategory
from .errors import NotFoundError, ValidationError
from .scoring.composite import composite_score
from .scoring.rounding import round_half_up

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not store.get_categories():
        seed_default_categories()
        logger.info("Seeded default rating categories")
    yield


app = FastAPI(title="Chompion Scoring API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(ValidationError)
async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": exc.problems})


@app.exception_handler(NotFoundError)
async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


def _category_out(categories: list[RatingCategory]) -> list[CategoryOut]:
    return [
        CategoryOut(
            id=c.id,
            name=c.name,
            weight_percent=int(round_half_up(c.weight * 100, 0)),
            sort_order=c.sort_order,
        )
        for c in categories
    ]


# ── Scoring endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/scores/composite", response_model=ScoreResponse)
def score(body: ScoreRequest) -> ScoreResponse:
    return ScoreResponse(score=float(composite_score(body.ratings, body.weights)))


@app.post("/cuisine/detect", response_model=CuisineResponse)
def detect_cuisine(body: CuisineRequest) -> CuisineResponse:
    return CuisineResponse(cuisine=classify(body.dish_names, body.venue_name))


# ── Analytics endpoints ──────────────────────────────────────────────────


@app.post("/insights", response_model=InsightsReport)
def insights(body: EntriesRequest) -> InsightsReport:
    return compute_insights(body.entries, body.categories)


@app.get("/insights", response_model=InsightsReport)
def stored_insights() -> InsightsReport:
    return compute_insights(store.list_entries(), store.get_categories())


@app.post("/behavior", response_model=BehavioralMetrics)
def behavior(body: EntriesRequest) -> BehavioralMetrics:
    return compute_behavioral_metrics(body.entries)


@app.get("/behavior", response_model=BehavioralMetrics)
def stored_behavior() -> BehavioralMetrics:
    return compute_behavioral_metrics(store.list_entries())


# ── Category endpoints ───────────────────────────────────────────────────


@app.get("/categories", response_model=list[CategoryOut])
def list_categories() -> list[CategoryOut]:
    return _category_out(store.get_categories())


@app.post("/categories", response_model=list[CategoryOut])
def add_category(body: CategoryCreate) -> list[CategoryOut]:
    rebalancer = WeightRebalancer.from_store()
    rebalancer.add(body.name)
    return _category_out(rebalancer.commit())


@app.delete("/categories/{category_id}", response_model=list[CategoryOut])
def remove_category(category_id: str) -> list[CategoryOut]:
    rebalancer = WeightRebalancer.from_store()
    rebalancer.remove(category_id)
    return _category_out(rebalancer.commit())


@app.put("/categories/weights", response_model=list[CategoryOut])
def update_weights(body: WeightsUpdate) -> list[CategoryOut]:
    rebalancer = WeightRebalancer.from_store()
    for category_id, name in body.names.items():
        rebalancer.rename(category_id, name)
    for category_id, percent in body.weights.items():
        rebalancer.set_weight(category_id, percent)
    return _category_out(rebalancer.commit())


@app.post("/categories/recompute", response_model=RecomputeResponse)
def recompute(body: RecomputeRequest) -> RecomputeResponse:
    if not body.confirm:
        raise HTTPException(
            status_code=400,
            detail="Recompute overwrites every stored score; resend with confirm=true",
        )
    result = bulk_recompute()
    return RecomputeResponse(
        updated=len(result.updated),
        missing=result.missing,
        cancelled=result.cancelled,
    )


# ── Entry endpoints ──────────────────────────────────────────────────────


@app.post("/entries", response_model=Entry)
def create_entry(body: EntryDraft) -> Entry:
    return service.create_entry(body)


@app.get("/entries", response_model=list[Entry])
def list_entries() -> list[Entry]:
    return store.list_entries()


@app.put("/entries/{entry_id}/ratings", response_model=Entry)
def update_entry_ratings(entry_id: str, body: RatingsUpdate) -> Entry:
    return service.update_ratings(entry_id, body.ratings)


@app.delete("/entries/{entry_id}")
def delete_entry(entry_id: str) -> dict[str, str]:
    service.delete_entry(entry_id)
    return {"status": "deleted"}
