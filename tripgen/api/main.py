"""FastAPI application."""

from __future__ import annotations

import logging
import uuid
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from tripgen import __version__
from tripgen.api.schemas import (
    GenerateRequest,
    HealthResponse,
    OptionItem,
    OptionsResponse,
    PreloadResponse,
    PreloadStatusResponse,
    SavedItineraryListResponse,
    SaveRequest,
    SaveResponse,
    UpdateRequest,
)
from tripgen.application.context import AppContext, build_app_context
from tripgen.config.settings import resolve_settings
from tripgen.domain.constants import DURATION_OPTIONS, INTEREST_CATEGORIES
from tripgen.domain.exceptions import ItineraryNotFound
from tripgen.domain.models import GeneratedItinerary
from tripgen.persistence.models import SavedItineraryRecord, SavedItineraryUpdate
from tripgen.services.itinerary_service import generate, save_generated
from tripgen.shared.exceptions import PersistenceError

_api_logger = logging.getLogger("tripgen.api")

load_dotenv()
_settings = resolve_settings()

_GENERATION_FAILED = "Could not generate an itinerary for this destination and duration"
PRELOAD_SESSION_HEADER = "X-Preload-Session"

app = FastAPI(
    title="tripgen",
    version=__version__,
    docs_url="/docs" if _settings.enable_docs else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

_ctx: Optional[AppContext] = None


def get_app_context() -> AppContext:
    global _ctx
    if _ctx is None:
        _ctx = build_app_context()
    return _ctx


def _generate_or_422(ctx: AppContext, req: GenerateRequest, response: Response) -> GeneratedItinerary:
    session_id = req.session_id or uuid.uuid4().hex
    itinerary = generate(ctx, req.destination_id, req.interests, req.duration, session_id=session_id)
    if itinerary is None:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=_GENERATION_FAILED)
    response.headers[PRELOAD_SESSION_HEADER] = session_id
    return itinerary


def _get_or_404(ctx: AppContext, itinerary_id: str) -> SavedItineraryRecord:
    record = ctx.repository.get(itinerary_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    return record


@app.get("/health", response_model=HealthResponse)
def health(ctx: AppContext = Depends(get_app_context)):
    return HealthResponse(status="ok", preload=ctx.preload_cache.stats)


@app.get("/destinations", response_model=list[OptionItem])
def destinations(ctx: AppContext = Depends(get_app_context)):
    return [OptionItem(**item) for item in ctx.catalog.destination_options()]


@app.get("/options", response_model=OptionsResponse)
def options(ctx: AppContext = Depends(get_app_context)):
    return OptionsResponse(
        destinations=[OptionItem(**item) for item in ctx.catalog.destination_options()],
        interests=[OptionItem(label=name, value=name) for name in INTEREST_CATEGORIES],
        durations=[OptionItem(label=f"{days} days", value=str(days)) for days in DURATION_OPTIONS],
    )


@app.post("/itineraries/generate", response_model=GeneratedItinerary)
def generate_itinerary(req: GenerateRequest, response: Response, ctx: AppContext = Depends(get_app_context)):
    return _generate_or_422(ctx, req, response)


@app.post("/itineraries", response_model=SaveResponse, status_code=status.HTTP_201_CREATED)
def create_itinerary(req: SaveRequest, response: Response, ctx: AppContext = Depends(get_app_context)):
    itinerary = _generate_or_422(ctx, req, response)
    try:
        itinerary_id = save_generated(ctx, itinerary, req.user_id, is_public=req.is_public)
    except PersistenceError as exc:
        _api_logger.error("save itinerary failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Failed to save itinerary") from exc
    return SaveResponse(id=itinerary_id, itinerary=itinerary)


@app.get("/preload/{session_id}", response_model=PreloadResponse)
def preloaded_activities(session_id: str, ctx: AppContext = Depends(get_app_context)):
    return PreloadResponse(session_id=session_id, activity_ids=sorted(ctx.preload_cache.preloaded_ids(session_id)))


@app.get("/preload/{session_id}/{activity_id}", response_model=PreloadStatusResponse)
def preload_status(session_id: str, activity_id: str, ctx: AppContext = Depends(get_app_context)):
    return PreloadStatusResponse(
        session_id=session_id,
        activity_id=activity_id,
        preloaded=ctx.preload_cache.is_preloaded(session_id, activity_id),
    )


@app.get("/itineraries/public", response_model=SavedItineraryListResponse)
def public_itineraries(limit: int = 10, ctx: AppContext = Depends(get_app_context)):
    return SavedItineraryListResponse(items=ctx.repository.list_public(limit=limit))


@app.get("/itineraries/{itinerary_id}", response_model=SavedItineraryRecord)
def get_itinerary(itinerary_id: str, ctx: AppContext = Depends(get_app_context)):
    return _get_or_404(ctx, itinerary_id)


@app.patch("/itineraries/{itinerary_id}", response_model=SavedItineraryRecord)
def update_itinerary(itinerary_id: str, req: UpdateRequest, ctx: AppContext = Depends(get_app_context)):
    changes = SavedItineraryUpdate(**req.model_dump(exclude_none=True))
    try:
        return ctx.repository.update(itinerary_id, changes)
    except ItineraryNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@app.delete("/itineraries/{itinerary_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_itinerary(itinerary_id: str, ctx: AppContext = Depends(get_app_context)):
    if not ctx.repository.delete(itinerary_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Itinerary not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.post("/itineraries/{itinerary_id}/like", response_model=SavedItineraryRecord)
def like_itinerary(itinerary_id: str, ctx: AppContext = Depends(get_app_context)):
    _get_or_404(ctx, itinerary_id)
    ctx.repository.toggle_like(itinerary_id, increment=True)
    return _get_or_404(ctx, itinerary_id)


@app.delete("/itineraries/{itinerary_id}/like", response_model=SavedItineraryRecord)
def unlike_itinerary(itinerary_id: str, ctx: AppContext = Depends(get_app_context)):
    _get_or_404(ctx, itinerary_id)
    ctx.repository.toggle_like(itinerary_id, increment=False)
    return _get_or_404(ctx, itinerary_id)


@app.get("/users/{user_id}/itineraries", response_model=SavedItineraryListResponse)
def user_itineraries(user_id: str, ctx: AppContext = Depends(get_app_context)):
    return SavedItineraryListResponse(items=ctx.repository.list_for_user(user_id))
