from __future__ import annotations

import logging
import os

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from .auth.session import end_session, require_admin, require_user, start_session
from .auth.users import authenticate
from .catalog.store import get_catalog
from .errors import CatalogError, InvalidInput
from .recommendations.cache import cached_resolver, get_cache_stats
from .recommendations.models import (
    IngredientList,
    LoginRequest,
    RecommendRequest,
    RecommendResponse,
    ResolveRequest,
    SavedProfileResponse,
    TasteProfile,
)
from .recommendations.profile import (
    load_session_profile,
    normalize_profile,
    save_session_profile,
)
from .recommendations.ranker import rank_dishes

logger = logging.getLogger(__name__)

app = FastAPI(title="Dish Recommendation API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "dishmatch-secret-change-in-production"),
)


@app.exception_handler(InvalidInput)
def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(CatalogError)
def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    logger.error("Ingredient catalog unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"error": "Ingredient catalog unavailable"})


def _normalized(profile: TasteProfile, username: str) -> tuple[TasteProfile, list[str]]:
    normalized, conflicts = normalize_profile(profile)
    if conflicts:
        logger.warning(
            "Taste profile for %s had ids in several buckets, kept strictest: %s",
            username, ", ".join(conflicts),
        )
    return normalized, conflicts


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/ingredients", response_model=IngredientList)
def ingredients(q: str = "") -> IngredientList:
    return IngredientList(items=get_catalog().search(q))


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    start_session(request, user)
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    end_session(request)
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict = Depends(require_user)) -> dict:
    return user


# ── User endpoints ───────────────────────────────────────────────────────


@app.get("/profile", response_model=SavedProfileResponse)
def get_profile(request: Request, user: dict = Depends(require_user)) -> SavedProfileResponse:
    profile = load_session_profile(request.session) or TasteProfile()
    return SavedProfileResponse(profile=profile)


@app.put("/profile", response_model=SavedProfileResponse)
def put_profile(
    body: TasteProfile,
    request: Request,
    user: dict = Depends(require_user),
) -> SavedProfileResponse:
    profile, conflicts = _normalized(body, user["username"])
    save_session_profile(request.session, profile)
    return SavedProfileResponse(profile=profile, conflicts=conflicts)


@app.post("/resolve", response_model=IngredientList)
def resolve(body: ResolveRequest, user: dict = Depends(require_user)) -> IngredientList:
    catalog = get_catalog()
    return IngredientList(items=cached_resolver(catalog)(body.text))


@app.post("/recommend", response_model=RecommendResponse)
def recommend(
    body: RecommendRequest,
    request: Request,
    user: dict = Depends(require_user),
) -> RecommendResponse:
    if not body.menu_text:
        raise InvalidInput("Missing data: menuText is required")

    profile = body.profile if body.profile is not None else load_session_profile(request.session)
    if profile is None:
        raise InvalidInput("Missing data: send a profile or save one with PUT /profile")
    profile, _ = _normalized(profile, user["username"])

    catalog = get_catalog()
    results = rank_dishes(body.menu_text, profile, catalog, resolver=cached_resolver(catalog))
    total = len(results)
    if body.hide_unsafe:
        results = [r for r in results if not r.unsafe]

    return RecommendResponse(results=results, total_dishes=total)


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.get("/cache/stats")
def cache_stats(user: dict = Depends(require_admin)) -> dict:
    return get_cache_stats()
