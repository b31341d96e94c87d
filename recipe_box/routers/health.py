# recipe_box/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from recipe_box.deps import get_store, get_syncer
from recipe_box.services.health import check_db, check_source, version_payload
from recipe_box.services.recipes_repo import RecipeStore
from recipe_box.services.recipes_sync import RecipeSyncer

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    # Liveness only: if the process is serving requests, it's up
    return {"status": "ok", **version_payload()}


@router.get("/health/ready")
async def ready(
    response: Response,
    store: RecipeStore = Depends(get_store),
    syncer: RecipeSyncer = Depends(get_syncer),
):
    db = check_db(store.db_path)
    meals = await check_source(syncer.clients["meal"])
    drinks = await check_source(syncer.clients["drink"])

    overall = "ok"
    http_status = status.HTTP_200_OK

    # DB is required; the directories only feed sync
    if db["status"] != "ok":
        overall = "fail"
        http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    elif meals["status"] != "ok" or drinks["status"] != "ok":
        overall = "degraded"

    response.status_code = http_status
    return {
        "status": overall,
        "checks": {"db": db, "meals": meals, "drinks": drinks},
        **version_payload(),
    }


@router.get("/version")
def version():
    return version_payload()
