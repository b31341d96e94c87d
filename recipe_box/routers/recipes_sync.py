# recipe_box/routers/recipes_sync.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from recipe_box.deps import get_store, get_syncer
from recipe_box.models.recipe import ImportResponse
from recipe_box.models.sync import SyncReport
from recipe_box.services.recipes_repo import RecipeStore
from recipe_box.services.recipes_sync import RecipeSyncer

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.post("/sync", response_model=SyncReport)
async def recipes_sync(
    store: RecipeStore = Depends(get_store),
    syncer: RecipeSyncer = Depends(get_syncer),
) -> SyncReport:
    # Pull-to-refresh: fetch all three buckets and merge them into the store
    return await syncer.sync_all(store)


@router.post("/import/bundled", response_model=ImportResponse)
def recipes_import_bundled(store: RecipeStore = Depends(get_store)) -> ImportResponse:
    return ImportResponse(upserted=store.import_bundled())


@router.post("/seed", response_model=ImportResponse)
def recipes_seed(store: RecipeStore = Depends(get_store)) -> ImportResponse:
    return ImportResponse(upserted=store.seed_if_needed())
