from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from recipe_box.clients import recipe_db
from recipe_box.clients.recipe_db import RecipeDBClient
from recipe_box.core import config
from recipe_box.core.logging import setup_logging
from recipe_box.core.middleware import RequestLoggingMiddleware
from recipe_box.routers import health, order, recipes_library, recipes_sync
from recipe_box.services.order_cart import OrderCart
from recipe_box.services.recipes_repo import RecipeStore
from recipe_box.services.recipes_sync import RecipeSyncer

log = logging.getLogger("recipe_box.app")


def _log_sync_failure(task: asyncio.Task) -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.error("startup sync crashed", exc_info=exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store: RecipeStore = app.state.store
    store.init_db()
    store.seed_if_needed()
    store.import_bundled()

    background: Optional[asyncio.Task] = None
    if app.state.sync_on_startup:
        background = asyncio.create_task(app.state.syncer.sync_all(store))
        background.add_done_callback(_log_sync_failure)

    yield

    if background is not None:
        # no cancellation semantics for sync; let the in-flight run finish.
        # wait() does not re-raise; the done-callback has logged any crash.
        await asyncio.wait([background])


def create_app(
    db_path: Optional[Path] = None,
    bundled_path: Optional[Path] = None,
    sync_on_startup: Optional[bool] = None,
    meal_client: Optional[RecipeDBClient] = None,
    drink_client: Optional[RecipeDBClient] = None,
) -> FastAPI:
    app = FastAPI(title="Recipe Box", lifespan=lifespan)

    app.state.store = RecipeStore(db_path or config.RECIPES_DB, bundled_path or config.BUNDLED_RECIPES_PATH)
    app.state.cart = OrderCart()
    app.state.syncer = RecipeSyncer(
        meal_client or recipe_db.meal_client(),
        drink_client or recipe_db.drink_client(),
    )
    app.state.sync_on_startup = config.SYNC_ON_STARTUP if sync_on_startup is None else sync_on_startup

    app.include_router(recipes_library.router)
    app.include_router(recipes_sync.router)
    app.include_router(order.router)
    app.include_router(health.router)

    setup_logging()

    app.add_middleware(RequestLoggingMiddleware)

    return app


app = create_app()
