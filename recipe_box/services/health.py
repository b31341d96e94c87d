# recipe_box/services/health.py
from __future__ import annotations

import sqlite3
import time
from pathlib import Path
from typing import Any, Dict, Optional

import httpx

from recipe_box.clients.recipe_db import RecipeDBClient
from recipe_box.core import config


def _ms_since(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _check_result(status: str, latency_ms: int, error: Optional[str] = None) -> Dict[str, Any]:
    out: Dict[str, Any] = {"status": status, "latency_ms": latency_ms}
    if error:
        out["error"] = error
    return out


def check_db(db_path: Path) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        conn = sqlite3.connect(str(db_path), timeout=2)
        try:
            conn.execute("SELECT 1 FROM recipes LIMIT 1;")
        finally:
            conn.close()
        return _check_result("ok", _ms_since(start))
    except Exception as e:
        return _check_result("fail", _ms_since(start), str(e))


async def check_source(client: RecipeDBClient) -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        # category listing is the cheapest call both directories answer
        await client.list_by_category("Breakfast" if client.source == "meal" else "Cocktail")
        return _check_result("ok", _ms_since(start))
    except (httpx.HTTPError, ValueError) as e:
        # degraded: sync won't refresh, but the local store still serves
        return _check_result("degraded", _ms_since(start), str(e))


def version_payload() -> Dict[str, Any]:
    return {
        "version": config.APP_VERSION,
        "git_sha": config.GIT_SHA,
        "build_date": config.BUILD_DATE,
    }
