# recipe_box/services/recipes_sync.py
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import httpx

from recipe_box.clients.recipe_db import RecipeDBClient, SourceType
from recipe_box.core import config
from recipe_box.models.recipe import NormalizedImport
from recipe_box.models.sync import BucketResult, SyncReport
from recipe_box.services.normalize import normalize_record
from recipe_box.services.recipes_repo import RecipeStore

log = logging.getLogger("recipe_box.sync")

# Errors that mean "source unavailable" for one request
FETCH_ERRORS = (httpx.HTTPError, ValueError)


@dataclass(frozen=True)
class SyncBucket:
    label: str
    source: SourceType
    upstream_category: str


# "Lunch" is filled from the meal directory's "Chicken" category.
BUCKETS = (
    SyncBucket("Breakfast", "meal", "Breakfast"),
    SyncBucket("Lunch", "meal", "Chicken"),
    SyncBucket("Drinks", "drink", "Cocktail"),
)


class RecipeSyncer:
    """
    Pulls a few recipes per bucket from the two public directories.

    Two-level fan-out/fan-in: buckets run concurrently, and inside each
    bucket the per-id lookups run concurrently. Failures never propagate;
    a failed list call empties its bucket, a failed lookup drops one record.
    """

    def __init__(
        self,
        meals: RecipeDBClient,
        drinks: RecipeDBClient,
        limit: int = config.LOOKUP_LIMIT,
        buckets: tuple = BUCKETS,
    ):
        self.clients: Dict[str, RecipeDBClient] = {"meal": meals, "drink": drinks}
        self.limit = limit
        self.buckets = buckets

    async def _lookup(self, client: RecipeDBClient, item_id: str) -> Optional[NormalizedImport]:
        try:
            record = await client.lookup_by_id(item_id)
        except FETCH_ERRORS as e:
            log.debug("lookup failed", extra={"source": client.source, "item_id": item_id, "error": str(e)})
            return None
        if record is None:
            return None
        return normalize_record(record, client.source)

    async def _fetch_bucket(self, bucket: SyncBucket) -> tuple[List[NormalizedImport], bool]:
        client = self.clients[bucket.source]
        try:
            listed = await client.list_by_category(bucket.upstream_category)
        except FETCH_ERRORS as e:
            log.warning(
                "category list failed",
                extra={"bucket": bucket.label, "category": bucket.upstream_category, "error": str(e)},
            )
            return [], True

        ids = [it.get(client.id_field) for it in listed[: self.limit]]
        ids = [i for i in ids if isinstance(i, str)]

        results = await asyncio.gather(*(self._lookup(client, i) for i in ids))
        return [r for r in results if r is not None], False

    async def fetch_bucket(self, bucket: SyncBucket) -> List[NormalizedImport]:
        recipes, _ = await self._fetch_bucket(bucket)
        return recipes

    async def fetch_all(self) -> Dict[str, List[NormalizedImport]]:
        results = await asyncio.gather(*(self.fetch_bucket(b) for b in self.buckets))
        return {b.label: r for b, r in zip(self.buckets, results)}

    async def _sync_bucket(self, store: RecipeStore, bucket: SyncBucket) -> BucketResult:
        try:
            recipes, failed = await self._fetch_bucket(bucket)
        except Exception:
            # one bucket must not keep the others (or completion) from finishing
            log.exception("bucket fetch crashed", extra={"bucket": bucket.label})
            return BucketResult(label=bucket.label, failed=True)

        upserted = 0
        if recipes:
            # store writes are blocking and serialized by the store's lock
            try:
                upserted = await asyncio.to_thread(store.import_online, recipes, bucket.label)
            except Exception:
                log.exception("bucket import failed", extra={"bucket": bucket.label})
                failed = True
        return BucketResult(label=bucket.label, fetched=len(recipes), upserted=upserted, failed=failed)

    async def sync_all(
        self,
        store: RecipeStore,
        on_complete: Optional[Callable[[SyncReport], None]] = None,
    ) -> SyncReport:
        results = await asyncio.gather(*(self._sync_bucket(store, b) for b in self.buckets))
        report = SyncReport(buckets={r.label: r for r in results})

        log.info(
            "sync complete",
            extra={"upserted": report.total_upserted, "failed_buckets": report.failed},
        )
        if on_complete is not None:
            on_complete(report)
        return report
