# recipe_box/models/sync.py
from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, computed_field


class BucketResult(BaseModel):
    label: str
    fetched: int = 0
    upserted: int = 0
    failed: bool = False


class SyncReport(BaseModel):
    buckets: Dict[str, BucketResult] = Field(default_factory=dict)

    @computed_field
    @property
    def failed(self) -> List[str]:
        return [label for label, b in self.buckets.items() if b.failed]

    @computed_field
    @property
    def total_upserted(self) -> int:
        return sum(b.upserted for b in self.buckets.values())
