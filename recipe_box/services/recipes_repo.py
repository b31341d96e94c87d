# recipe_box/services/recipes_repo.py
from __future__ import annotations

import json
import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional

from pydantic import ValidationError

from recipe_box.core import config
from recipe_box.core.text import fold, join_lines, split_lines
from recipe_box.models.recipe import NormalizedImport, Recipe, RecipeSeed
from recipe_box.services.normalize import derived_key
from recipe_box.services.seed_data import load_seeds

log = logging.getLogger("recipe_box.store")

SCHEMA = """
CREATE TABLE IF NOT EXISTS recipes (
    id             TEXT PRIMARY KEY,
    title          TEXT NOT NULL,
    summary        TEXT,
    category       TEXT,
    ingredients    TEXT,
    steps          TEXT,
    image_ref      TEXT,
    difficulty     TEXT,
    duration_min   INTEGER NOT NULL DEFAULT 0,
    is_favorite    INTEGER NOT NULL DEFAULT 0,
    created_at     TEXT NOT NULL,
    last_cooked_at TEXT
)
"""

FAVORITES_FILTER = "Favorites"
ALL_FILTER = "All"


def _now_iso() -> str:
    # fixed width so created_at sorts lexically
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def _row_to_recipe(row: sqlite3.Row) -> Recipe:
    return Recipe(**dict(row))


def _import_fields(item: NormalizedImport, category: str) -> dict[str, Any]:
    return {
        "title": item.title,
        "summary": f"Servings: {item.servings or '2'}",
        "category": category,
        # bundled samples are pipe-delimited, online imports newline-delimited
        "ingredients": join_lines(split_lines(item.ingredients, sep="|")),
        "steps": item.instructions.replace(". ", ".\n").strip(),
        "image_ref": item.image,
        "difficulty": "—",
        "duration_min": 0,
    }


def load_bundled(path: Path) -> List[NormalizedImport]:
    try:
        with open(str(path), "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        log.warning("bundled recipes missing", extra={"path": str(path)})
        return []
    except (OSError, json.JSONDecodeError) as e:
        log.warning("bundled recipes unreadable", extra={"path": str(path), "error": str(e)})
        return []

    out: List[NormalizedImport] = []
    for entry in raw if isinstance(raw, list) else []:
        try:
            out.append(NormalizedImport(**entry))
        except (TypeError, ValidationError) as e:
            log.warning("skipping bundled record", extra={"error": str(e)})
    return out


class RecipeStore:
    """
    Recipe repository over an embedded sqlite database.

    Writes go through a single lock so the file never sees two writers at
    once; reads open their own connection and may run alongside.
    """

    def __init__(self, db_path: Path | str, bundled_path: Path | str | None = None):
        self.db_path = Path(db_path)
        self.bundled_path = Path(bundled_path) if bundled_path else config.BUNDLED_RECIPES_PATH
        self._write_lock = threading.Lock()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(str(self.db_path), timeout=5)
        conn.row_factory = sqlite3.Row
        conn.create_function("fold", 1, fold, deterministic=True)
        try:
            yield conn
        finally:
            conn.close()

    def _commit(self, conn: sqlite3.Connection) -> None:
        # no-op unless this connection changed something
        if conn.total_changes == 0:
            return
        try:
            conn.commit()
        except sqlite3.Error:
            log.exception("commit failed", extra={"path": str(self.db_path)})

    def init_db(self) -> None:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._write_lock, self._connect() as conn:
            conn.execute(SCHEMA)
            conn.commit()

    def count(self) -> int:
        with self._connect() as conn:
            return int(conn.execute("SELECT COUNT(*) FROM recipes").fetchone()[0])

    def get(self, recipe_id: str) -> Optional[Recipe]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM recipes WHERE id = ?", (recipe_id,)).fetchone()
        return _row_to_recipe(row) if row else None

    # ------------------------------------------------------------------
    # seeding / imports
    # ------------------------------------------------------------------

    def seed_if_needed(self, seeds: Optional[Iterable[RecipeSeed]] = None) -> int:
        """
        Empty store: insert every hand-authored seed.
        Otherwise only backfill image_ref on seeds still showing the placeholder,
        leaving favorite/cooked state alone. Returns the number of rows touched.
        """
        seeds = list(load_seeds() if seeds is None else seeds)
        mutated = 0

        with self._write_lock, self._connect() as conn:
            existing = conn.execute("SELECT COUNT(*) FROM recipes").fetchone()[0]

            if existing == 0:
                for seed in seeds:
                    conn.execute(
                        """
                        INSERT INTO recipes (
                          id, title, summary, category, ingredients, steps,
                          image_ref, difficulty, duration_min, is_favorite, created_at
                        )
                        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 0, ?)
                        """,
                        (
                            seed.id,
                            seed.title,
                            seed.summary,
                            seed.category,
                            join_lines(seed.ingredients),
                            join_lines(seed.steps),
                            seed.image_name,
                            seed.difficulty,
                            seed.duration,
                            _now_iso(),
                        ),
                    )
                    mutated += 1
            else:
                for seed in seeds:
                    if seed.image_name == config.PLACEHOLDER_IMAGE:
                        continue
                    cur = conn.execute(
                        "UPDATE recipes SET image_ref = ? WHERE id = ? AND image_ref = ?",
                        (seed.image_name, seed.id, config.PLACEHOLDER_IMAGE),
                    )
                    mutated += cur.rowcount

            self._commit(conn)

        log.info("seed", extra={"mutated": mutated, "was_empty": existing == 0})
        return mutated

    def _upsert_import(self, conn: sqlite3.Connection, item: NormalizedImport, category: str) -> None:
        key = derived_key(item)
        fields = _import_fields(item, category)

        row = conn.execute("SELECT id FROM recipes WHERE id = ?", (key,)).fetchone()
        if row is None:
            conn.execute(
                """
                INSERT INTO recipes (
                  id, title, summary, category, ingredients, steps,
                  image_ref, difficulty, duration_min, is_favorite, created_at
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 0, ?)
                """,
                (
                    key,
                    fields["title"],
                    fields["summary"],
                    fields["category"],
                    fields["ingredients"],
                    fields["steps"],
                    fields["image_ref"],
                    fields["difficulty"],
                    fields["duration_min"],
                    _now_iso(),
                ),
            )
        else:
            # is_favorite and created_at belong to the existing row
            conn.execute(
                """
                UPDATE recipes
                SET title=?, summary=?, category=?, ingredients=?, steps=?,
                    image_ref=?, difficulty=?, duration_min=?
                WHERE id=?
                """,
                (
                    fields["title"],
                    fields["summary"],
                    fields["category"],
                    fields["ingredients"],
                    fields["steps"],
                    fields["image_ref"],
                    fields["difficulty"],
                    fields["duration_min"],
                    key,
                ),
            )

    def import_online(self, records: Iterable[NormalizedImport], category: str) -> int:
        n = 0
        with self._write_lock, self._connect() as conn:
            for item in records:
                self._upsert_import(conn, item, category)
                n += 1
            self._commit(conn)

        log.info("import", extra={"category": category, "records": n})
        return n

    def import_bundled(self, records: Optional[Iterable[NormalizedImport]] = None) -> int:
        if records is None:
            records = load_bundled(self.bundled_path)
        return self.import_online(records, config.IMPORTED_CATEGORY)

    # ------------------------------------------------------------------
    # queries / mutations
    # ------------------------------------------------------------------

    def query(self, search_text: Optional[str] = None, category: Optional[str] = None) -> List[Recipe]:
        where: List[str] = []
        params: List[Any] = []

        if category == FAVORITES_FILTER:
            where.append("is_favorite = 1")
        elif category and category != ALL_FILTER:
            where.append("category = ?")
            params.append(category)

        needle = (search_text or "").strip()
        if needle:
            folded = fold(needle)
            where.append(
                "(instr(fold(title), ?) > 0 OR instr(fold(summary), ?) > 0 OR instr(fold(ingredients), ?) > 0)"
            )
            params.extend([folded, folded, folded])

        sql = "SELECT * FROM recipes"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY is_favorite DESC, created_at DESC"

        with self._connect() as conn:
            rows = conn.execute(sql, params).fetchall()
        return [_row_to_recipe(r) for r in rows]

    def _update_one(self, sql: str, params: tuple) -> bool:
        with self._write_lock, self._connect() as conn:
            cur = conn.execute(sql, params)
            self._commit(conn)
        return cur.rowcount > 0

    def toggle_favorite(self, recipe_id: str) -> Optional[Recipe]:
        if not self._update_one(
            "UPDATE recipes SET is_favorite = 1 - is_favorite WHERE id = ?",
            (recipe_id,),
        ):
            return None
        return self.get(recipe_id)

    def mark_cooked(self, recipe_id: str) -> Optional[Recipe]:
        if not self._update_one(
            "UPDATE recipes SET last_cooked_at = ? WHERE id = ?",
            (_now_iso(), recipe_id),
        ):
            return None
        return self.get(recipe_id)
