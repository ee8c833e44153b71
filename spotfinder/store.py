"""
SQLite-backed store of named map points.

One table, `locations`, with a unique name and a latitude/longitude pair.
A new file gets its schema and the default catalog on first open; later
opens leave the data alone.

Name matching is not uniform: lookups and partial updates compare names
case-insensitively, while delete and the UNIQUE constraint compare them
exactly.
"""
import sqlite3
from contextlib import closing
from dataclasses import asdict, dataclass

import structlog

from .seed import seed_rows

logger = structlog.get_logger()

# Bumping this drops and recreates the table on the next open.
SCHEMA_VERSION = 1
TABLE = "locations"


class LocationStoreError(Exception):
    pass


class LocationConflict(LocationStoreError):
    """Name already used by another record."""


class LocationNotFound(LocationStoreError):
    """No record matches the requested name."""


@dataclass(frozen=True)
class Location:
    id: int
    name: str
    latitude: float
    longitude: float

    @property
    def coords(self) -> str:
        return "Lat %.4f, Lon %.4f" % (self.latitude, self.longitude)

    def as_dict(self):
        d = asdict(self)
        d["coords"] = self.coords
        return d

    @classmethod
    def from_row(cls, row):
        return cls(row["id"], row["name"], row["latitude"], row["longitude"])


class LocationStore:
    def __init__(self, con: sqlite3.Connection, path: str = ""):
        self.path = path
        self._con = con
        self._con.row_factory = sqlite3.Row
        self._closed = False

    @classmethod
    def open(cls, path: str, seed: bool = True) -> "LocationStore":
        """Open (or create) the store at `path`.

        A missing schema is created and, with `seed`, filled with the
        default catalog. An older schema version is dropped and recreated,
        losing every stored row. A newer one is refused.
        """
        con = sqlite3.connect(path)
        store = cls(con, path)
        try:
            store._prepare(seed)
        except Exception:
            con.close()
            raise
        return store

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self):
        self._con.close()
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    # --- schema -----------------------------------------------------------

    def _prepare(self, seed: bool):
        version = self._con.execute("PRAGMA user_version").fetchone()[0]
        if version == SCHEMA_VERSION:
            return
        if version > SCHEMA_VERSION:
            raise LocationStoreError(
                f"Can't downgrade {self.path or 'database'} from version {version} to {SCHEMA_VERSION}"
            )

        with self._con:
            self._con.execute("BEGIN")
            if version:
                logger.warning("schema_dropped", path=self.path, old_version=version, new_version=SCHEMA_VERSION)
                self._con.execute(f"DROP TABLE IF EXISTS {TABLE}")
            self._con.execute(f"""
            CREATE TABLE IF NOT EXISTS {TABLE} (
              id INTEGER PRIMARY KEY AUTOINCREMENT,
              name TEXT NOT NULL UNIQUE,
              latitude REAL,
              longitude REAL
            )
            """)
            if seed:
                self._seed_if_empty()
            self._con.execute(f"PRAGMA user_version = {SCHEMA_VERSION:d}")
        logger.info("schema_created", path=self.path, version=SCHEMA_VERSION)

    def _seed_if_empty(self):
        if self.count() > 0:
            return
        rows = seed_rows()
        self._con.executemany(
            f"INSERT INTO {TABLE}(name, latitude, longitude) VALUES (?, ?, ?)",
            rows,
        )
        logger.info("locations_seeded", path=self.path, count=len(rows))

    # --- operations -------------------------------------------------------

    def count(self) -> int:
        return self._con.execute(f"SELECT COUNT(*) FROM {TABLE}").fetchone()[0]

    def add(self, name: str, latitude: float, longitude: float) -> Location:
        """Insert a record; an existing exact name raises LocationConflict."""
        try:
            with self._con:
                cur = self._con.execute(
                    f"INSERT INTO {TABLE}(name, latitude, longitude) VALUES (?, ?, ?)",
                    (name, latitude, longitude),
                )
        except sqlite3.IntegrityError:
            logger.info("location_conflict", name=name)
            raise LocationConflict(name) from None

        logger.info("location_added", id=cur.lastrowid, name=name)
        return Location(cur.lastrowid, name, latitude, longitude)

    def query_by_name(self, query: str):
        """Case-insensitive exact match; None when nothing matches."""
        with closing(self._con.cursor()) as cur:
            cur.execute(
                f"SELECT id, name, latitude, longitude FROM {TABLE} WHERE LOWER(name) = LOWER(?)",
                (query,),
            )
            row = cur.fetchone()
        return Location.from_row(row) if row else None

    def update_partial(self, original_name: str, new_name=None, latitude=None, longitude=None) -> Location:
        """Overwrite the fields that are given on the record matching `original_name`.

        `original_name` is matched case-insensitively. A blank `new_name` and
        `None` coordinates keep the current values. The write goes through
        the resolved record's id. Renaming onto another record's name raises
        LocationConflict without writing anything.
        """
        current = self.query_by_name(original_name)
        if current is None:
            raise LocationNotFound(original_name)

        merged = Location(
            id=current.id,
            name=new_name if new_name and new_name.strip() else current.name,
            latitude=current.latitude if latitude is None else latitude,
            longitude=current.longitude if longitude is None else longitude,
        )

        clash = self._con.execute(
            f"SELECT id FROM {TABLE} WHERE name = ? AND id != ?",
            (merged.name, merged.id),
        ).fetchone()
        if clash:
            logger.info("location_conflict", name=merged.name, id=merged.id)
            raise LocationConflict(merged.name)

        try:
            with self._con:
                self._con.execute(
                    f"UPDATE {TABLE} SET name = ?, latitude = ?, longitude = ? WHERE id = ?",
                    (merged.name, merged.latitude, merged.longitude, merged.id),
                )
        except sqlite3.IntegrityError:
            raise LocationConflict(merged.name) from None

        logger.info("location_updated", id=merged.id, name=merged.name, original=original_name)
        return merged

    def delete(self, name: str) -> int:
        """Delete by exact, case-sensitive name. Returns rows removed."""
        with self._con:
            cur = self._con.execute(f"DELETE FROM {TABLE} WHERE name = ?", (name,))
        logger.info("location_deleted", name=name, rows=cur.rowcount)
        return cur.rowcount

    def list_all(self):
        with closing(self._con.cursor()) as cur:
            cur.execute(f"SELECT id, name, latitude, longitude FROM {TABLE}")
            return [Location.from_row(r) for r in cur.fetchall()]
