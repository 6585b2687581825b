"""
Tabular Store

Append-only, read-by-range row storage standing in for a spreadsheet.

Backends:
- SheetsTabularStore: Google Sheets (production)
- DatabaseTabularStore: one SQL table, rows kept in insertion order
- MemoryTabularStore: in-process lists (local development and tests)

Rows are positional lists of strings. Row 1 of every table is the header
row, so data rows start at row 2 and a scan range of "A2:J" means
"every data row, columns A through J". No backend offers isolation between
concurrent appends or between two scans in the same request.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol

from sqlalchemy import JSON, DateTime, Index, Integer, String, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import Mapped, mapped_column

from app.core.config import settings
from app.core.database import Base, async_session_maker
from app.core.google import build_sheets, load_credentials

logger = logging.getLogger(__name__)

DEFAULT_SCAN_RANGE = "A2:J"
HEADER_ROWS = 1

_RANGE_PATTERN = re.compile(r"^([A-Z]+)(\d*):([A-Z]+)(\d*)$")


@dataclass(frozen=True)
class CellRange:
    """A parsed A1-notation range. Columns are zero-based, rows one-based."""

    first_column: int
    last_column: int
    first_row: int = 1
    last_row: int | None = None


def column_index(letters: str) -> int:
    """Convert a column letter ("A", "J", "AA") to a zero-based index."""
    index = 0
    for letter in letters:
        index = index * 26 + (ord(letter) - ord("A") + 1)
    return index - 1


def column_letter(index: int) -> str:
    """Convert a zero-based column index to its letter."""
    letters = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def parse_range(range_hint: str) -> CellRange:
    """
    Parse an A1-notation range such as "A2:J" or "A:C".

    Raises:
        ValueError: If the range is not in COL[ROW]:COL[ROW] form
    """
    match = _RANGE_PATTERN.match(range_hint.strip().upper())
    if not match:
        raise ValueError(f"Unsupported range: {range_hint!r}")

    first_letters, first_row, last_letters, last_row = match.groups()
    return CellRange(
        first_column=column_index(first_letters),
        last_column=column_index(last_letters),
        first_row=int(first_row) if first_row else 1,
        last_row=int(last_row) if last_row else None,
    )


def select_range(rows: list[list[str]], cell_range: CellRange) -> list[list[str]]:
    """
    Slice stored data rows the way a spreadsheet range read would.

    rows[0] sits on sheet row HEADER_ROWS + 1.
    """
    selected: list[list[str]] = []
    for row_number, row in enumerate(rows, start=HEADER_ROWS + 1):
        if row_number < cell_range.first_row:
            continue
        if cell_range.last_row is not None and row_number > cell_range.last_row:
            break
        selected.append(list(row[cell_range.first_column : cell_range.last_column + 1]))
    return selected


class TabularStore(Protocol):
    """Row storage contract shared by all backends."""

    async def append(self, table: str, row: list[str]) -> None: ...

    async def scan(self, table: str, range_hint: str = DEFAULT_SCAN_RANGE) -> list[list[str]]: ...


class MemoryTabularStore:
    """In-process tabular store. State is lost on restart."""

    def __init__(self, tables: dict[str, list[list[str]]] | None = None) -> None:
        self._tables: dict[str, list[list[str]]] = {
            name: [list(row) for row in rows] for name, rows in (tables or {}).items()
        }

    async def append(self, table: str, row: list[str]) -> None:
        self._tables.setdefault(table, []).append(list(row))

    async def scan(self, table: str, range_hint: str = DEFAULT_SCAN_RANGE) -> list[list[str]]:
        return select_range(self._tables.get(table, []), parse_range(range_hint))


class TabularRow(Base):
    """One stored row of the database-backed tabular store."""

    __tablename__ = "tabular_rows"

    # Insertion order is the row order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    table_name: Mapped[str] = mapped_column(String(100), nullable=False)
    cells: Mapped[list] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (Index("ix_tabular_rows_table_name", "table_name"),)


class DatabaseTabularStore:
    """Tabular store persisted in the tabular_rows SQL table."""

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]) -> None:
        self._session_maker = session_maker

    async def append(self, table: str, row: list[str]) -> None:
        async with self._session_maker() as session:
            session.add(TabularRow(table_name=table, cells=list(row)))
            await session.commit()

    async def scan(self, table: str, range_hint: str = DEFAULT_SCAN_RANGE) -> list[list[str]]:
        cell_range = parse_range(range_hint)
        async with self._session_maker() as session:
            result = await session.execute(
                select(TabularRow.cells)
                .where(TabularRow.table_name == table)
                .order_by(TabularRow.id)
            )
            rows = [list(cells) for cells in result.scalars().all()]
        return select_range(rows, cell_range)


class SheetsTabularStore:
    """Tabular store backed by one Google Sheets spreadsheet (one sheet per table)."""

    def __init__(self, credentials: Any, spreadsheet_id: str) -> None:
        self._credentials = credentials
        self._spreadsheet_id = spreadsheet_id

    def _append_sync(self, table: str, row: list[str]) -> None:
        sheets = build_sheets(self._credentials)
        sheets.spreadsheets().values().append(
            spreadsheetId=self._spreadsheet_id,
            range=f"{table}!A:{column_letter(max(len(row), 1) - 1)}",
            valueInputOption="RAW",
            body={"values": [row]},
        ).execute()

    def _scan_sync(self, table: str, range_hint: str) -> list[list[str]]:
        sheets = build_sheets(self._credentials)
        response = (
            sheets.spreadsheets()
            .values()
            .get(spreadsheetId=self._spreadsheet_id, range=f"{table}!{range_hint}")
            .execute()
        )
        return response.get("values", [])

    async def append(self, table: str, row: list[str]) -> None:
        # Run sync Google client call in thread pool to avoid blocking event loop
        await asyncio.to_thread(self._append_sync, table, row)

    async def scan(self, table: str, range_hint: str = DEFAULT_SCAN_RANGE) -> list[list[str]]:
        return await asyncio.to_thread(self._scan_sync, table, range_hint)


# Process-wide store instance
tabular_store: TabularStore | None = None


def init_tabular_store() -> TabularStore:
    """
    Create the tabular store selected by TABULAR_BACKEND.

    Call this on application startup.
    """
    global tabular_store

    if settings.tabular_backend == "sheets":
        credentials = load_credentials(settings.google_credentials)
        tabular_store = SheetsTabularStore(credentials, settings.spreadsheet_id)
    elif settings.tabular_backend == "database":
        tabular_store = DatabaseTabularStore(async_session_maker)
    else:
        logger.warning("Using in-memory tabular store - records are lost on restart")
        tabular_store = MemoryTabularStore()

    return tabular_store


async def get_tabular_store() -> TabularStore:
    """
    Get the tabular store instance.

    Usage in FastAPI:
        @router.get("/rows")
        async def list_rows(store: TabularStore = Depends(get_tabular_store)):
            ...
    """
    if tabular_store is None:
        raise RuntimeError("Tabular store is not initialized")
    return tabular_store


def close_tabular_store() -> None:
    """Drop the tabular store instance."""
    global tabular_store
    tabular_store = None
