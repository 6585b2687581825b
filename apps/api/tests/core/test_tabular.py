"""
Unit tests for the tabular store.

These tests cover:
- A1 range parsing and column letter conversion
- Range selection over stored rows (header row offset, column slicing)
- In-memory and database-backed stores
- Sheets store request shapes (Google client mocked)
- Store handle lifecycle
"""

from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core import tabular
from app.core.tabular import (
    CellRange,
    DatabaseTabularStore,
    MemoryTabularStore,
    SheetsTabularStore,
    TabularRow,
    column_index,
    column_letter,
    get_tabular_store,
    parse_range,
    select_range,
)


class TestColumnConversion:
    """Tests for column letter <-> index conversion."""

    def test_single_letters(self):
        assert column_index("A") == 0
        assert column_index("J") == 9
        assert column_index("Z") == 25

    def test_double_letters(self):
        assert column_index("AA") == 26
        assert column_index("AZ") == 51

    def test_letter_round_trip_boundaries(self):
        for index in (0, 9, 25, 26, 51, 701, 702):
            assert column_index(column_letter(index)) == index


class TestParseRange:
    """Tests for parse_range."""

    def test_open_ended_data_range(self):
        assert parse_range("A2:J") == CellRange(first_column=0, last_column=9, first_row=2)

    def test_whole_columns(self):
        assert parse_range("A:C") == CellRange(first_column=0, last_column=2, first_row=1)

    def test_bounded_range(self):
        assert parse_range("B3:D10") == CellRange(
            first_column=1, last_column=3, first_row=3, last_row=10
        )

    def test_lowercase_is_accepted(self):
        assert parse_range("a2:j") == parse_range("A2:J")

    @pytest.mark.parametrize("bad", ["", "A2", "Sheet1!A2:J", "2A:J", "A2-J"])
    def test_invalid_ranges_raise(self, bad):
        with pytest.raises(ValueError):
            parse_range(bad)


class TestSelectRange:
    """Tests for select_range."""

    ROWS = [
        ["r2a", "r2b", "r2c"],
        ["r3a", "r3b", "r3c"],
        ["r4a", "r4b", "r4c"],
    ]

    def test_first_stored_row_is_sheet_row_two(self):
        """A2:... starts at the first data row."""
        assert select_range(self.ROWS, parse_range("A2:C")) == self.ROWS

    def test_first_row_offset(self):
        assert select_range(self.ROWS, parse_range("A3:C")) == self.ROWS[1:]

    def test_last_row_bound(self):
        assert select_range(self.ROWS, parse_range("A2:C3")) == [self.ROWS[0]]

    def test_column_slice(self):
        assert select_range(self.ROWS, parse_range("B2:B")) == [["r2b"], ["r3b"], ["r4b"]]

    def test_short_rows_stay_short(self):
        """Trailing empty cells are not padded, like the Sheets API."""
        assert select_range([["a"]], parse_range("A2:J")) == [["a"]]

    def test_returns_copies(self):
        selected = select_range(self.ROWS, parse_range("A2:C"))
        selected[0][0] = "changed"
        assert self.ROWS[0][0] == "r2a"


class TestMemoryTabularStore:
    """Tests for MemoryTabularStore."""

    @pytest.mark.asyncio
    async def test_append_then_scan_in_order(self):
        store = MemoryTabularStore()
        await store.append("t", ["1", "a"])
        await store.append("t", ["2", "b"])

        assert await store.scan("t", "A2:B") == [["1", "a"], ["2", "b"]]

    @pytest.mark.asyncio
    async def test_unknown_table_is_empty(self):
        assert await MemoryTabularStore().scan("missing") == []

    @pytest.mark.asyncio
    async def test_tables_are_independent(self):
        store = MemoryTabularStore()
        await store.append("one", ["x"])

        assert await store.scan("two") == []

    @pytest.mark.asyncio
    async def test_seed_rows_are_copied(self):
        seed = {"t": [["a"]]}
        store = MemoryTabularStore(seed)
        seed["t"][0][0] = "changed"

        assert await store.scan("t", "A2:A") == [["a"]]


@pytest_asyncio.fixture
async def database_store():
    """DatabaseTabularStore on an in-memory SQLite database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(TabularRow.__table__.create)

    yield DatabaseTabularStore(async_sessionmaker(engine, class_=AsyncSession))

    await engine.dispose()


class TestDatabaseTabularStore:
    """Tests for DatabaseTabularStore."""

    @pytest.mark.asyncio
    async def test_append_then_scan_in_insertion_order(self, database_store):
        await database_store.append("screening", ["1", "first"])
        await database_store.append("screening", ["2", "second"])

        assert await database_store.scan("screening", "A2:B") == [
            ["1", "first"],
            ["2", "second"],
        ]

    @pytest.mark.asyncio
    async def test_scan_only_returns_the_named_table(self, database_store):
        await database_store.append("screening", ["s"])
        await database_store.append("Enrollments", ["e"])

        assert await database_store.scan("Enrollments", "A2:A") == [["e"]]

    @pytest.mark.asyncio
    async def test_scan_applies_the_range(self, database_store):
        await database_store.append("t", ["a", "b", "c"])

        assert await database_store.scan("t", "B2:C") == [["b", "c"]]

    @pytest.mark.asyncio
    async def test_empty_table(self, database_store):
        assert await database_store.scan("t") == []


class TestSheetsTabularStore:
    """Tests for SheetsTabularStore with the Google client mocked."""

    @pytest.mark.asyncio
    async def test_append_sends_raw_row(self):
        service = MagicMock()
        with patch("app.core.tabular.build_sheets", return_value=service):
            store = SheetsTabularStore(credentials=object(), spreadsheet_id="sheet123")
            await store.append("screening", ["a", "b", "c"])

        service.spreadsheets().values().append.assert_called_once_with(
            spreadsheetId="sheet123",
            range="screening!A:C",
            valueInputOption="RAW",
            body={"values": [["a", "b", "c"]]},
        )

    @pytest.mark.asyncio
    async def test_scan_reads_table_range(self):
        service = MagicMock()
        service.spreadsheets().values().get().execute.return_value = {"values": [["x", "y"]]}
        with patch("app.core.tabular.build_sheets", return_value=service):
            store = SheetsTabularStore(credentials=object(), spreadsheet_id="sheet123")
            rows = await store.scan("Enrollments", "A2:J")

        assert rows == [["x", "y"]]
        service.spreadsheets().values().get.assert_called_with(
            spreadsheetId="sheet123", range="Enrollments!A2:J"
        )

    @pytest.mark.asyncio
    async def test_scan_of_empty_sheet(self):
        """The API omits "values" when the range is empty."""
        service = MagicMock()
        service.spreadsheets().values().get().execute.return_value = {"range": "t!A2:J"}
        with patch("app.core.tabular.build_sheets", return_value=service):
            store = SheetsTabularStore(credentials=object(), spreadsheet_id="sheet123")

            assert await store.scan("t") == []


class TestTabularStoreHandle:
    """Tests for init/get/close of the process-wide store."""

    @pytest.mark.asyncio
    async def test_get_before_init_raises(self):
        with patch.object(tabular, "tabular_store", None):
            with pytest.raises(RuntimeError):
                await get_tabular_store()

    @pytest.mark.asyncio
    async def test_memory_backend(self):
        with (
            patch.object(tabular.settings, "tabular_backend", "memory"),
            patch.object(tabular, "tabular_store", None),
        ):
            store = tabular.init_tabular_store()
            assert isinstance(store, MemoryTabularStore)
            assert await get_tabular_store() is store

            tabular.close_tabular_store()
            assert tabular.tabular_store is None

    def test_sheets_backend_requires_credentials(self):
        with (
            patch.object(tabular.settings, "tabular_backend", "sheets"),
            patch.object(tabular.settings, "google_credentials", None),
            patch.object(tabular, "tabular_store", None),
        ):
            with pytest.raises(ValueError):
                tabular.init_tabular_store()
