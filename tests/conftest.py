import os
import sys
from typing import Dict, List

import pandas as pd
import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config.logging_config import log
from config.settings import Settings
from core.models import Listing, SHEET_COLUMNS
from database.base_store import BaseStore, StorageError, coerce_columns, empty_frame


class MemoryStore(BaseStore):
    """In-memory sheets: each sheet is a list of rows, row 1 being the header."""

    def __init__(self):
        self.sheets: Dict[str, List[list]] = {}
        self.fail_read = set()
        self.fail_append = set()
        self.fail_clear = set()
        self.calls: List[tuple] = []

    def seed(self, sheet: str, listings: List[Listing]) -> None:
        self.sheets[sheet] = [list(SHEET_COLUMNS)] + [l.to_row() for l in listings]

    def read_all(self, sheet, column_types):
        self.calls.append(("read_all", sheet))
        if sheet in self.fail_read or sheet not in self.sheets:
            raise StorageError(f"cannot read {sheet}")
        rows = self.sheets[sheet]
        if len(rows) <= 1:
            return empty_frame(column_types)
        return coerce_columns(pd.DataFrame(rows[1:], columns=rows[0]), column_types)

    def append_at(self, sheet, start_address, listings, include_headers):
        self.calls.append(("append_at", sheet, start_address))
        if sheet in self.fail_append:
            raise StorageError(f"cannot write {sheet}")
        values = [l.to_row() for l in listings]
        if include_headers:
            values.insert(0, list(SHEET_COLUMNS))
        rows = self.sheets.setdefault(sheet, [list(SHEET_COLUMNS)])
        start = int(start_address[1:]) - 1
        while len(rows) < start:
            rows.append([""] * len(SHEET_COLUMNS))
        rows[start:start + len(values)] = values

    def append(self, sheet, listings):
        self.calls.append(("append", sheet))
        if sheet in self.fail_append:
            raise StorageError(f"cannot write {sheet}")
        rows = self.sheets.setdefault(sheet, [list(SHEET_COLUMNS)])
        rows.extend(l.to_row() for l in listings)

    def clear_range(self, sheet, address_range):
        self.calls.append(("clear_range", sheet, address_range))
        if sheet in self.fail_clear:
            raise StorageError(f"cannot clear {sheet}")
        self.sheets[sheet] = []

    def data_rows(self, sheet: str) -> List[list]:
        return [r for r in self.sheets.get(sheet, [])[1:] if any(v != "" for v in r)]


@pytest.fixture
def settings():
    return Settings(GOOGLE_SHEET_ID="sheet-123", CONTACT_EMAIL="me@example.com", SCRAPE_DELAY_SECONDS=7)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def log_messages():
    messages = []
    handler_id = log.add(lambda m: messages.append(m.record), level="DEBUG")
    yield messages
    log.remove(handler_id)
