from typing import Dict, Sequence
import gspread
import requests
import pandas as pd
from google.auth.exceptions import GoogleAuthError
from config.settings import Settings
from config.logging_config import log
from core.models import Listing, SHEET_COLUMNS
from database.base_store import BaseStore, StorageError, records_to_frame

SCOPES = [
    "https://www.googleapis.com/auth/spreadsheets",
]

NEW_SHEET_ROWS = 1000

API_ERRORS = (gspread.exceptions.GSpreadException, GoogleAuthError, requests.RequestException)


class SheetsClient(BaseStore):
    """Google Sheets backed store: one spreadsheet, one worksheet per dataset."""

    def __init__(self, settings: Settings, client: gspread.Client = None):
        self.sheet_id = settings.GOOGLE_SHEET_ID
        self.client = client or self._authorize(settings)
        self._spreadsheet = None

    def _authorize(self, settings: Settings) -> gspread.Client:
        try:
            if settings.GOOGLE_SERVICE_ACCOUNT_KEY_PATH:
                gc = gspread.service_account(filename=settings.GOOGLE_SERVICE_ACCOUNT_KEY_PATH, scopes=SCOPES)
                log.info("Authorized Google Sheets with service account key")
            else:
                # Cached user token, prompts in a browser the first time
                gc = gspread.oauth(scopes=SCOPES)
                log.info("Authorized Google Sheets with cached OAuth credentials")
        except (GoogleAuthError, OSError, ValueError) as e:
            raise StorageError(f"Google Sheets authorization failed: {e}") from e
        return gc

    @property
    def spreadsheet(self):
        if self._spreadsheet is None:
            try:
                self._spreadsheet = self.client.open_by_key(self.sheet_id)
            except API_ERRORS as e:
                raise StorageError(f"Cannot open spreadsheet {self.sheet_id}: {e}") from e
        return self._spreadsheet

    def _worksheet(self, sheet: str, create: bool = False):
        try:
            return self.spreadsheet.worksheet(sheet)
        except gspread.WorksheetNotFound:
            if not create:
                raise StorageError(f"Worksheet '{sheet}' not found")
        except API_ERRORS as e:
            raise StorageError(f"Cannot open worksheet '{sheet}': {e}") from e
        try:
            ws = self.spreadsheet.add_worksheet(title=sheet, rows=NEW_SHEET_ROWS, cols=len(SHEET_COLUMNS))
            ws.update(values=[list(SHEET_COLUMNS)], range_name="A1", value_input_option="RAW")
        except API_ERRORS as e:
            raise StorageError(f"Cannot create worksheet '{sheet}': {e}") from e
        log.info(f"Created worksheet '{sheet}'")
        return ws

    def read_all(self, sheet: str, column_types: Dict[str, str]) -> pd.DataFrame:
        ws = self._worksheet(sheet)
        try:
            records = ws.get_all_records()
        except API_ERRORS as e:
            raise StorageError(f"Reading '{sheet}' failed: {e}") from e
        try:
            return records_to_frame(records, column_types)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Unexpected values in '{sheet}': {e}") from e

    def append_at(self, sheet: str, start_address: str, listings: Sequence[Listing], include_headers: bool) -> None:
        values = [l.to_row() for l in listings]
        if include_headers:
            values.insert(0, list(SHEET_COLUMNS))
        if not values:
            return
        ws = self._worksheet(sheet, create=True)
        try:
            # RAW keeps prices verbatim and leaves existing cell formats alone
            ws.update(values=values, range_name=start_address, value_input_option="RAW")
        except API_ERRORS as e:
            raise StorageError(f"Writing to '{sheet}' at {start_address} failed: {e}") from e

    def append(self, sheet: str, listings: Sequence[Listing]) -> None:
        values = [l.to_row() for l in listings]
        if not values:
            return
        ws = self._worksheet(sheet, create=True)
        try:
            ws.append_rows(values, value_input_option="RAW")
        except API_ERRORS as e:
            raise StorageError(f"Appending to '{sheet}' failed: {e}") from e

    def clear_range(self, sheet: str, address_range: str) -> None:
        ws = self._worksheet(sheet, create=True)
        try:
            ws.batch_clear([address_range])
        except API_ERRORS as e:
            raise StorageError(f"Clearing {address_range} on '{sheet}' failed: {e}") from e
