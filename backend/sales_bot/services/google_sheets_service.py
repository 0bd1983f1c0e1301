"""
Google Sheets Service - Read sales rows and consolidate them into one table
"""

import logging
from typing import List

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from sales_bot.core.errors import SheetRetrievalError
from sales_bot.models.sales import SOURCE_COLUMNS, ConsolidatedTable, DocumentRef, SalesRow
from sales_bot.services.google_auth_service import AccessTokenCredentials

logger = logging.getLogger(__name__)

SALES_RANGE = 'A1:H'


class GoogleSheetsService:
    """Service for interacting with Google Sheets API"""

    def __init__(self, access_token: str, sheets_service=None):
        """Initialize with access token"""
        self._owns_service = sheets_service is None
        if sheets_service is None:
            credentials = AccessTokenCredentials(access_token)
            sheets_service = build('sheets', 'v4', credentials=credentials, cache_discovery=False)
        self.sheets_service = sheets_service

    def close(self):
        if self._owns_service:
            self.sheets_service.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def get_values(self, document: DocumentRef, cell_range: str = SALES_RANGE) -> List[List[str]]:
        """
        Read a cell range from a spreadsheet

        Args:
            document: Spreadsheet to read
            cell_range: A1 notation range

        Returns:
            Rows of raw cell values (empty list if the range holds nothing)
        """
        try:
            result = self.sheets_service.spreadsheets().values().get(
                spreadsheetId=document.id,
                range=cell_range
            ).execute()
        except HttpError as e:
            raise SheetRetrievalError(f"Failed to read spreadsheet {document.name}: {e}") from e

        return result.get('values') or []

    def consolidate(self, documents: List[DocumentRef]) -> ConsolidatedTable:
        """
        Merge the data rows of every spreadsheet into one table

        Documents are read one at a time, in the order given. The first row of
        each sheet is its header and is skipped. Rows with fewer than eight
        cells are dropped; the rest keep their first eight cells and are tagged
        with the document name.
        """
        table = ConsolidatedTable()

        for document in documents:
            logger.info("Reading: %s", document.name)
            values = self.get_values(document)

            for row in values[1:]:
                if len(row) >= SOURCE_COLUMNS:
                    table.rows.append(SalesRow.from_cells(row, source_month=document.name))
                else:
                    table.dropped_rows += 1

        if table.dropped_rows:
            logger.warning("Dropped %s rows with fewer than %s cells", table.dropped_rows, SOURCE_COLUMNS)
        logger.info("Data consolidated: %s rows from %s spreadsheets", len(table), len(documents))
        return table
