"""Google Drive service for discovering spreadsheets in a folder"""
import logging
from typing import List

from googleapiclient.discovery import build

from sales_bot.core.errors import NoDocumentsFoundError
from sales_bot.models.sales import DocumentRef
from sales_bot.services.google_auth_service import AccessTokenCredentials

logger = logging.getLogger(__name__)

SPREADSHEET_MIME_TYPE = 'application/vnd.google-apps.spreadsheet'


class GoogleDriveService:
    """Service for listing Google Drive folder contents"""

    def __init__(self, access_token: str, drive_service=None):
        """Initialize service with OAuth access token"""
        self._owns_service = drive_service is None
        if drive_service is None:
            credentials = AccessTokenCredentials(access_token)
            drive_service = build('drive', 'v3', credentials=credentials, cache_discovery=False)
        self.drive_service = drive_service

    def close(self):
        if self._owns_service:
            self.drive_service.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @staticmethod
    def build_folder_query(folder_id: str) -> str:
        return (
            f"'{folder_id}' in parents"
            f" and mimeType='{SPREADSHEET_MIME_TYPE}'"
            " and trashed=false"
        )

    def list_spreadsheets(self, folder_id: str) -> List[DocumentRef]:
        """
        List the spreadsheets directly inside a folder

        Only the first page of results is read. Order is whatever Drive returns.

        Raises:
            NoDocumentsFoundError: if the folder holds no spreadsheets
        """
        result = self.drive_service.files().list(
            q=self.build_folder_query(folder_id),
            fields='files(id,name)'
        ).execute()

        files = result.get('files') or []
        logger.info("Found %s spreadsheets", len(files))

        if not files:
            raise NoDocumentsFoundError("No spreadsheets found in folder")

        return [DocumentRef(id=f['id'], name=f.get('name', '')) for f in files]
