"""Sales bot pipeline: token, discovery, consolidation, completion"""
import logging
from typing import Optional

from sales_bot.core.errors import ConfigurationError
from sales_bot.models.sales import SalesBotContext
from sales_bot.services.ai_service import AIService
from sales_bot.services.google_auth_service import GoogleAuthService
from sales_bot.services.google_drive_service import GoogleDriveService
from sales_bot.services.google_sheets_service import GoogleSheetsService

logger = logging.getLogger(__name__)


class SalesBotService:
    """Runs one question through the full pipeline, strictly in sequence"""

    def __init__(self, context: SalesBotContext):
        self.context = context

    def answer(self, query: str, folder_id: Optional[str] = None) -> str:
        """
        Answer a sales question from the spreadsheets in a Drive folder

        Each call mints its own token and re-reads every spreadsheet; nothing
        is cached between calls. Any stage failing raises and aborts the rest.
        """
        folder_id = folder_id or self.context.default_folder_id
        if not folder_id:
            raise ConfigurationError("Missing folderId")

        logger.info("Service account loaded for: %s", self.context.credential.client_email)
        with GoogleAuthService(self.context.credential) as auth_service:
            token = auth_service.get_access_token()

        with GoogleDriveService(token.value) as drive_service:
            documents = drive_service.list_spreadsheets(folder_id)

        with GoogleSheetsService(token.value) as sheets_service:
            table = sheets_service.consolidate(documents)

        with AIService(
            api_key=self.context.ai_api_key,
            base_url=self.context.ai_base_url,
            model=self.context.ai_model,
        ) as ai_service:
            return ai_service.answer_question(query, table)
