"""Sales bot endpoint: question in, answer out"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from sales_bot.config import Settings, get_settings
from sales_bot.models.sales import SalesBotContext
from sales_bot.services.sales_bot_service import SalesBotService

router = APIRouter()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


class SalesQueryRequest(BaseModel):
    """Question about the sales spreadsheets in a Drive folder"""
    model_config = ConfigDict(populate_by_name=True)

    query: str
    folder_id: Optional[str] = Field(default=None, alias="folderId")


def error_response(message: str) -> JSONResponse:
    """Uniform failure envelope; never carries an answer"""
    return JSONResponse({"error": message}, status_code=500, headers=CORS_HEADERS)


@router.options("/sales-bot")
def sales_bot_preflight():
    """CORS preflight: empty body, CORS headers only"""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post("/sales-bot")
def ask_sales_bot(request: SalesQueryRequest, settings: Settings = Depends(get_settings)):
    """Answer a natural-language question about the folder's sales data

    Runs in the worker threadpool; every Google and AI call blocks.
    """
    logger.info("Received query: %s", request.query)
    logger.info("Folder ID: %s", request.folder_id)

    try:
        context = SalesBotContext.from_settings(settings)
        answer = SalesBotService(context).answer(request.query, request.folder_id)
    except Exception as e:
        logger.error("Error: %s", e, exc_info=settings.DEBUG)
        return error_response(str(e) or "Unknown error")

    return JSONResponse({"answer": answer}, headers=CORS_HEADERS)
