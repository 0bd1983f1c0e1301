"""API v1 routes"""
from fastapi import APIRouter

from sales_bot.api.v1 import sales_bot

router = APIRouter()

router.include_router(sales_bot.router, tags=["sales-bot"])
