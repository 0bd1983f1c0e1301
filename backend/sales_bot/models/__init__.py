"""Models package"""
from sales_bot.models.sales import (
    BearerToken,
    ConsolidatedTable,
    DocumentRef,
    SalesBotContext,
    SalesRow,
    ServiceCredential,
)

__all__ = [
    "BearerToken",
    "ConsolidatedTable",
    "DocumentRef",
    "SalesBotContext",
    "SalesRow",
    "ServiceCredential",
]
