"""
Sales data models
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import List, Optional

from sales_bot.core.errors import ConfigurationError, CredentialError


TOKEN_LIFETIME_SECONDS = 3600

# Column names as the analyst prompt describes them
TABLE_HEADER = (
    "data",
    "id_transacao",
    "produto",
    "categoria",
    "regiao",
    "quantidade",
    "preco_unitario",
    "receita_total",
    "mes_origem",
)

SOURCE_COLUMNS = 8


@dataclass(frozen=True)
class ServiceCredential:
    """Service account identity used to sign token assertions"""
    client_email: str
    private_key: str

    @classmethod
    def from_json(cls, raw: str) -> "ServiceCredential":
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CredentialError(f"Invalid service account JSON: {e}") from e

        if not isinstance(info, dict):
            raise CredentialError("Invalid service account JSON: expected an object")

        client_email = info.get("client_email")
        private_key = info.get("private_key")
        if not client_email or not private_key:
            raise CredentialError("Service account JSON must include client_email and private_key")

        return cls(client_email=client_email, private_key=private_key)


@dataclass(frozen=True)
class BearerToken:
    value: str
    issued_at: datetime

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=TOKEN_LIFETIME_SECONDS)


@dataclass(frozen=True)
class DocumentRef:
    """A spreadsheet found in the target folder"""
    id: str
    name: str


@dataclass(frozen=True)
class SalesRow:
    date: str
    transaction_id: str
    product: str
    category: str
    region: str
    quantity: str
    unit_price: str
    total_revenue: str
    source_month: str

    @classmethod
    def from_cells(cls, cells: List[str], source_month: str) -> "SalesRow":
        """Build a row from the first eight raw cells, tagged with its source document"""
        return cls(*cells[:SOURCE_COLUMNS], source_month=source_month)

    def as_tuple(self):
        return (
            self.date,
            self.transaction_id,
            self.product,
            self.category,
            self.region,
            self.quantity,
            self.unit_price,
            self.total_revenue,
            self.source_month,
        )


@dataclass
class ConsolidatedTable:
    """All sales rows across the folder's spreadsheets, in discovery order"""
    rows: List[SalesRow] = field(default_factory=list)
    dropped_rows: int = 0

    def __len__(self) -> int:
        return len(self.rows)

    def to_csv(self) -> str:
        """Serialize as comma-joined lines with the fixed header first

        Cells are emitted verbatim and unquoted.
        """
        lines = [",".join(TABLE_HEADER)]
        lines.extend(",".join(str(cell) for cell in row.as_tuple()) for row in self.rows)
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class SalesBotContext:
    """Read-only secrets and endpoints handed to the pipeline"""
    credential: ServiceCredential
    ai_api_key: str
    ai_base_url: str
    ai_model: str
    default_folder_id: Optional[str] = None

    @classmethod
    def from_settings(cls, settings) -> "SalesBotContext":
        if not settings.has_required_secrets:
            raise ConfigurationError("Missing required secrets")

        return cls(
            credential=ServiceCredential.from_json(settings.GOOGLE_SERVICE_ACCOUNT),
            ai_api_key=settings.LOVABLE_API_KEY,
            ai_base_url=settings.AI_GATEWAY_URL,
            ai_model=settings.AI_MODEL,
            default_folder_id=settings.DEFAULT_FOLDER_ID,
        )
