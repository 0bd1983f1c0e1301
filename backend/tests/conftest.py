"""Shared fixtures: throwaway RSA keys and fake Google/AI clients"""

import json
from unittest.mock import Mock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from sales_bot.config import Settings
from sales_bot.models.sales import DocumentRef, ServiceCredential


HEADER_ROW = ["Data", "ID", "Produto", "Categoria", "Região", "Qtd", "Preço", "Receita"]


@pytest.fixture(scope="session")
def rsa_private_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_private_key):
    return rsa_private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode("ascii")


@pytest.fixture
def credential(private_key_pem):
    return ServiceCredential(
        client_email="sales-bot@alpha-insights.iam.gserviceaccount.com",
        private_key=private_key_pem,
    )


@pytest.fixture
def service_account_json(credential):
    return json.dumps({
        "type": "service_account",
        "client_email": credential.client_email,
        "private_key": credential.private_key,
    })


@pytest.fixture
def settings(service_account_json):
    return Settings(
        GOOGLE_SERVICE_ACCOUNT=service_account_json,
        LOVABLE_API_KEY="test-gateway-key",
        DEFAULT_FOLDER_ID=None,
        _env_file=None,
    )


def make_token_response(status_code=200, payload=None, text=""):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text or json.dumps(payload or {})
    response.json.return_value = payload if payload is not None else {}
    return response


def make_drive_service(files):
    """Fake Drive v3 resource returning one page of files"""
    drive = Mock()
    drive.files.return_value.list.return_value.execute.return_value = (
        {"files": files} if files is not None else {}
    )
    return drive


def make_sheets_service(values_by_id):
    """Fake Sheets v4 resource returning values per spreadsheet id"""
    sheets = Mock()

    def get(spreadsheetId, range):
        request = Mock()
        values = values_by_id.get(spreadsheetId)
        request.execute.return_value = {"values": values} if values is not None else {}
        return request

    sheets.spreadsheets.return_value.values.return_value.get.side_effect = get
    return sheets


def make_completion(content):
    message = Mock()
    message.content = content
    choice = Mock()
    choice.message = message
    completion = Mock()
    completion.choices = [choice]
    return completion


@pytest.fixture
def jan_feb_sheets():
    """Jan: two valid rows. Feb: one valid row and one six-cell row."""
    documents = [DocumentRef(id="sheet-jan", name="Jan"), DocumentRef(id="sheet-feb", name="Feb")]
    values = {
        "sheet-jan": [
            HEADER_ROW,
            ["2024-01-05", "T001", "Notebook Pro", "Computadores", "Sudeste", "2", "4500.00", "9000.00"],
            ["2024-01-09", "T002", "Mouse Gamer", "Periféricos", "Sul", "10", "150.00", "1500.00"],
        ],
        "sheet-feb": [
            HEADER_ROW,
            ["2024-02-02", "T003", "Monitor 27", "Monitores", "Nordeste", "3", "1800.00", "5400.00"],
            ["2024-02-03", "T004", "Teclado", "Periféricos", "Norte", "1"],
        ],
    }
    return documents, values
