"""
Google Auth Service - Service-account assertion signing and token exchange
"""

import base64
import json
import logging
import time
from datetime import datetime, timezone
from typing import Dict, Optional

import requests
from google.auth import crypt
from google.auth.credentials import Credentials as BaseCredentials

from sales_bot.core.errors import CredentialError, TokenExchangeError
from sales_bot.models.sales import TOKEN_LIFETIME_SECONDS, BearerToken, ServiceCredential

logger = logging.getLogger(__name__)

TOKEN_URI = "https://oauth2.googleapis.com/token"
JWT_BEARER_GRANT_TYPE = "urn:ietf:params:oauth:grant-type:jwt-bearer"
READONLY_SCOPES = (
    "https://www.googleapis.com/auth/spreadsheets.readonly",
    "https://www.googleapis.com/auth/drive.readonly",
)
ASSERTION_HEADER = {"alg": "RS256", "typ": "JWT"}


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64url_json(value: Dict) -> str:
    return _b64url(json.dumps(value, separators=(",", ":")).encode("utf-8"))


def build_signer(credential: ServiceCredential) -> crypt.Signer:
    """Load the credential's PEM private key into an RS256 signer"""
    try:
        return crypt.RSASigner.from_string(credential.private_key)
    except Exception as e:
        raise CredentialError(f"Invalid service account private key: {e}") from e


class AccessTokenCredentials(BaseCredentials):
    """Simple credentials class that only holds an access token"""

    def __init__(self, access_token: str):
        super().__init__()
        self.token = access_token

    def refresh(self, request):
        """Refresh is not supported; a new token is minted per request"""
        pass

    def apply(self, headers, token=None):
        """Apply the token to the authentication header"""
        headers['Authorization'] = f'Bearer {self.token}'

    def before_request(self, request, method, url, headers):
        self.apply(headers)

    @property
    def expired(self):
        return False

    @property
    def valid(self):
        return True


class GoogleAuthService:
    """Mints short-lived bearer tokens from a service account"""

    def __init__(
        self,
        credential: ServiceCredential,
        signer: Optional[crypt.Signer] = None,
        session: Optional[requests.Session] = None,
    ):
        self.credential = credential
        self.signer = signer or build_signer(credential)
        self._owns_session = session is None
        self.session = session or requests.Session()

    def close(self):
        """Release the HTTP session if this service created it"""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def build_claims(self, issued_at: int) -> Dict:
        return {
            "iss": self.credential.client_email,
            "scope": " ".join(READONLY_SCOPES),
            "aud": TOKEN_URI,
            "exp": issued_at + TOKEN_LIFETIME_SECONDS,
            "iat": issued_at,
        }

    def create_assertion(self, issued_at: Optional[int] = None) -> str:
        """
        Create a signed JWT assertion for the token endpoint

        Args:
            issued_at: Unix timestamp for ``iat`` (defaults to now)

        Returns:
            ``header.claims.signature``, each part base64url encoded
        """
        if issued_at is None:
            issued_at = int(time.time())

        signing_input = f"{_b64url_json(ASSERTION_HEADER)}.{_b64url_json(self.build_claims(issued_at))}"
        try:
            signature = self.signer.sign(signing_input.encode("ascii"))
        except Exception as e:
            raise CredentialError(f"Failed to sign service account assertion: {e}") from e

        return f"{signing_input}.{_b64url(signature)}"

    def exchange_assertion(self, assertion: str) -> str:
        """Trade a signed assertion for an access token"""
        try:
            response = self.session.post(
                TOKEN_URI,
                data={"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": assertion},
            )
        except requests.RequestException as e:
            raise TokenExchangeError(f"Token exchange failed: {e}") from e

        if not response.ok:
            logger.error("Token endpoint error: %s", response.text)
            raise TokenExchangeError(f"Token exchange failed: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise TokenExchangeError("Token endpoint returned invalid JSON") from e

        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            raise TokenExchangeError("Token endpoint response did not include an access_token")

        return access_token

    def get_access_token(self) -> BearerToken:
        """Sign a fresh assertion and exchange it; tokens are never reused"""
        issued_at = int(time.time())
        assertion = self.create_assertion(issued_at)
        token = self.exchange_assertion(assertion)
        logger.info("OAuth token obtained for %s", self.credential.client_email)
        return BearerToken(
            value=token,
            issued_at=datetime.fromtimestamp(issued_at, tz=timezone.utc),
        )
