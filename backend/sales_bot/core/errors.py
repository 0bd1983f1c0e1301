"""
Pipeline errors.

Every stage raises a subclass of SalesBotError. The route catches them once
and turns the message into the ``{"error": ...}`` envelope.
"""


class SalesBotError(Exception):
    """Base class for failures raised by the sales bot pipeline"""
    pass


class ConfigurationError(SalesBotError):
    """Raised when a required secret or request setting is absent"""
    pass


class CredentialError(SalesBotError):
    """Raised when the service account cannot be parsed or used for signing"""
    pass


class TokenExchangeError(SalesBotError):
    """Raised when the OAuth endpoint does not hand back an access token"""
    pass


class NoDocumentsFoundError(SalesBotError):
    """Raised when the target folder holds no spreadsheets"""
    pass


class SheetRetrievalError(SalesBotError):
    """Raised when reading a spreadsheet's values fails"""
    pass


class CompletionError(SalesBotError):
    """Raised when the chat-completion endpoint returns a non-success status"""
    pass
