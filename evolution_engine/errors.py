# evolution_engine/errors.py


class CatalogError(Exception):
    """Base class for failures while talking to the PokéAPI catalog."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class NotFoundError(CatalogError):
    """The requested species, chain or creature does not exist (HTTP 404)."""


class CatalogUnavailableError(CatalogError):
    """Network error, timeout or non-404 HTTP error."""


class MalformedRecordError(CatalogError):
    """A catalog record is missing keys the client depends on."""
