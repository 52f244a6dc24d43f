"""Exception taxonomy shared by the engine, the store and the HTTP layer."""


class GuessGameError(Exception):
    """Base class for errors raised by the game and the leaderboard."""

    status_code = 500


class ValidationError(GuessGameError, ValueError):
    """Malformed input. Never retried."""

    status_code = 400


class InvalidSubmission(ValidationError):
    pass


class NotFoundError(GuessGameError):
    status_code = 404


class UnknownEntity(NotFoundError):
    pass


class NoEntitiesAvailable(NotFoundError):
    pass


class ConflictError(GuessGameError):
    """Rejected without touching the session state."""

    status_code = 409


class DuplicateGuess(ConflictError):
    pass


class GameAlreadyOver(ConflictError):
    pass


class WriteNotAllowed(GuessGameError):
    status_code = 401


class StorageUnavailable(GuessGameError):
    status_code = 503


class CatalogUnavailable(GuessGameError):
    status_code = 503


class CatalogAuthenticationError(CatalogUnavailable):
    """The catalog API refused the access token (HTTP 401)."""


class InvalidCatalog(CatalogUnavailable):
    """The roster received from the provider is inconsistent, e.g. duplicate ids."""
