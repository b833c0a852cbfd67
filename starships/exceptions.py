class StarshipError(Exception):
    pass


class ValidationFailed(StarshipError):
    """Payload failed field rules. Carries the bound form for redisplay."""

    def __init__(self, form):
        super().__init__("Starship payload failed validation")
        self.form = form


class NotFound(StarshipError):
    pass


class BadRequest(StarshipError):
    pass


class ConcurrencyConflict(StarshipError):
    """A versioned write matched no row: deleted or changed since it was read."""


class SeedFetchFailed(StarshipError):
    pass


class SeedFallbackFailed(StarshipError):
    pass
