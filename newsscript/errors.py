"""Error taxonomy for the news proxy."""

import typing as t


class NewsError(Exception):
    """Base error carrying an HTTP status and a JSON error body."""

    status_code: int = 500
    message: str = "Server exception"

    def payload(self) -> dict[str, t.Any]:
        """Return the JSON body sent to the client.

        :return: Error body with at least an ``error`` key.
        """
        return {"error": self.message}


class ConfigurationError(NewsError):
    """The provider credential is not configured."""

    message = "Missing GEMINI_API_KEY on server"

    def __init__(self) -> None:
        super().__init__(self.message)


class ProviderError(NewsError):
    """The provider answered with a non-success status."""

    message = "Gemini error"

    def __init__(self, status_code: int, details: t.Any) -> None:
        super().__init__(f"{self.message} ({status_code})")
        self.status_code = status_code
        self.details = details

    def payload(self) -> dict[str, t.Any]:
        return {"error": self.message, "details": self.details}


class ParseError(NewsError):
    """The provider text holds no decodable JSON array."""

    message = "Gemini returned non-JSON"

    def __init__(self, raw: str, reason: str = "") -> None:
        super().__init__(reason or self.message)
        self.raw = raw
        self.reason = reason

    def payload(self) -> dict[str, t.Any]:
        return {"error": self.message, "raw": self.raw}


class StoryValidationError(NewsError):
    """Decoded records do not match the story schema."""

    message = "Gemini returned malformed stories"

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"{self.message}: {', '.join(fields)}")
        self.fields = fields

    def payload(self) -> dict[str, t.Any]:
        return {"error": self.message, "fields": self.fields}


class InvalidContinent(NewsError):
    """The requested continent is not one of the fixed regions."""

    status_code = 400
    message = "Unknown continent"

    def __init__(self, continent: str) -> None:
        super().__init__(f"{self.message}: {continent}")
        self.continent = continent

    def payload(self) -> dict[str, t.Any]:
        return {"error": self.message, "continent": self.continent}


class MethodNotAllowed(NewsError):
    """The endpoint only serves GET (and OPTIONS preflight)."""

    status_code = 405
    message = "Method not allowed"

    def __init__(self) -> None:
        super().__init__(self.message)


class ServerException(NewsError):
    """An unexpected failure while serving a news request."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def payload(self) -> dict[str, t.Any]:
        return {"error": self.message, "message": self.detail}
