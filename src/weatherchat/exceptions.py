"""Exceptions for weatherchat."""


class WeatherChatError(Exception):
    """Base exception for all weatherchat errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ModelServiceError(WeatherChatError):
    """Raised when the model API or its transport fails."""

    pass
