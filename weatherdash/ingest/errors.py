"""Error taxonomy for weather lookups and search input."""

NOT_FOUND_MESSAGE = "City not found. Please check the spelling and try again."
UNAUTHORIZED_MESSAGE = "Invalid API key. Please check your configuration."
NETWORK_MESSAGE = "Please check your internet connection and try again."
EMPTY_QUERY_MESSAGE = "Please enter a city name"


class WeatherError(Exception):
    """Base class for every failure surfaced to the search flow."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(WeatherError):
    """Raised locally when the search input is empty."""

    def __init__(self, message: str = EMPTY_QUERY_MESSAGE):
        super().__init__(message)


class CityNotFound(WeatherError):
    def __init__(self, message: str = NOT_FOUND_MESSAGE):
        super().__init__(message, status_code=404)


class Unauthorized(WeatherError):
    def __init__(self, message: str = UNAUTHORIZED_MESSAGE):
        super().__init__(message, status_code=401)


class ServiceError(WeatherError):
    """Any other non-success status from the weather service."""

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(
            message or f"Error fetching weather data ({status_code})",
            status_code=status_code,
        )


class NetworkFailure(WeatherError):
    """No response was received (connection error or timeout)."""

    def __init__(self, message: str = NETWORK_MESSAGE):
        super().__init__(message)
