"""Failures of a single search attempt.

Every error carries a user-facing ``message`` that is shown verbatim in the
error panel. None of them are retried.
"""


class CountryExplorerError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CountryExplorerError):
    """The search input was empty."""

    def __init__(self, message: str = "Please enter a country name"):
        super().__init__(message)


class NotFoundError(CountryExplorerError):
    def __init__(self, name: str):
        super().__init__(
            f'Country "{name}" not found. Please check the spelling and try again.'
        )
        self.name = name


class ApiError(CountryExplorerError):
    def __init__(self, status_code: int, reason: str):
        super().__init__(f"API Error: {status_code} - {reason}")
        self.status_code = status_code
        self.reason = reason


class EmptyResultError(CountryExplorerError):
    def __init__(self):
        super().__init__("No data returned from API")


class NetworkError(CountryExplorerError):
    def __init__(self, detail: str = ""):
        super().__init__(
            "Network error. Please check your internet connection and make sure "
            "this service can reach the country data API."
        )
        self.detail = detail
