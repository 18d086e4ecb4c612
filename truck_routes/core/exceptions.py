from __future__ import annotations


class AppError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class ConfigurationError(AppError):
    def __init__(self, message: str = "Configuration is invalid", details: dict | None = None) -> None:
        super().__init__(code="configuration_error", message=message, details=details)


class RoutesApiError(AppError):
    def __init__(self, message: str = "Routes API request failed", details: dict | None = None) -> None:
        super().__init__(code="routes_api_error", message=message, details=details)


class ValidationAppError(AppError):
    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        super().__init__(code="validation_error", message=message, details=details)
