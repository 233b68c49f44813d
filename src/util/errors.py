from typing import Any


class ServiceError(Exception):
    """
    Base for every failure this service names on purpose.

    Each error carries a numeric code (see `util.error_codes`), the HTTP status it maps to
    when it reaches the API boundary, and optional structured details for the error reports.
    """

    error_code: int
    http_status: int
    emoji: str
    details: Any | None

    def __init__(
        self,
        message: str,
        error_code: int,
        http_status: int = 500,
        emoji: str = "⚠️",
        details: Any | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.http_status = http_status
        self.emoji = emoji
        self.details = details

    def __str__(self) -> str:
        return self.to_log_string()

    @property
    def message(self) -> str:
        return super().__str__()

    def to_log_string(self) -> str:
        cause_str = f" # Caused by: {self.__cause__}" if self.__cause__ else ""
        return f"[{self.emoji} E{self.error_code}] {self.message}{cause_str}"

    def to_api_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "error_code": self.error_code,
            "message": str(self),
            "emoji": self.emoji,
        }
        if self.details is not None:
            result["details"] = self.details
        return result


class ExternalServiceError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "🌐", details: Any | None = None):
        super().__init__(message, error_code, http_status = 502, emoji = emoji, details = details)


class ConfigurationError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚙️"):
        super().__init__(message, error_code, http_status = 500, emoji = emoji)


class InternalError(ServiceError):
    def __init__(self, message: str, error_code: int, emoji: str = "⚠️", details: Any | None = None):
        super().__init__(message, error_code, http_status = 500, emoji = emoji, details = details)
