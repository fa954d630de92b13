from util.error_codes import UNEXPECTED_HTTP_STATUS
from util.errors import ExternalServiceError


class ApiError(ExternalServiceError):
    """A non-zero 'errcode' reported by the platform, code and message kept verbatim."""

    def __init__(self, error_code: int, error_message: str):
        super().__init__(error_message, error_code)

    @property
    def error_message(self) -> str:
        return self.message


class UnexpectedStatusError(ExternalServiceError):
    status_code: int

    def __init__(self, status_code: int, reason: str | None = None):
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"HTTP status: {status}", UNEXPECTED_HTTP_STATUS)
        self.status_code = status_code
