from typing import Optional

DEFAULT_STATUS = 400


class ApiError(Exception):
    """Error with a caller-facing message and an optional HTTP status.

    The responder falls back to DEFAULT_STATUS when no status is attached.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def status(self) -> int:
        return self.status_code or DEFAULT_STATUS
