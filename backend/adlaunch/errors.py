"""
API error taxonomy. Route handlers raise these; main.py maps them to the envelope.
"""

SERVER_ERROR_MESSAGE = "서버 오류가 발생했습니다."
MISSING_FIELDS_MESSAGE = "필수 필드가 누락되었습니다."
INVALID_VALUE_MESSAGE = "허용되지 않는 값이 포함되어 있습니다."


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ApiError):
    """Required fields missing or body unparseable."""
    status_code = 400

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE):
        super().__init__(message)


class NotFoundError(ApiError):
    status_code = 404


class UpstreamError(ApiError):
    """Datastore or Google Ads call failed."""
    status_code = 500
