from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Expected failure caused by the request (validation, unknown id)"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Store or transport failure; rendered as a 500 with the underlying message"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def error_body(base_error: Error) -> dict:
    """Render an Error as {error, code, message?, <details>}"""
    body = {"error": base_error.message, "code": base_error.code}
    if base_error.reason:
        body["message"] = base_error.reason
    if base_error.details:
        body.update(base_error.details)
    return body
