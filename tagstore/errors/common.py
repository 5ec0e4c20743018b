"""Common application errors, may be raised from several services and repositories"""

from tagstore.errors.base import ApplicationError


class NotFoundError(ApplicationError):
    http_code = 404
    error_code = 1404
    error = "Not found"


class MalformedRequestError(ApplicationError):
    """Request body or path could not be parsed into the expected types"""

    http_code = 400
    error_code = 1422
    error = "Malformed request"

    def __init__(self, details: list[dict]):
        super().__init__()
        self.details = details
