"""Tag usage errors"""

from typing import Any

from tagstore.errors.base import ApplicationError


class TagValidationError(ApplicationError):
    http_code = 400
    error_code = 1400
    error = "Tag failed validation"

    def __init__(self, details: list[dict[str, Any]]):
        # field errors are reported separately, keep the message short
        super().__init__()
        self.details = details
