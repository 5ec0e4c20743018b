from typing import Any, Sequence


class ApplicationError(Exception):
    """General application error"""

    http_code: int = 500
    error_code: int
    error: str

    def __init__(self, details: Any | None = None):
        self.details = details
        self.error = self.error
        if details:
            self.error += f": {details}"
        super().__init__(self.error)


def field_errors(errors: Sequence[Any]) -> list[dict[str, Any]]:
    """Reduce pydantic error dicts to the JSON-safe fields exposed to clients"""
    return [
        {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
        for e in errors
    ]
