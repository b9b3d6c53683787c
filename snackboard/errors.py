"""Domain errors raised by services and rendered by the API error handlers."""

from typing import Optional


class SnackboardError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"message": self.message}


class NotFoundError(SnackboardError):
    status_code = 404


class FieldValidationError(SnackboardError):
    """Input rejected; `field` names the offending request field (camelCase)."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.field:
            body["field"] = self.field
        return body


class AuthenticationError(SnackboardError):
    status_code = 401


class PermissionDeniedError(SnackboardError):
    status_code = 403
