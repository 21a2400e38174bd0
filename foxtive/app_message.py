"""Application messages that carry an HTTP status and double as exceptions."""

from __future__ import annotations

import logging
from enum import Enum, auto
from http import HTTPStatus

_logger = logging.getLogger(__name__)


class MessageKind(Enum):
    """The kinds of message an application can produce."""

    UNAUTHORIZED = auto()
    FORBIDDEN = auto()
    INTERNAL_SERVER_ERROR = auto()
    ERROR_MESSAGE = auto()
    MISSING_ENVIRONMENT_VARIABLE = auto()
    INTERNAL_SERVER_ERROR_MESSAGE = auto()
    REDIRECT = auto()
    SUCCESS = auto()
    WARNING = auto()
    UNAUTHORIZED_MESSAGE = auto()
    FORBIDDEN_MESSAGE = auto()
    ENTITY_NOT_FOUND = auto()


_STATUS_BY_KIND = {
    MessageKind.SUCCESS: HTTPStatus.OK,
    MessageKind.WARNING: HTTPStatus.BAD_REQUEST,
    MessageKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    MessageKind.UNAUTHORIZED_MESSAGE: HTTPStatus.UNAUTHORIZED,
    MessageKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
    MessageKind.FORBIDDEN_MESSAGE: HTTPStatus.FORBIDDEN,
    MessageKind.ENTITY_NOT_FOUND: HTTPStatus.NOT_FOUND,
    MessageKind.REDIRECT: HTTPStatus.FOUND,
}

_FIXED_TEXT = {
    MessageKind.UNAUTHORIZED: "Unauthorized",
    MessageKind.FORBIDDEN: "Forbidden",
    MessageKind.INTERNAL_SERVER_ERROR: "Internal Server Error",
}


class AppMessage(Exception):
    """A message with a kind and an HTTP status; raise it to report an error."""

    def __init__(
        self,
        kind: MessageKind,
        text: str = "",
        status: HTTPStatus | int | None = None,
    ) -> None:
        self.kind = kind
        self.text = text
        if kind is MessageKind.ERROR_MESSAGE and status is not None:
            self._status = HTTPStatus(status)
        else:
            self._status = _STATUS_BY_KIND.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR)
        super().__init__(self.message())

    @classmethod
    def unauthorized(cls) -> AppMessage:
        return cls(MessageKind.UNAUTHORIZED)

    @classmethod
    def forbidden(cls) -> AppMessage:
        return cls(MessageKind.FORBIDDEN)

    @classmethod
    def internal_server_error(cls) -> AppMessage:
        return cls(MessageKind.INTERNAL_SERVER_ERROR)

    @classmethod
    def error_message(cls, text: str, status: HTTPStatus | int) -> AppMessage:
        return cls(MessageKind.ERROR_MESSAGE, text, status)

    @classmethod
    def missing_environment_variable(cls, name: str, reason: object) -> AppMessage:
        return cls(
            MessageKind.MISSING_ENVIRONMENT_VARIABLE,
            f"Missing environment variable '{name}': {reason}",
        )

    @classmethod
    def internal_server_error_message(cls, text: str) -> AppMessage:
        return cls(MessageKind.INTERNAL_SERVER_ERROR_MESSAGE, text)

    @classmethod
    def redirect(cls, location: str) -> AppMessage:
        return cls(MessageKind.REDIRECT, location)

    @classmethod
    def success(cls, text: str) -> AppMessage:
        return cls(MessageKind.SUCCESS, text)

    @classmethod
    def warning(cls, text: str) -> AppMessage:
        return cls(MessageKind.WARNING, text)

    @classmethod
    def unauthorized_message(cls, text: str) -> AppMessage:
        return cls(MessageKind.UNAUTHORIZED_MESSAGE, text)

    @classmethod
    def forbidden_message(cls, text: str) -> AppMessage:
        return cls(MessageKind.FORBIDDEN_MESSAGE, text)

    @classmethod
    def entity_not_found(cls, entity: str) -> AppMessage:
        return cls(MessageKind.ENTITY_NOT_FOUND, entity)

    @classmethod
    def from_exception(cls, error: BaseException) -> AppMessage:
        """Return the error itself if it is a message, else wrap it as a 500."""
        if isinstance(error, AppMessage):
            return error
        return cls.error_message(str(error), HTTPStatus.INTERNAL_SERVER_ERROR)

    def status_code(self) -> HTTPStatus:
        return self._status

    def message(self) -> str:
        fixed = _FIXED_TEXT.get(self.kind)
        if fixed is not None:
            return fixed
        if self.kind is MessageKind.ENTITY_NOT_FOUND:
            return f"Such {self.text} does not exist"
        return self.text

    def is_success(self) -> bool:
        return self.kind is MessageKind.SUCCESS

    def is_error(self) -> bool:
        return not self.is_success()

    def log(self) -> None:
        """Log at info level for successes and error level otherwise."""
        if self.is_success():
            _logger.info("%s", self.message())
        else:
            _logger.error("%s", self.message())

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"AppMessage({self.kind.name}, {self.message()!r}, {int(self._status)})"