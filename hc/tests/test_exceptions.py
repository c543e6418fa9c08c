"""Tests for the error taxonomy, the error response shape and logging setup."""

import logging

import pytest

from hc import exceptions
from hc.exceptions import ErrorResponse
from hc.logger import configure_logging, get_logger


class TestErrorResponse:

    def test_from_message(self):
        assert ErrorResponse.from_message("Something went wrong").messages == ["Something went wrong"]

    def test_from_messages(self):
        response = ErrorResponse.from_messages(["Error 1", "Error 2"])

        assert response.model_dump() == {"messages": ["Error 1", "Error 2"]}

    def test_message_is_not_escaped(self):
        message = "Error: Invalid input <script>alert('xss')</script>"

        assert ErrorResponse.from_message(message).messages == [message]


class TestErrorKinds:

    @pytest.mark.parametrize("error,status_code", [
        (exceptions.NotFoundError("folder"), 404),
        (exceptions.ValidationError("bad"), 400),
        (exceptions.StorageError("failed to create folder"), 500),
        (exceptions.TimeoutError(), 500),
        (exceptions.NetworkError("refused"), 500),
        (exceptions.TransportError("bad method"), 500),
    ])
    def test_status_codes(self, error, status_code):
        assert error.status_code == status_code
        assert len(error.messages) == 1

    def test_kinds_are_distinct(self):
        assert not issubclass(exceptions.NotFoundError, exceptions.StorageError)
        assert not issubclass(exceptions.ValidationError, exceptions.StorageError)
        assert issubclass(exceptions.TimeoutError, exceptions.ProxyError)
        assert not issubclass(exceptions.NetworkError, exceptions.TimeoutError)

    def test_storage_error_keeps_cause(self):
        cause = RuntimeError("disk full")

        error = exceptions.StorageError("failed to create request", cause)

        assert error.cause is cause
        assert error.message == "failed to create request: disk full"

    def test_validation_error_with_several_messages(self):
        error = exceptions.ValidationError(["first", "second"])

        assert error.messages == ["first", "second"]
        assert str(error) == "first; second"


class TestLogging:

    @pytest.fixture
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_configure_logging(self, restore_root_logger):
        configure_logging("debug")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger(self):
        assert get_logger("hc.storage").name == "hc.storage"
