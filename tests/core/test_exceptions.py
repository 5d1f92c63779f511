"""Tests for the exception hierarchy and HTTP status mapping."""

import pytest

from action_tracker.core.exceptions import (
    ActionTrackerError,
    ConfigurationError,
    ConflictError,
    HttpStatusMapper,
    ResourceNotFoundError,
    create_error_response,
    get_http_status_code,
)
from action_tracker.platform.actions import (
    ActionAlreadyClosedError,
    ActionNotFoundError,
    ActionPersistenceError,
    ActionStatus,
    ServiceNotRecognizedError,
)


class TestHttpStatusMapping:
    """Test status codes resolved through the exception MRO."""

    @pytest.mark.parametrize("exception, expected", [
        (ActionNotFoundError("abc"), 404),
        (ActionAlreadyClosedError("abc", ActionStatus.FAILED), 409),
        (ServiceNotRecognizedError("badService"), 409),
        (ActionPersistenceError("failed"), 500),
        (ConfigurationError("bad config"), 500),
        (ActionTrackerError("generic"), 500),
        (RuntimeError("unexpected"), 500),
    ])
    def test_status_codes(self, exception, expected):
        assert get_http_status_code(exception) == expected

    def test_register_custom_mapping(self):
        class TeapotError(ConflictError):
            pass

        mapper = HttpStatusMapper(status_map={ConflictError: 409, ResourceNotFoundError: 404})
        assert mapper.get_status_code(TeapotError("tea")) == 409

        mapper.register(TeapotError, 418)
        assert mapper.get_status_code(TeapotError("tea")) == 418


class TestExceptionPayloads:
    """Test messages and details."""

    def test_error_response_is_message_only(self):
        assert create_error_response(ActionNotFoundError("abc")) == {"message": "actionId abc not found"}

    def test_to_dict(self):
        error = ServiceNotRecognizedError("badService")

        data = error.to_dict()

        assert data["message"] == "could not recognize service badService on registry"
        assert data["type"] == "ServiceNotRecognizedError"
        assert data["details"]["service"] == "badService"

    def test_persistence_error_details(self):
        original = OSError("connection reset")

        error = ActionPersistenceError(str(original), operation="update", action_id="abc", original_error=original)

        assert error.message == "connection reset"
        assert error.details == {
            "operation": "update",
            "action_id": "abc",
            "original_error_type": "OSError",
        }
        assert error.error_code == "ACTION_PERSISTENCE_FAILED"
