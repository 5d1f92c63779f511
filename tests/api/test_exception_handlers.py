"""Tests for validation error messages."""

import pytest
from fastapi.exceptions import RequestValidationError

from action_tracker.api import format_validation_error


def message_for(*errors):
    return format_validation_error(RequestValidationError(list(errors)))


class TestFormatValidationError:
    """Test the wording of request validation failures."""

    def test_missing_property_is_reported_on_parent(self):
        message = message_for({"type": "missing", "loc": ("body", "service"), "msg": "Field required"})

        assert message == "request.body should have required property 'service'"

    def test_extra_property_is_reported_on_parent(self):
        message = message_for({"type": "extra_forbidden", "loc": ("body", "other"), "msg": "Extra inputs are not permitted"})

        assert message == "request.body should NOT have additional properties"

    def test_lower_bound(self):
        message = message_for({
            "type": "greater_than_equal",
            "loc": ("query", "limit"),
            "msg": "Input should be greater than or equal to 1",
            "ctx": {"ge": 1},
        })

        assert message == "request.query.limit should be >= 1"

    @pytest.mark.parametrize("expected,allowed", [
        ("'asc' or 'desc'", "asc, desc"),
        ("'active', 'completed', 'failed' or 'canceled'", "active, completed, failed, canceled"),
    ])
    def test_enum_lists_allowed_values(self, expected, allowed):
        message = message_for({
            "type": "enum",
            "loc": ("query", "status", 0),
            "msg": f"Input should be {expected}",
            "ctx": {"expected": expected},
        })

        assert message == f"request.query.status[0] should be equal to one of the allowed values: {allowed}"

    def test_object_type(self):
        message = message_for({"type": "dict_type", "loc": ("body", "metadata"), "msg": "Input should be a valid dictionary"})

        assert message == "request.body.metadata should be object"

    def test_path_is_reported_as_params(self):
        message = message_for({"type": "uuid_parsing", "loc": ("path", "actionId"), "msg": "Input should be a valid UUID"})

        assert message == 'request.params.actionId should match format "uuid"'

    def test_value_error_prefix_is_dropped(self):
        message = message_for({
            "type": "value_error",
            "loc": ("body",),
            "msg": "Value error, should NOT have fewer than 1 properties",
        })

        assert message == "request.body should NOT have fewer than 1 properties"

    def test_unknown_type_keeps_pydantic_reason(self):
        message = message_for({"type": "bool_type", "loc": ("body", "flag"), "msg": "Input should be a valid boolean"})

        assert message == "request.body.flag Input should be a valid boolean"

    def test_no_errors(self):
        assert message_for() == "request validation failed"
