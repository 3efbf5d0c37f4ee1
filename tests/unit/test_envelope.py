"""Tests for response envelope classification and unwrapping."""

import pytest

from novu_changes._envelope import (
    ErrorDetails,
    MessagesDetails,
    Success,
    decode_envelope,
    unwrap,
)
from novu_changes._exceptions import (
    APIError,
    NotFoundError,
    NovuError,
    ValidationError,
)


class TestDecodeEnvelope:
    def test_page_body_is_success(self):
        body = {"page": 1, "totalCount": 2, "pageSize": 10, "data": []}
        env = decode_envelope(body)
        assert env == Success(body)

    def test_error_shape(self):
        env = decode_envelope(
            {"statusCode": 404, "message": "Change not found", "error": "Not Found"}
        )
        assert env == ErrorDetails(status_code=404, message="Change not found", error="Not Found")

    def test_messages_shape(self):
        env = decode_envelope(
            {"statusCode": 400, "message": ["limit must be a number"], "error": "Bad Request"}
        )
        assert isinstance(env, MessagesDetails)
        assert env.messages == ["limit must be a number"]
        assert env.message == "limit must be a number"
        assert env.error == "Bad Request"

    def test_error_without_error_field(self):
        env = decode_envelope({"statusCode": 500, "message": "boom"})
        assert isinstance(env, ErrorDetails)
        assert env.error is None

    def test_non_integer_status_is_success(self):
        body = {"statusCode": "oops", "message": "x"}
        assert decode_envelope(body) == Success(body)

    @pytest.mark.parametrize("body", [[1, 2], 5, None, "text", {"data": 3}])
    def test_other_bodies_are_success(self, body):
        assert decode_envelope(body) == Success(body)

    def test_empty_messages_fall_back_to_error(self):
        env = MessagesDetails(status_code=400, messages=[], error="Bad Request")
        assert env.message == "Bad Request"


class TestUnwrap:
    def test_success_returns_payload(self):
        assert unwrap(Success({"a": 1})) == {"a": 1}

    def test_error_raises_mapped_class(self):
        details = ErrorDetails(status_code=404, message="Change not found")
        with pytest.raises(NotFoundError) as exc_info:
            unwrap(details, method="GET", path="/changes/x")
        assert exc_info.value.details is details
        assert exc_info.value.status_code == 404
        assert exc_info.value.path == "/changes/x"
        assert exc_info.value.messages == ["Change not found"]

    def test_messages_raise_with_all_messages(self):
        details = MessagesDetails(status_code=422, messages=["a", "b"])
        with pytest.raises(ValidationError) as exc_info:
            unwrap(details)
        assert exc_info.value.messages == ["a", "b"]

    def test_unknown_status_is_api_error(self):
        with pytest.raises(APIError):
            unwrap(ErrorDetails(status_code=418, message="teapot"))

    def test_every_failure_is_novu_error(self):
        with pytest.raises(NovuError):
            unwrap(ErrorDetails(status_code=503, message="down"))
