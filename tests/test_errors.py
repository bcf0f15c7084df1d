"""Tests for tasklane.errors — exception hierarchy."""

from tasklane.errors import ConfigurationError, NotFound, RequestFailure, TasklaneError


class TestHierarchy:
    def test_all_derive_from_base(self) -> None:
        assert issubclass(ConfigurationError, TasklaneError)
        assert issubclass(RequestFailure, TasklaneError)
        assert issubclass(NotFound, TasklaneError)


class TestRequestFailure:
    def test_message_is_str(self) -> None:
        exc = RequestFailure("not found", status=404, body={"error": "not found"})
        assert str(exc) == "not found"
        assert exc.message == "not found"
        assert exc.status == 404
        assert exc.body == {"error": "not found"}

    def test_network_failure_defaults(self) -> None:
        exc = RequestFailure("connection refused")
        assert exc.status is None
        assert exc.body == {}


class TestNotFound:
    def test_carries_path(self) -> None:
        exc = NotFound("/nowhere")
        assert exc.path == "/nowhere"
        assert "/nowhere" in str(exc)
