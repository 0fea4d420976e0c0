"""Tests for route activation and teardown."""
import pytest

from review_core import constants
from review_core.domain_impl.support import activation_service
from review_core.exceptions import PayloadError, SourceReadError
from review_core.review_state import ReviewState

from conftest import FakeBridge, SAMPLE_TEXT

ROUTE = constants.ROUTE_ANY_JSON_PARSE


def test_inline_activation_loads_document():
    state = ReviewState()
    assert activation_service.enter(state, {"code": ROUTE, "payload": SAMPLE_TEXT}, FakeBridge())
    assert state.route == ROUTE
    assert state.document.loaded
    assert state.document.document == {"a": {"b": 1}, "c": [1, 2]}
    assert state.document.source_path is None


def test_file_activation_reads_through_bridge():
    bridge = FakeBridge(files={"/tmp/data.json": '{"n": "5"}'})
    state = ReviewState()
    activation_service.enter(state, {"code": ROUTE, "payload": [{"path": "/tmp/data.json"}]}, bridge)
    assert bridge.reads == ["/tmp/data.json"]
    assert state.document.document == {"n": 5}
    assert state.document.source_path == "/tmp/data.json"


def test_literal_unwrapping_can_be_disabled():
    state = ReviewState()
    activation_service.enter(state, {"code": ROUTE, "payload": '{"n": "5"}'}, FakeBridge(), unwrap_literals=False)
    assert state.document.document == {"n": "5"}


def test_other_routes_are_ignored():
    bridge = FakeBridge()
    state = ReviewState()
    assert not activation_service.enter(state, {"code": "something_else", "payload": "/x"}, bridge)
    assert state.route == ""
    assert bridge.reads == []


def test_action_object_with_attributes():
    class Action:
        code = ROUTE
        payload = "[1]"

    state = ReviewState()
    assert activation_service.enter(state, Action(), FakeBridge())
    assert state.document.document == [1]


def test_read_failure_propagates():
    state = ReviewState()
    with pytest.raises(SourceReadError):
        activation_service.enter(state, {"code": ROUTE, "payload": "/missing.json"}, FakeBridge())
    assert not state.document.loaded


def test_bad_payload_propagates():
    with pytest.raises(PayloadError):
        activation_service.enter(ReviewState(), {"code": ROUTE, "payload": []}, FakeBridge())


def test_enter_discards_previous_state():
    state = ReviewState()
    state.preview.open = True
    state.geometry.apply_delta(50, 50)
    activation_service.enter(state, {"code": ROUTE, "payload": "[]"}, FakeBridge())
    assert not state.preview.open
    assert state.geometry.as_tuple() == (700, 400)


def test_exit_resets_everything():
    state = ReviewState()
    activation_service.enter(state, {"code": ROUTE, "payload": "[1]"}, FakeBridge())
    state.error_message = "oops"
    activation_service.exit_view(state)
    assert state.route == ""
    assert state.document.document is None
    assert state.error_message == ""


def test_failing_host_reader_reaches_error_surface():
    from review_core.domain_impl.support import host_bridge_service

    def read_file(_path):
        raise RuntimeError("host service unavailable")

    bridge = host_bridge_service.HostBridge(read_file_fn=read_file)
    with pytest.raises(SourceReadError) as info:
        activation_service.enter(ReviewState(), {"code": ROUTE, "payload": "/x.json"}, bridge)
    assert "host service unavailable" in str(info.value)
