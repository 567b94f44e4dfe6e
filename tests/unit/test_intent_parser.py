"""Intent Translator: closed vocabulary, tolerant of absent or broken data."""

import pytest

from adapters.alexa.intent_parser import parse
from adapters.alexa.models import InboundRequest
from core.domain.commands import AddItem, Cancel, Help, Launch, Stop, Unknown


def _alexa(request: dict) -> dict:
    return {
        "version": "1.0",
        "session": {"new": True, "sessionId": "sess-1", "application": {"applicationId": "app"}, "user": {"userId": "u"}},
        "request": {"requestId": "req-1", "timestamp": "2024-01-27T10:00:00Z", "locale": "de-DE", **request},
    }


def _intent(name: str, slots: dict | None = None) -> dict:
    intent = {"name": name}
    if slots is not None:
        intent["slots"] = slots
    return _alexa({"type": "IntentRequest", "intent": intent})


def test_launch_request():
    assert parse(_alexa({"type": "LaunchRequest"})) == Launch()


def test_session_ended_request_is_stop():
    assert parse(_alexa({"type": "SessionEndedRequest", "reason": "USER_INITIATED"})) == Stop()


def test_add_item_with_slot():
    request = _intent("AddItemIntent", {"Item": {"name": "Item", "value": "Milch"}})
    assert parse(request) == AddItem("Milch")


@pytest.mark.parametrize(
    "slots",
    [None, {}, {"Item": {"name": "Item"}}, {"Item": {"name": "Item", "value": ""}}, {"Item": {"name": "Item", "value": 42}}],
)
def test_add_item_with_missing_or_empty_slot_keeps_empty_name(slots):
    assert parse(_intent("AddItemIntent", slots)) == AddItem("")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("AMAZON.HelpIntent", Help()),
        ("AMAZON.CancelIntent", Cancel()),
        ("AMAZON.StopIntent", Stop()),
        ("AMAZON.FallbackIntent", Unknown()),
        ("SomeRandomIntent", Unknown()),
    ],
)
def test_builtin_intents(name, expected):
    assert parse(_intent(name)) == expected


def test_flat_shape_is_accepted():
    payload = {"requestType": "IntentRequest", "intentName": "AddItemIntent", "slots": {"Item": "Eier"}, "sessionId": "s"}
    assert parse(payload) == AddItem("Eier")


def test_flat_shape_with_slot_objects():
    payload = {"requestType": "IntentRequest", "intentName": "AddItemIntent", "slots": {"Item": {"value": "Butter"}}}
    assert parse(payload) == AddItem("Butter")


def test_normalized_request_instance_is_accepted():
    request = InboundRequest(request_type="LaunchRequest")
    assert parse(request) == Launch()


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "LaunchRequest",
        42,
        [],
        {},
        {"request": {}},
        {"request": {"type": "IntentRequest"}},
        {"request": {"type": "IntentRequest", "intent": "nope"}},
        {"requestType": 7},
        {"requestType": "CanFulfillIntentRequest"},
    ],
)
def test_unrecognized_shapes_resolve_to_unknown(payload):
    assert parse(payload) == Unknown()


def test_session_and_locale_are_extracted():
    request = InboundRequest.from_payload(_alexa({"type": "LaunchRequest"}))
    assert request.session_id == "sess-1"
    assert request.locale == "de-DE"


@pytest.mark.parametrize("session_id, expected", [(42, "42"), ({"id": "x"}, None), (None, None)])
def test_odd_session_id_does_not_discard_the_command(session_id, expected):
    payload = {"requestType": "IntentRequest", "intentName": "AddItemIntent", "slots": {"Item": "Milch"}, "sessionId": session_id}

    assert parse(payload) == AddItem("Milch")
    assert InboundRequest.from_payload(payload).session_id == expected


def test_non_string_locale_is_dropped():
    request = InboundRequest.from_payload(_alexa({"type": "LaunchRequest", "locale": ["de-DE"]}))
    assert request.locale is None
    assert parse(_alexa({"type": "LaunchRequest", "locale": ["de-DE"]})) == Launch()
