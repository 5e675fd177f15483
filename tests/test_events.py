from unittest.mock import Mock, call

import pytest

from radiobus import EventBus


@pytest.fixture
def bus():
    return EventBus()


def test_trigger_calls_listeners_in_order(bus):
    order = []

    bus.on("foo", lambda *args: order.append(("first",) + args))
    bus.on("foo", lambda *args: order.append(("second",) + args))
    bus.trigger("foo", 1, 2)

    assert order == [("first", 1, 2), ("second", 1, 2)]


def test_all_listeners_get_the_event_name(bus, spy):
    bus.on("all", spy)
    bus.trigger("foo", 1)
    bus.trigger("bar")

    assert spy.call_args_list == [call("foo", 1), call("bar")]


def test_triggering_all_does_not_call_its_listeners_twice(bus, spy):
    bus.on("all", spy)
    bus.trigger("all", 1)

    spy.assert_called_once_with("all", 1)


def test_on_and_trigger_many_names(bus, spy):
    bus.on("foo bar", spy)
    bus.trigger("bar foo", 1)

    assert spy.call_args_list == [call(1), call(1)]


def test_on_mapping(bus):
    foo, bar = Mock(), Mock()

    bus.on({"foo": foo, "bar": bar})
    bus.trigger("foo").trigger("bar")

    foo.assert_called_once_with()
    bar.assert_called_once_with()


def test_off_by_name_callback_and_context(bus):
    context = object()
    first, second = Mock(), Mock()

    bus.on("foo", first, context)
    bus.on("foo", second)
    bus.on("bar", first)

    bus.off("foo", context=context)
    bus.trigger("foo").trigger("bar")
    first.assert_called_once_with()
    second.assert_called_once_with()

    bus.off(callback=first)
    assert not bus.has_listeners("bar")
    assert bus.has_listeners("foo")


def test_off_without_arguments_removes_everything(bus, spy):
    bus.on("foo", spy).on("all", spy)
    bus.off()

    bus.trigger("foo")

    spy.assert_not_called()
    assert not bus.has_listeners()


def test_once(bus, spy):
    bus.once("foo", spy)
    bus.trigger("foo", 1).trigger("foo", 2)

    spy.assert_called_once_with(1)
    assert not bus.has_listeners("foo")


def test_once_many_names_fire_separately(bus, spy):
    bus.once("foo bar", spy)
    bus.trigger("foo").trigger("bar").trigger("foo")

    assert spy.call_count == 2


def test_once_can_be_removed_by_its_original(bus, spy):
    bus.once("foo", spy)
    bus.off("foo", spy)

    bus.trigger("foo")

    spy.assert_not_called()


def test_removing_a_listener_while_triggering(bus):
    calls = []

    def first():
        calls.append("first")
        bus.off("foo", second)

    def second():
        calls.append("second")

    bus.on("foo", first)
    bus.on("foo", second)

    bus.trigger("foo")
    bus.trigger("foo")

    assert calls == ["first", "second", "first"]


def test_adding_a_listener_while_triggering(bus, spy):
    bus.on("foo", lambda: bus.on("foo", spy))

    bus.trigger("foo")
    spy.assert_not_called()

    bus.trigger("foo")
    spy.assert_called_once_with()


def test_listen_to_and_stop_listening(bus, spy):
    listener = EventBus()

    listener.listen_to(bus, "foo", spy)
    assert listener.is_listening_to(bus)

    bus.trigger("foo", 1)
    spy.assert_called_once_with(1)

    listener.stop_listening()
    bus.trigger("foo", 2)

    spy.assert_called_once_with(1)
    assert not listener.is_listening_to(bus)


def test_stop_listening_only_removes_own_listeners(bus, spy):
    own = Mock()
    listener = EventBus()

    bus.on("foo", spy)
    listener.listen_to(bus, "foo", own)
    listener.stop_listening(bus)

    bus.trigger("foo")

    spy.assert_called_once_with()
    own.assert_not_called()


def test_stop_listening_to_one_event(bus):
    foo, bar = Mock(), Mock()
    listener = EventBus()

    listener.listen_to(bus, {"foo": foo, "bar": bar})
    listener.stop_listening(bus, "foo")

    bus.trigger("foo").trigger("bar")

    foo.assert_not_called()
    bar.assert_called_once_with()
    assert listener.is_listening_to(bus)


def test_off_on_emitter_releases_the_listening(bus, spy):
    listener = EventBus()

    listener.listen_to(bus, "foo", spy)
    bus.off()

    assert not listener.is_listening_to(bus)


def test_listen_to_once(bus, spy):
    listener = EventBus()

    listener.listen_to_once(bus, "foo", spy)
    bus.trigger("foo", 1).trigger("foo", 2)

    spy.assert_called_once_with(1)
    assert not listener.is_listening_to(bus)


def test_listen_to_nothing_is_ignored(bus, spy):
    assert bus.listen_to(None, "foo", spy) is bus
    assert bus.listen_to(EventBus(), "foo") is bus


def test_trigger_without_a_name_is_ignored(bus, spy):
    bus.on("all", spy)
    bus.trigger("")
    bus.trigger(None)

    spy.assert_not_called()


def test_owner_tags_listen_to_subscriptions(bus, spy):
    owner = object()
    listener = EventBus(owner)

    listener.listen_to(bus, "foo", spy)
    bus.off(context=owner)
    bus.trigger("foo")

    spy.assert_not_called()
    assert not listener.is_listening_to(bus)


def test_bus_owns_itself_by_default(bus):
    assert bus.owner is bus
