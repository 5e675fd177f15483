"""
The EventBus class.

A classic observer: any number of listeners per event name, called in the
order they were added. Listeners of the special ``all`` event hear every
event, with its name passed first.
"""

import functools
import typing
from collections import abc

import attr

from .handlers import RunOnce, filters_match
from .names import fan_out, registration_args

ALL = "all"


def _listen_args(name, callback) -> tuple:
    # listen_to has no context; a mapping brings its own callbacks
    return () if isinstance(name, abc.Mapping) else (callback,)


@attr.s(auto_attribs=True, eq=False)
class Listening:
    """Bookkeeping for one EventBus listening to another via listen_to."""

    emitter: "EventBus"
    listener: "EventBus"
    count: int = 0


@attr.s(auto_attribs=True, frozen=True, eq=False)
class Listener:
    """A callback subscribed to an event name."""

    callback: typing.Callable
    context: typing.Any = None
    original: typing.Optional[typing.Callable] = None
    listening: typing.Optional[Listening] = None

    def matches(self, callback=None, context=None) -> bool:
        return filters_match(self, callback, context)


class EventBus:
    """
    Publish/subscribe helper. Subclass it, or hold one, to emit events.

        >>> bus = EventBus()
        >>> _ = bus.on('ping', lambda who: print('pong,', who))
        >>> _ = bus.on('all', lambda name, *args: print('heard', name))
        >>> _ = bus.trigger('ping', 'you')
        pong, you
        heard ping
    """

    METHODS = (
        "on",
        "once",
        "off",
        "trigger",
        "listen_to",
        "listen_to_once",
        "stop_listening",
    )

    def __init__(self, owner: typing.Any = None):
        """
        Keyword Arguments:
            owner {any} -- The object this bus listens on behalf of; the context
                           of its listen_to subscriptions. (default: the bus itself)
        """

        self.owner = self if owner is None else owner
        self._events = {}  # type: typing.Dict[str, typing.List[Listener]]
        self._listening_to = {}  # type: typing.Dict[int, Listening]

    @property
    def event_bus(self) -> "EventBus":
        """The bus that actually stores subscriptions for this emitter."""
        return self

    def has_listeners(self, name: typing.Optional[str] = None) -> bool:
        """Whether anything listens to `name`, or to any event at all."""

        if name is None:
            return bool(self._events)

        return bool(self._events.get(name))

    def is_listening_to(self, emitter) -> bool:
        return id(emitter.event_bus) in self._listening_to

    def on(
        self,
        name,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ):
        """Subscribes `callback` to one or more events.

        Arguments:
            name {str|dict} -- An event name, space-separated event names, or a
                               mapping of event names to callbacks.

        Keyword Arguments:
            callback {callable} -- Called with the event's arguments. (default: {None})
            context {any} -- Tag the subscription can later be removed by. (default: {None})

        Returns:
            EventBus -- This same bus.
        """

        if fan_out(self.on, name, *registration_args(name, callback, context)) is not None:
            return self

        self._add(name, Listener(callback, context))
        return self

    def once(
        self,
        name,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ):
        """Like on, but the subscription is removed once it first fires."""

        if fan_out(self.once, name, *registration_args(name, callback, context)) is not None:
            return self

        self._add(name, self._once_listener(self, name, callback, context))
        return self

    @staticmethod
    def _once_listener(emitter, name, callback, context, listening=None) -> Listener:
        if callback is None:
            return Listener(None)

        once = RunOnce(callback, lambda: emitter.off(name, once))
        return Listener(once, context, original=callback, listening=listening)

    def _add(self, name: str, listener: Listener):
        if listener.callback is None or not name:
            return

        if listener.listening is not None:
            listener.listening.count += 1

        self._events.setdefault(name, []).append(listener)

    def off(
        self,
        name=None,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ):
        """Unsubscribes every listener that matches all the filters given.

        With no arguments, every listener is removed.
        """

        if fan_out(self.off, name, *registration_args(name, callback, context)) is not None:
            return self

        names = [name] if name else list(self._events)

        for each in names:
            listeners = self._events.get(each)

            if not listeners:
                continue

            kept = []

            for listener in listeners:
                if listener.matches(callback, context):
                    self._release(listener)
                else:
                    kept.append(listener)

            if kept:
                self._events[each] = kept
            else:
                del self._events[each]

        return self

    @staticmethod
    def _release(listener: Listener):
        listening = listener.listening

        if listening is None:
            return

        listening.count -= 1

        if listening.count <= 0:
            listening.listener._listening_to.pop(id(listening.emitter), None)

    def trigger(self, name, *args):
        """Calls every listener of `name`, then every listener of ``all``.

        The listener lists are copied beforehand, so listeners may freely
        subscribe and unsubscribe while an event is being triggered.
        """

        if not name:
            return self

        if fan_out(self.trigger, name, *args) is not None:
            return self

        if name != ALL:
            for listener in list(self._events.get(name, ())):
                listener.callback(*args)

        for listener in list(self._events.get(ALL, ())):
            listener.callback(name, *args)

        return self

    def _listening(self, bus: "EventBus") -> Listening:
        listening = self._listening_to.get(id(bus))

        if listening is None:
            listening = self._listening_to[id(bus)] = Listening(bus, self)

        return listening

    def listen_to(
        self,
        emitter,
        name,
        callback: typing.Optional[typing.Callable] = None,
    ):
        """Subscribes to another emitter's events, keeping track of it so
        that stop_listening can undo it.

        Arguments:
            emitter {EventBus} -- Anything with an event bus (a Channel too).
            name {str|dict} -- Same as in on.

        Keyword Arguments:
            callback {callable} -- Same as in on. (default: {None})
        """

        if emitter is None:
            return self

        listen = functools.partial(self.listen_to, emitter)

        if fan_out(listen, name, *_listen_args(name, callback)) is not None:
            return self

        if callback is None or not name:
            return self

        bus = emitter.event_bus
        bus._add(name, Listener(callback, self.owner, listening=self._listening(bus)))
        return self

    def listen_to_once(
        self,
        emitter,
        name,
        callback: typing.Optional[typing.Callable] = None,
    ):
        """Like listen_to, but the subscription is removed once it first fires."""

        if emitter is None:
            return self

        listen = functools.partial(self.listen_to_once, emitter)

        if fan_out(listen, name, *_listen_args(name, callback)) is not None:
            return self

        if callback is None or not name:
            return self

        bus = emitter.event_bus
        bus._add(name, self._once_listener(bus, name, callback, self.owner, self._listening(bus)))
        return self

    def stop_listening(
        self,
        emitter=None,
        name=None,
        callback: typing.Optional[typing.Callable] = None,
    ):
        """Undoes listen_to subscriptions; all of them if given no arguments."""

        if emitter is not None:
            listenings = [self._listening_to.get(id(emitter.event_bus))]
        else:
            listenings = list(self._listening_to.values())

        for listening in listenings:
            if listening is None:
                break

            listening.emitter.off(name, callback, self.owner)

        return self
