"""
Named handler tables, as used by commands and requests.

Each name maps to exactly one handler; registering a name again replaces
its handler. The reserved name ``default`` answers for every name that has
no handler of its own.
"""

import typing

import attr

if typing.TYPE_CHECKING:
    from .channel import Channel

DEFAULT = "default"


class RunOnce:
    """
    Wraps a callable so that it runs at most once.

    `before` is called right before the first (and only) call goes
    through; it is where a handler deregisters itself. Later calls return
    the first call's result without calling anything.

        >>> calls = []
        >>> once = RunOnce(lambda x: calls.append(x) or len(calls), lambda: None)
        >>> once('a'), once('b')
        (1, 1)
        >>> calls
        ['a']
    """

    def __init__(self, original: typing.Callable, before: typing.Callable[[], typing.Any]):
        self.original = original
        self.called = False
        self.result = None
        self._before = before

    def __call__(self, *args):
        if self.called:
            return self.result

        self.called = True
        self._before()
        self.result = self.original(*args)

        return self.result

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.original)


def constant(value: typing.Any) -> typing.Callable:
    """Returns `value` itself if callable, else a callable that returns it."""

    if callable(value):
        return value

    def _constant(*_):
        return value

    return _constant


def filters_match(entry, callback=None, context=None) -> bool:
    """
    Whether a stored handler passes the removal filters given.

    An absent filter always passes. The callback filter may name either the
    stored callback or, for run-once wrappers, the callable it wraps.
    Bound methods compare equal when bound to the same object.
    """

    if callback is not None and callback != entry.callback:
        if entry.original is None or callback != entry.original:
            return False

    return context is None or context is entry.context


@attr.s(auto_attribs=True, frozen=True)
class HandlerEntry:
    """A registered handler.

    `original` is the wrapped callable when `callback` is a run-once
    wrapper, so that removals can name either of them.
    """

    callback: typing.Callable
    context: typing.Any
    original: typing.Optional[typing.Callable] = None

    def matches(
        self,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> bool:
        """Whether this entry passes the given removal filters."""
        return filters_match(self, callback, context)


class HandlerTable:
    """
    One-handler-per-name store backing either commands or requests.

    Missing handlers are never an error; they are only reported through
    the owning channel's debug log.

    The context stored with each handler is a tag that removals can filter
    by; handlers are not called with it. Bound methods bring their own
    receiver.
    """

    def __init__(self, channel: "Channel", kind: str):
        """
        Arguments:
            channel {radiobus.channel.Channel} -- The channel owning this table;
                                                  the default handler context.
            kind {str} -- What is stored here ('command' or 'request'), for
                          diagnostics.
        """

        self.channel = channel
        self.kind = kind
        self._entries = {}  # type: typing.Dict[str, HandlerEntry]

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> typing.List[str]:
        return list(self._entries)

    def get(self, name: str) -> typing.Optional[HandlerEntry]:
        return self._entries.get(name)

    def register(
        self,
        name: str,
        callback: typing.Callable,
        context: typing.Any = None,
        original: typing.Optional[typing.Callable] = None,
    ):
        """Stores a handler for `name`, replacing any previous one."""

        if name in self._entries:
            self.channel.debug_log("A {} was overwritten".format(self.kind), name)

        self._entries[name] = HandlerEntry(
            callback=callback,
            context=self.channel if context is None else context,
            original=original,
        )

    def register_once(
        self,
        name: str,
        callback: typing.Callable,
        context: typing.Any = None,
        original: typing.Any = None,
    ):
        """Stores a handler for `name` that removes itself when first called.

        `original` is what removals may name instead of the wrapper; it
        defaults to `callback`.
        """

        once = RunOnce(callback, lambda: self._forget(name, once))
        self.register(name, once, context, original=callback if original is None else original)

    def _forget(self, name: str, callback: typing.Callable):
        entry = self._entries.get(name)

        if entry is not None and entry.callback is callback:
            del self._entries[name]

    def invoke(self, name: str, args: tuple) -> typing.Any:
        """Calls the handler for `name`, or else the default handler.

        The default handler receives `name` ahead of `args`, so that it can
        tell what it is answering for.

        Returns:
            any -- The handler's result; None if nothing handled `name`.
        """

        entry = self._entries.get(name)

        if entry is not None:
            return entry.callback(*args)

        entry = self._entries.get(DEFAULT)

        if entry is not None:
            return entry.callback(name, *args)

        self.channel.debug_log("An unhandled {} was fired".format(self.kind), name)
        return None

    def clear(self):
        self._entries.clear()

    def remove(
        self,
        name: typing.Optional[str] = None,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> bool:
        """Removes handlers that match every filter given.

        With no arguments at all, empties the table. Without a name, every
        registered name is considered.

        Returns:
            bool -- Whether anything was removed.
        """

        if not name and callback is None and context is None:
            removed = bool(self._entries)
            self.clear()
            return removed

        names = [name] if name else list(self._entries)
        removed = False

        for each in names:
            entry = self._entries.get(each)

            if entry is not None and entry.matches(callback, context):
                del self._entries[each]
                removed = True

        if name and not removed:
            self.channel.debug_log(
                "Attempted to remove the unregistered {}".format(self.kind), name
            )

        return removed
