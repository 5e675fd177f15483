"""
Name argument parsing shared by every messaging method.

The first argument of most methods (``on``, ``comply``, ``request``,
``stop_replying``...) may be a single name, several names separated by
whitespace, or a mapping of names to handlers. Anything but a single name
*fans out* into one call per name.

    >>> parse_names('ready')
    Single(name='ready')
    >>> parse_names('ready  set go')
    Many(names=('ready', 'set', 'go'))
    >>> parse_names({'ready': print})
    Mapping(entries=(('ready', <built-in function print>),))
    >>> parse_names('') is None
    True
"""

import re
import typing
from collections import abc

import attr

NAME_SPLITTER = re.compile(r"\s+")


@attr.s(auto_attribs=True, frozen=True)
class Single:
    """A lone name; handled by the caller itself."""

    name: str


@attr.s(auto_attribs=True, frozen=True)
class Many:
    """Several whitespace-separated names."""

    names: typing.Tuple[str, ...]


@attr.s(auto_attribs=True, frozen=True)
class Mapping:
    """Names paired with the value each one should be called with."""

    entries: typing.Tuple[typing.Tuple[str, typing.Any], ...]


ParsedNames = typing.Union[Single, Many, Mapping]


def parse_names(name: typing.Any) -> typing.Optional[ParsedNames]:
    """Resolves a raw name argument into one of the name variants.

    Returns None for empty input (None, empty string), which callers
    treat like any other single name.
    """

    if isinstance(name, abc.Mapping):
        return Mapping(tuple(name.items()))

    if not name:
        return None

    if not isinstance(name, str):
        return Single(name)

    names = NAME_SPLITTER.split(name.strip())

    if len(names) > 1:
        return Many(tuple(names))

    return Single(name)


def fan_out(
    method: typing.Callable, name: typing.Any, *rest: typing.Any
) -> typing.Optional[typing.List[typing.Any]]:
    """Calls `method` once per name when `name` holds more than one.

    Mapping values are passed right after their key, ahead of `rest`.

    Arguments:
        method {callable} -- The method to call again for each name.
        name {any} -- The raw name argument.
        rest {any} -- The remaining arguments of the original call.

    Returns:
        list -- Each call's result, in order; or None when `name` is a
                single name (or empty) and the caller must handle it.
    """

    parsed = parse_names(name)

    if isinstance(parsed, Mapping):
        return [method(key, value, *rest) for key, value in parsed.entries]

    if isinstance(parsed, Many):
        return [method(each, *rest) for each in parsed.names]

    return None


def registration_args(
    name: typing.Any, callback: typing.Any, context: typing.Any
) -> tuple:
    """The arguments that follow each name when a registration fans out.

    A mapping brings its own callbacks, so whatever sits in the callback
    position (or an explicit context) is the shared context.

        >>> registration_args('a b', print, None)
        (<built-in function print>, None)
        >>> registration_args({'a': print}, 'ctx', None)
        ('ctx',)
    """

    if isinstance(name, abc.Mapping):
        return (callback if context is None else context,)

    return (callback, context)
