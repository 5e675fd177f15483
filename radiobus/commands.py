"""
Commands: fire-and-forget orders sent over a channel.

Each command name has at most one handler. Commands never return
anything to the sender but the channel itself, so calls can be chained.
"""

import typing

from .handlers import HandlerTable
from .names import fan_out, registration_args

if typing.TYPE_CHECKING:
    from .channel import Channel


class Commands:
    """The command half of a channel's messaging systems."""

    METHODS = ("command", "comply", "comply_once", "stop_complying")

    def __init__(self, channel: "Channel"):
        self.channel = channel
        self.handlers = HandlerTable(channel, "command")

    def command(self, name, *args) -> "Channel":
        """Issues a command.

        Falls back to the ``default`` handler, which is given the name too.
        Nothing happens when neither exists.

        Arguments:
            name {str|dict} -- The command name, or several space-separated ones.
            args {any} -- Passed along to the handler.

        Returns:
            Channel -- The channel the command went through.
        """

        if fan_out(self.command, name, *args) is not None:
            return self.channel

        self.channel.relay(name, args)
        self.handlers.invoke(name, args)

        return self.channel

    def comply(
        self,
        name,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> "Channel":
        """Sets the handler of a command, replacing any previous one.

        Arguments:
            name {str|dict} -- The command name, several space-separated ones,
                               or a mapping of command names to handlers.

        Keyword Arguments:
            callback {callable} -- The handler. (default: {None})
            context {any} -- Tag the handler can later be removed by; defaults
                             to the channel itself. (default: {None})
        """

        if fan_out(self.comply, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        if callback is not None:
            self.handlers.register(name, callback, context)

        return self.channel

    def comply_once(
        self,
        name,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> "Channel":
        """Like comply, but the handler is removed as soon as it is first called."""

        if fan_out(self.comply_once, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        if callback is not None:
            self.handlers.register_once(name, callback, context)

        return self.channel

    def stop_complying(
        self,
        name=None,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> "Channel":
        """Removes the command handlers matching every filter given;
        all of them if given no arguments."""

        if fan_out(self.stop_complying, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        self.handlers.remove(name, callback, context)
        return self.channel
