"""
Requests: questions asked over a channel, answered by a single handler.
"""

import typing

from .handlers import HandlerTable, constant
from .names import fan_out, registration_args

if typing.TYPE_CHECKING:
    from .channel import Channel


class Requests:
    """The request half of a channel's messaging systems."""

    METHODS = ("request", "reply", "reply_once", "stop_replying")

    def __init__(self, channel: "Channel"):
        self.channel = channel
        self.handlers = HandlerTable(channel, "request")

    def request(self, name, *args) -> typing.Any:
        """Makes a request and returns its answer.

        Falls back to the ``default`` handler, which is given the name too.

        Arguments:
            name {str|dict} -- The request name, or several space-separated ones.
            args {any} -- Passed along to the handler.

        Returns:
            any -- The handler's answer, or None if nothing answered. Several
                   names give a list holding each name's answer, in order.
        """

        results = fan_out(self.request, name, *args)

        if results is not None:
            return results

        self.channel.relay(name, args)
        return self.handlers.invoke(name, args)

    def reply(self, name, callback: typing.Any = None, context: typing.Any = None) -> "Channel":
        """Sets the handler of a request, replacing any previous one.

        `callback` need not be callable: any other value is answered as is.

            >>> from radiobus import Radio
            >>> weather = Radio().channel('weather')
            >>> weather.reply('today', 'sunny').request('today')
            'sunny'
        """

        if fan_out(self.reply, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        self.handlers.register(
            name,
            constant(callback),
            context,
            original=None if callable(callback) else callback,
        )
        return self.channel

    def reply_once(self, name, callback: typing.Any = None, context: typing.Any = None) -> "Channel":
        """Like reply, but the handler is removed as soon as it is first called."""

        if fan_out(self.reply_once, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        self.handlers.register_once(
            name,
            constant(callback),
            context,
            original=None if callable(callback) else callback,
        )
        return self.channel

    def stop_replying(
        self,
        name=None,
        callback: typing.Optional[typing.Callable] = None,
        context: typing.Any = None,
    ) -> "Channel":
        """Removes the request handlers matching every filter given;
        all of them if given no arguments."""

        if fan_out(self.stop_replying, name, *registration_args(name, callback, context)) is not None:
            return self.channel

        self.handlers.remove(name, callback, context)
        return self.channel
