"""
The Radio class: a registry of channels, and their diagnostics.
"""

import functools
import logging
import typing

from .channel import Channel
from .commands import Commands
from .errors import RadioChannelNameError
from .events import ALL, EventBus
from .requests import Requests

FACADE_METHODS = EventBus.METHODS + Commands.METHODS + Requests.METHODS + ("reset",)


class Radio:
    """
    Hands out channels by name, creating each one on first use.

    Every Radio is independent of the others; the radiobus package keeps a
    default one for process-wide use. Besides channel(), a Radio has one
    method per channel method (on, command, request, ...), which takes a
    channel name first:

        >>> radio = Radio()
        >>> _ = radio.reply('clock', 'now', 'noon')
        >>> radio.request('clock', 'now')
        'noon'
    """

    def __init__(self, debug: bool = False, logger: typing.Optional[logging.Logger] = None):
        """
        Keyword Arguments:
            debug {bool} -- Whether to report unhandled or overwritten handlers. (default: {False})
            logger {logging.Logger} -- Where diagnostics and tuned-in activity
                                       go. (default: the 'radiobus' logger)
        """

        self.debug = debug
        self.logger = logger if logger is not None else logging.getLogger("radiobus")
        self.channels = {}  # type: typing.Dict[str, Channel]
        self._relays = {}  # type: typing.Dict[str, typing.Callable]

    def __repr__(self) -> str:
        return "{}({} channels)".format(type(self).__name__, len(self.channels))

    def channel(self, name: str) -> Channel:
        """Gets a channel by name, creating it if needed.

        Raises:
            RadioChannelNameError: The name is empty or not a string.
        """

        if not name or not isinstance(name, str):
            raise RadioChannelNameError(
                "You must provide a name for the channel, not {!r}.".format(name)
            )

        channel = self.channels.get(name)

        if channel is None:
            channel = self.channels[name] = Channel(name, self)

        return channel

    def debug_log(self, warning: str, name: str, channel_name: typing.Optional[str] = None):
        """Reports a dubious operation, but only in debug mode."""

        if not self.debug:
            return

        channel_text = " on the {} channel".format(channel_name) if channel_name else ""
        self.logger.warning('%s%s: "%s"', warning, channel_text, name)

    def log(self, channel_name: str, event_name: str, *args):
        """Logs an event, command or request of a channel."""

        self.logger.info('[%s] "%s" %r', channel_name, event_name, args)

    def _relay(self, channel_name: str) -> typing.Callable:
        # tune_in and tune_out must subscribe and unsubscribe the very same callable
        relay = self._relays.get(channel_name)

        if relay is None:
            relay = self._relays[channel_name] = functools.partial(self.log, channel_name)

        return relay

    def tune_in(self, channel_name: str) -> "Radio":
        """Logs all activity of a channel from now on."""

        channel = self.channel(channel_name)
        relay = self._relay(channel_name)

        channel.tuned_in = True
        channel.off(ALL, relay)
        channel.on(ALL, relay)

        return self

    def tune_out(self, channel_name: str) -> "Radio":
        """Stops logging the activity of a channel."""

        channel = self.channel(channel_name)
        relay = self._relays.pop(channel_name, None)

        channel.tuned_in = False

        if relay is not None:
            channel.off(ALL, relay)

        return self


def _facade(method_name: str) -> typing.Callable:
    def method(self, channel_name: str, *args, **kwargs):
        return getattr(self.channel(channel_name), method_name)(*args, **kwargs)

    method.__name__ = method_name
    method.__qualname__ = "Radio." + method_name
    method.__doc__ = "Calls Channel.{} on the channel named first.".format(method_name)

    return method


for _method_name in FACADE_METHODS:
    setattr(Radio, _method_name, _facade(_method_name))
