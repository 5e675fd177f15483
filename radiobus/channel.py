"""
The Channel class: a named meeting point for events, commands and requests.
"""

import typing

from .commands import Commands
from .events import EventBus
from .requests import Requests

if typing.TYPE_CHECKING:
    from .radio import Radio


class Channel:
    """
    A named channel, joining the three messaging systems.

    Channels are normally obtained by name from a Radio, which creates
    them on first use:

        >>> from radiobus import Radio
        >>> radio = Radio()
        >>> radio.channel('chat') is radio.channel('chat')
        True
        >>> chat = radio.channel('chat')
        >>> _ = chat.comply('greet', lambda who: print('Hello,', who))
        >>> _ = chat.command('greet', 'world')
        Hello, world
    """

    def __init__(self, name: str, radio: "Radio"):
        """
        Arguments:
            name {str} -- The name of this channel.
            radio {radiobus.radio.Radio} -- The registry this channel belongs to.
        """

        self.name = name
        self.radio = radio
        self.tuned_in = False

        self.events = EventBus(self)
        self.commands = Commands(self)
        self.requests = Requests(self)

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.name)

    @property
    def event_bus(self) -> EventBus:
        return self.events

    def debug_log(self, warning: str, name: str):
        self.radio.debug_log(warning, name, self.name)

    def relay(self, name: str, args: tuple):
        """Logs a command or request on this channel, if tuned in."""

        if self.tuned_in:
            self.radio.log(self.name, name, *args)

    # == Events ==

    def has_listeners(self, name: typing.Optional[str] = None) -> bool:
        return self.events.has_listeners(name)

    def is_listening_to(self, emitter) -> bool:
        return self.events.is_listening_to(emitter)

    def on(self, name, callback=None, context=None) -> "Channel":
        self.events.on(name, callback, context)
        return self

    def once(self, name, callback=None, context=None) -> "Channel":
        self.events.once(name, callback, context)
        return self

    def off(self, name=None, callback=None, context=None) -> "Channel":
        self.events.off(name, callback, context)
        return self

    def trigger(self, name, *args) -> "Channel":
        self.events.trigger(name, *args)
        return self

    def listen_to(self, emitter, name, callback=None) -> "Channel":
        self.events.listen_to(emitter, name, callback)
        return self

    def listen_to_once(self, emitter, name, callback=None) -> "Channel":
        self.events.listen_to_once(emitter, name, callback)
        return self

    def stop_listening(self, emitter=None, name=None, callback=None) -> "Channel":
        self.events.stop_listening(emitter, name, callback)
        return self

    # == Commands ==

    def command(self, name, *args) -> "Channel":
        return self.commands.command(name, *args)

    def comply(self, name, callback=None, context=None) -> "Channel":
        return self.commands.comply(name, callback, context)

    def comply_once(self, name, callback=None, context=None) -> "Channel":
        return self.commands.comply_once(name, callback, context)

    def stop_complying(self, name=None, callback=None, context=None) -> "Channel":
        return self.commands.stop_complying(name, callback, context)

    # == Requests ==

    def request(self, name, *args) -> typing.Any:
        return self.requests.request(name, *args)

    def reply(self, name, callback=None, context=None) -> "Channel":
        return self.requests.reply(name, callback, context)

    def reply_once(self, name, callback=None, context=None) -> "Channel":
        return self.requests.reply_once(name, callback, context)

    def stop_replying(self, name=None, callback=None, context=None) -> "Channel":
        return self.requests.stop_replying(name, callback, context)

    def reset(self) -> "Channel":
        """Removes every listener, listening, command handler and request
        handler of this channel. The channel itself stays registered."""

        self.off()
        self.stop_listening()
        self.stop_complying()
        self.stop_replying()

        return self
