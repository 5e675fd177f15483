"""
In-process messaging over named channels.

A channel carries three kinds of messages:

* events, heard by any number of listeners;
* commands, obeyed by a single handler;
* requests, answered by a single handler.

Channels come from a Radio. This package holds a process-wide one, and
mirrors its methods as plain functions taking the channel name first:

    >>> import radiobus
    >>> _ = radiobus.reply('inventory', 'count', lambda item: 3)
    >>> radiobus.request('inventory', 'count', 'apples')
    3

Set the RADIOBUS_DEBUG environment variable (or call set_debug) to have
unhandled commands and requests, overwritten handlers and pointless
removals reported through the 'radiobus' logger.
"""

import os

from .channel import Channel
from .commands import Commands
from .errors import RadioChannelError, RadioChannelNameError, RadioError
from .events import ALL, EventBus
from .handlers import DEFAULT
from .radio import FACADE_METHODS, Radio
from .requests import Requests

__version__ = "0.1.0"

TRUTHY = ("1", "true", "yes", "on")


def _debug_from_env() -> bool:
    return os.environ.get("RADIOBUS_DEBUG", "").strip().lower() in TRUTHY


radio_instance = Radio(debug=_debug_from_env())


def set_debug(debug: bool = True):
    """Turns debug diagnostics of the default Radio on or off."""
    radio_instance.debug = bool(debug)


def is_debug() -> bool:
    return radio_instance.debug


channel = radio_instance.channel
log = radio_instance.log
tune_in = radio_instance.tune_in
tune_out = radio_instance.tune_out

on = radio_instance.on
once = radio_instance.once
off = radio_instance.off
trigger = radio_instance.trigger
listen_to = radio_instance.listen_to
listen_to_once = radio_instance.listen_to_once
stop_listening = radio_instance.stop_listening

command = radio_instance.command
comply = radio_instance.comply
comply_once = radio_instance.comply_once
stop_complying = radio_instance.stop_complying

request = radio_instance.request
reply = radio_instance.reply
reply_once = radio_instance.reply_once
stop_replying = radio_instance.stop_replying

reset = radio_instance.reset

__all__ = [
    "ALL",
    "DEFAULT",
    "Channel",
    "Commands",
    "EventBus",
    "FACADE_METHODS",
    "Radio",
    "RadioChannelError",
    "RadioChannelNameError",
    "RadioError",
    "Requests",
    "radio_instance",
    "set_debug",
    "is_debug",
    "channel",
    "log",
    "tune_in",
    "tune_out",
] + list(FACADE_METHODS)
