class RadioError(Exception):
    """
    A common superclass for all
    exceptions regarding radiobus.
    """
    pass

# == Channel errors ==

class RadioChannelError(RadioError):
    """
    A common superclass for all exceptions
    involving radiobus.channel.Channel and
    the registries that hand channels out.
    """
    pass

class RadioChannelNameError(RadioChannelError, ValueError):
    """
    Raised when a channel is looked up without
    a name, or with a name that is not a
    non-empty string.
    """
    pass
