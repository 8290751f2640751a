"""
Exception hierarchy for the bot core.

Every error here is fatal at the point it is raised: nothing in the core
retries. Handler-level errors (``HandlerError``) are kept distinct from
catalog misses (``CatalogLookupError``) so the event pipeline can tell bad
wiring apart from a missing template.
"""


class JukebotError(Exception):
    """Base class for all bot errors."""


class ConfigError(JukebotError):
    """A required configuration value was missing at ``init()`` time."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Failed to initialise: a '{field}' was not provided in the config!")


class CatalogLookupError(JukebotError, LookupError):
    """A message or preference key is not present in the catalog."""

    def __init__(self, entity: str, key: object):
        self.entity = entity
        self.key = key
        super().__init__(f"Failed to get {entity} with key '{key}'")


class HandlerError(JukebotError):
    """The message or command handler was given a key it does not recognise."""

    def __init__(self, kind: str, key: object):
        self.kind = kind
        self.key = key
        super().__init__(f"Failed to handle {kind} with key '{key}'")


class ServerConnectionError(JukebotError, ConnectionError):
    """The configured server could not be resolved when the client became ready."""

    def __init__(self, server_id: object):
        self.server_id = server_id
        super().__init__(f"Failed to connect to server_id '{server_id}'")


class ChannelLookupError(JukebotError, LookupError):
    """The configured text channel is not among the server's text channels."""

    def __init__(self, channel_id: object):
        self.channel_id = channel_id
        super().__init__(f"Failed to find text_channel_id '{channel_id}'")


class DisconnectedError(JukebotError):
    """The platform session was closed. Terminal; restart the process."""

    def __init__(self, reason: object = None, code: object = None):
        self.reason = reason
        self.code = code
        super().__init__("Bot was disconnected from server.")
