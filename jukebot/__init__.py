"""
Jukebot - a prefix-command Discord bot that keeps a small music session.

This package provides the message/command catalog, the session state container
and the bot facade that routes platform events to command handlers.
"""

__version__ = "0.1.0"
