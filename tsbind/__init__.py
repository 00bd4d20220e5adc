"""tsbind: typed TypeScript bindings for remote commands, events and constants."""

__version__ = "0.1.0"
