"""create-rescript-config - Interactive ReScript project configuration."""

__version__ = "1.0.0"
