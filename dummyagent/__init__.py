"""A terminal chat agent with read, list and edit file tools for OpenAI-compatible APIs."""

__version__ = "0.1.0"