"""kickoff - bootstrap a new Python project in one command."""

__version__ = "0.1.0"
