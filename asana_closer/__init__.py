"""Close Asana tasks referenced in merged pull requests."""

__version__ = "0.1.0"
