"""Bootstrap a Pipeup test user and API token against a running backend."""

__version__ = "0.2.0"
