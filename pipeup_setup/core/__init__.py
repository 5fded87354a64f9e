from pipeup_setup.core.errors import BackendUnavailableError, BootstrapError, MissingTokenError
from pipeup_setup.core.logging import get_logger

__all__ = ["BackendUnavailableError", "BootstrapError", "MissingTokenError", "get_logger"]
