# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argwright."""
import logging

logger: logging.Logger = logging.getLogger("argwright")
