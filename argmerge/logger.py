# Argmerge — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Argmerge."""
import logging

logger: logging.Logger = logging.getLogger("argmerge")
