# Singledash CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Singledash."""
import logging

logger: logging.Logger = logging.getLogger("singledash")
