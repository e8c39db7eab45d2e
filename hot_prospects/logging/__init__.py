"""
Logging configuration and utilities for the prospect tracker.
"""
from .config import configure_logging, get_logger, get_store_logger, log_store_mutation

__all__ = ["configure_logging", "get_logger", "get_store_logger", "log_store_mutation"]
