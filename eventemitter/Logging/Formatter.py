"""Standard formatter for `eventemitter` logs."""
import logging

log_formatter = logging.Formatter(
    "[%(asctime)s] %(levelname)s %(name)s - %(message)s", "%Y-%m-%d %H:%M:%S"
)
