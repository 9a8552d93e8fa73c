"""
Shared logging configuration for fontcustom.
"""

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[logging.StreamHandler()],
)

logger = logging.getLogger("fontcustom")


def say_message(kind: str, message: str) -> None:
    """Default status callback: report a user-facing message through the logger."""
    logger.info(f"[{kind}] {message}")
