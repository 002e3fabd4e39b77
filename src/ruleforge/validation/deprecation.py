"""Once-per-process deprecation notices."""

import logging

logger = logging.getLogger(__name__)


class DeprecationNotice:
    """Process-scoped record of deprecation messages already emitted.

    The record only grows; a message is logged the first time it is seen
    and ignored afterwards.
    """

    _emitted: set[str] = set()

    @classmethod
    def warn_once(cls, message: str) -> bool:
        """Log `message` at WARNING unless it was logged before.

        Returns:
            True if the message was emitted by this call
        """
        if message in cls._emitted:
            return False
        cls._emitted.add(message)
        logger.warning(message)
        return True

    @classmethod
    def has_emitted(cls, message: str) -> bool:
        return message in cls._emitted


def warn_once(message: str) -> bool:
    """Emit a deprecation warning at most once per process."""
    return DeprecationNotice.warn_once(message)
