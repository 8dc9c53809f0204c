"""
Console support notifier adapter - Implements SupportNotifier protocol.

This module provides a console-based implementation of the domain's
support notifier port, logging incoming support messages for demo purposes.
"""

import logging

from src.domain.ports import SupportMessage

logger = logging.getLogger(__name__)


class ConsoleSupportNotifier:
    """
    Implements SupportNotifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - support staff read messages from the logs.
    """

    def notify(self, message: SupportMessage) -> None:
        """
        Log a support message to console (simulates a helpdesk inbox).

        Args:
            message: The stored support message
        """
        logger.info("[SUPPORT] Id: %s From: %s Message: %s", message.id, message.email, message.message)
