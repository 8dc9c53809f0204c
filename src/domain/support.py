"""Support intake domain service - append-only message log."""

from collections.abc import Callable
from dataclasses import dataclass, field

from .common import generate_id, now_millis
from .ports import SupportMessage, SupportMessageRepository, SupportNotifier


@dataclass
class SupportService:
    """Stores support messages as given and forwards them to the notifier."""

    messages: SupportMessageRepository
    notifier: SupportNotifier
    id_factory: Callable[[str], str] = field(default=generate_id)
    clock: Callable[[], int] = field(default=now_millis)

    def submit_message(self, email: str | None, message: str | None) -> str:
        """
        Append a support message. Nothing is validated.

        Returns:
            Identifier of the stored message
        """
        record = SupportMessage(id=self.id_factory("s"), email=email, message=message, ts=self.clock())
        self.messages.append(record)
        self.notifier.notify(record)
        return record.id
