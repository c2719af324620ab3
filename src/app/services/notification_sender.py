from abc import ABC, abstractmethod


class INotificationSender(ABC):
    """Outbound e-mail delivery"""

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> bool:
        """
        Deliver a message.

        Returns:
            True if any channel accepted the message, False otherwise
        """
        pass
