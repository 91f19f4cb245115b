from abc import ABC, abstractmethod

from src.libs.result import Result


class INotificationService(ABC):
    """
    Notification dispatcher interface - application layer

    Delivery is a fallible operation: implementations return an Error result
    instead of raising, and the calling use case decides whether a failure
    rolls state back or is only logged.
    """

    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> Result[None]:
        """Deliver one message, returning Error(DELIVERY_FAILURE, ...) on failure"""
        pass
