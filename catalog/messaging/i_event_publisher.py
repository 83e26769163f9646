"""
Event Publisher Interface
Publishes serialized events to a topic exchange
"""

from abc import ABC, abstractmethod


class IEventPublisher(ABC):
    """Abstract base class for event publisher implementations"""

    @abstractmethod
    async def publish(self, topic: str, payload: bytes) -> None:
        """
        Publish a payload under a topic (routing key)

        Raises:
            PublishUnavailable: if the broker does not accept the message
        """
