"""
Best-effort event notification.

Wraps an IEventPublisher so callers can emit domain events without
handling broker failures: every failure is logged and reported as False.
"""

from catalog.core.logger import logger
from catalog.messaging.i_event_publisher import IEventPublisher
from catalog.models.product import ProductEvent


class EventNotifier:
    """Fire-and-forget publisher for product events"""

    def __init__(self, publisher: IEventPublisher):
        self.publisher = publisher

    async def notify(self, event_type: str, event: ProductEvent) -> bool:
        """
        Publish an event, never raising.

        Returns:
            True if the broker accepted the event, False otherwise
        """
        try:
            payload = event.model_dump_json(exclude_none=True).encode("utf-8")
            await self.publisher.publish(event_type, payload)
        except Exception as e:
            logger.error(
                f"Failed to publish {event_type} event",
                metadata={"event": "publish_failed", "event_type": event_type, "product_id": event.id},
                error=e,
            )
            return False

        logger.info(
            f"Published {event_type} event",
            metadata={"event": "event_published", "event_type": event_type, "product_id": event.id},
        )
        return True
