"""
RabbitMQ Broker Implementation
Publishes to and consumes from a durable topic exchange using aio-pika
"""

from typing import Awaitable, Callable, Optional

import aio_pika
from aio_pika.abc import AbstractIncomingMessage

from catalog.core.errors import PublishUnavailable
from catalog.core.logger import logger
from catalog.messaging.i_event_publisher import IEventPublisher

MessageHandler = Callable[[bytes], Awaitable[None]]


class RabbitMQBroker(IEventPublisher):
    """RabbitMQ implementation of IEventPublisher with background consumption"""

    def __init__(self, rabbitmq_url: str, exchange_name: str):
        """
        Initialize RabbitMQ broker

        Args:
            rabbitmq_url: RabbitMQ connection URL
            exchange_name: Name of the topic exchange to publish to
        """
        self.rabbitmq_url = rabbitmq_url
        self.exchange_name = exchange_name
        self.connection: Optional[aio_pika.abc.AbstractRobustConnection] = None
        self.channel: Optional[aio_pika.abc.AbstractChannel] = None
        self.exchange: Optional[aio_pika.abc.AbstractExchange] = None
        self._is_connected = False

    async def connect(self) -> None:
        """Connect to RabbitMQ and declare the topic exchange"""
        try:
            logger.info("Connecting to RabbitMQ...", metadata={"event": "rabbitmq_connecting"})

            self.connection = await aio_pika.connect_robust(self.rabbitmq_url, heartbeat=600)
            self.channel = await self.connection.channel()
            await self.channel.set_qos(prefetch_count=10)

            # Declare exchange (idempotent)
            self.exchange = await self.channel.declare_exchange(
                self.exchange_name,
                aio_pika.ExchangeType.TOPIC,
                durable=True,
            )

            self._is_connected = True
            logger.info(
                "RabbitMQ connected successfully",
                metadata={"event": "rabbitmq_connected", "exchange": self.exchange_name},
            )
        except Exception as e:
            logger.error(
                "Failed to connect to RabbitMQ",
                metadata={"event": "rabbitmq_connection_error"},
                error=e,
            )
            self._is_connected = False
            raise

    async def publish(self, topic: str, payload: bytes) -> None:
        """Publish a persistent JSON message with the topic as routing key"""
        if self.exchange is None:
            raise PublishUnavailable("RabbitMQ exchange not initialized", details={"topic": topic})

        message = aio_pika.Message(
            body=payload,
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
        )
        try:
            await self.exchange.publish(message, routing_key=topic)
        except Exception as e:
            raise PublishUnavailable(f"Publish failed: {e}", details={"topic": topic})

    async def subscribe(self, routing_key: str, queue_name: str, handler: MessageHandler) -> str:
        """
        Bind a durable queue to the exchange and consume it in the background.

        Messages are acknowledged when the handler returns and requeued when
        it raises.

        Returns:
            The consumer tag
        """
        if self.channel is None or self.exchange is None:
            raise RuntimeError("Channel not initialized. Call connect() first.")

        queue = await self.channel.declare_queue(queue_name, durable=True)
        await queue.bind(self.exchange, routing_key=routing_key)

        async def on_message(message: AbstractIncomingMessage) -> None:
            try:
                await handler(message.body)
            except Exception as e:
                logger.error(
                    "Message handler failed, requeueing",
                    metadata={
                        "event": "message_handler_failed",
                        "queue": queue_name,
                        "routing_key": message.routing_key,
                        "message_id": message.message_id,
                    },
                    error=e,
                )
                await message.nack(requeue=True)
                return
            await message.ack()

        consumer_tag = await queue.consume(on_message)
        logger.info(
            f"Consuming from queue {queue_name}",
            metadata={"event": "consumer_started", "queue": queue_name, "routing_key": routing_key},
        )
        return consumer_tag

    async def disconnect(self) -> None:
        """Close RabbitMQ connection"""
        logger.info("Stopping RabbitMQ broker...")

        if self.channel is not None:
            await self.channel.close()
        if self.connection is not None:
            await self.connection.close()

        self.channel = None
        self.connection = None
        self.exchange = None
        self._is_connected = False

    def is_healthy(self) -> bool:
        """Check if broker connection is healthy"""
        return (
            self._is_connected
            and self.connection is not None
            and not self.connection.is_closed
        )
