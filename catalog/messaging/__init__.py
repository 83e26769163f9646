"""
Messaging module initialization
"""

from .i_event_publisher import IEventPublisher
from .notifier import EventNotifier
from .rabbitmq_broker import RabbitMQBroker

__all__ = [
    "IEventPublisher",
    "EventNotifier",
    "RabbitMQBroker",
]
