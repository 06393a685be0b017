"""
Selection Event Publisher
=========================

Bounded Context: Selection Event Message Production

Message Flow:
    SelectionState → SelectionEvent → SelectionPublisher → MQTT Broker

Example:
    >>> from rms_mqtt.publishers import SelectionPublisher
    >>> from rms_mqtt.schemas import SelectionEvent
    >>> from rms_mqtt.logging import create_logger
    >>>
    >>> publisher = SelectionPublisher(
    ...     broker_host="localhost",
    ...     topic="rms/data/selection/rms_01",
    ...     logger=create_logger("publisher")
    ... )
    >>> publisher.connect()
    >>> publisher.publish_selection(
    ...     SelectionEvent.for_zone("sector3", service_id="rms_01", catalog="sectors")
    ... )
"""

from typing import Dict, Any, Optional
from .base import BasePublisher
from ..schemas import SelectionEvent
from ..logging import StructuredLogger, LogEvent


class SelectionPublisher(BasePublisher):
    """
    Publisher for selection change messages.

    Selection messages are published retained, so a UI that subscribes
    late still receives the current selection.
    """

    def __init__(
        self,
        broker_host: str,
        topic: str,
        logger: StructuredLogger,
        broker_port: int = 1883,
        client_id: str = "rms_selection_publisher",
        username: Optional[str] = None,
        password: Optional[str] = None,
        qos: int = 0,
        retain: bool = True
    ):
        super().__init__(
            broker_host=broker_host,
            broker_port=broker_port,
            topic=topic,
            client_id=client_id,
            logger=logger,
            username=username,
            password=password,
            qos=qos
        )
        self.retain = retain

    def format_message(self, event: SelectionEvent) -> Dict[str, Any]:
        """
        Format SelectionEvent to JSON-compatible dict.

        Raises:
            ValueError: If the event cannot be serialized
        """
        try:
            formatted = event.to_dict()
        except (AttributeError, TypeError) as e:
            self.logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message="Failed to serialize selection event",
                exc_info=e
            )
            raise ValueError(f"Failed to format selection event: {e}")

        self.logger.debug(
            event=LogEvent.SELECTION_EVENT_SERIALIZED,
            message="Serialized selection event",
            metadata={
                'event_type': event.event_type.value,
                'catalog': event.catalog
            }
        )
        return formatted

    def publish_selection(self, event: SelectionEvent) -> bool:
        """
        Publish a selection event.

        Returns:
            True if published successfully, False otherwise
        """
        try:
            message_data = self.format_message(event)
        except ValueError:
            return False

        success = self.publish(message_data, retain=self.retain)

        if success:
            self.logger.info(
                event=(
                    LogEvent.SELECTION_CLEARED if event.zone is None
                    else LogEvent.SELECTION_CHANGED
                ),
                message="Published selection event",
                metadata={
                    'zone': event.zone,
                    'catalog': event.catalog,
                    'topic': self.topic
                }
            )

        return success
