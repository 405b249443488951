"""
RabbitMQ Event Publisher
"""
import pika
import uuid
from datetime import datetime, timezone
from typing import Dict, Optional
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from oms.config import settings
from oms.observability import get_logger
from oms.schemas.order import OrderEvent

logger = get_logger(__name__)

ORDER_CREATED_ROUTING_KEY = "order.created"
ORDER_STATUS_CHANGED_ROUTING_KEY = "order.status.changed"


class EventPublisher:
    """Publisher for sending order events to RabbitMQ"""
    
    def __init__(self, enabled: Optional[bool] = None):
        self.enabled = settings.EVENTS_ENABLED if enabled is None else enabled
        self.rabbitmq_url = settings.RABBITMQ_URL
        self.exchange = settings.RABBITMQ_EXCHANGE
    
    @retry(
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=settings.RETRY_DELAY, min=1, max=10),
        retry=retry_if_exception_type((pika.exceptions.AMQPConnectionError, OSError)),
        reraise=True
    )
    def _connect(self) -> pika.BlockingConnection:
        return pika.BlockingConnection(pika.URLParameters(self.rabbitmq_url))
    
    def _build_event(self, event_type: str, data: Dict) -> OrderEvent:
        return OrderEvent(
            event_type=event_type,
            event_id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc).isoformat(),
            source=settings.SERVICE_NAME,
            data=data
        )
    
    def publish(self, event_type: str, routing_key: str, data: Dict) -> bool:
        """
        Publish an event to the orders exchange
        
        Args:
            event_type: Event name, e.g. OrderCreated
            routing_key: Topic routing key
            data: JSON-serializable payload
        
        Returns:
            True if published, False if disabled or publishing failed
        """
        if not self.enabled:
            return False
        
        event = self._build_event(event_type, data)
        try:
            connection = self._connect()
            try:
                channel = connection.channel()
                channel.exchange_declare(
                    exchange=self.exchange,
                    exchange_type='topic',
                    durable=True
                )
                channel.confirm_delivery()
                channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=routing_key,
                    body=event.model_dump_json(),
                    properties=pika.BasicProperties(
                        delivery_mode=2,  # Persistent message
                        content_type='application/json',
                        correlation_id=event.event_id
                    )
                )
            finally:
                connection.close()
        except Exception as e:
            # Delivery is best effort; the order is already committed
            logger.error("event_publish_failed", event_type=event_type, event_id=event.event_id, error=str(e))
            return False
        
        logger.info("event_published", event_type=event_type, event_id=event.event_id)
        return True
    
    def publish_order_created(self, order_data: Dict) -> bool:
        """Publish OrderCreated event"""
        return self.publish("OrderCreated", ORDER_CREATED_ROUTING_KEY, order_data)
    
    def publish_order_status_changed(self, order_data: Dict) -> bool:
        """Publish OrderStatusChanged event"""
        return self.publish("OrderStatusChanged", ORDER_STATUS_CHANGED_ROUTING_KEY, order_data)
