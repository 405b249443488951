"""
Order Service - Business Logic Layer
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Union
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from oms.config import settings
from oms.database import MAX_INTEGER_ID
from oms.errors import (
    ConflictError,
    CustomerNotFoundError,
    InsufficientStockError,
    OrderManagementError,
    OrderNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from oms.models.order import Order, OrderItem
from oms.models.product import Product
from oms.observability import (
    get_logger,
    oms_low_stock_alerts_total,
    oms_orders_placed_total,
    oms_orders_rejected_total,
)
from oms.publishers.event_publisher import EventPublisher
from oms.repositories.customer_repository import CustomerRepository
from oms.repositories.notification_repository import NotificationRepository
from oms.repositories.order_repository import OrderRepository
from oms.repositories.product_repository import ProductRepository
from oms.schemas.order import OrderCreate, OrderResponse

logger = get_logger(__name__)

ANONYMOUS_CUSTOMER = "Anonymous"


def _parse_product_id(raw: Union[int, str]) -> Optional[int]:
    """Product ids are integers in column range; anything else can never resolve"""
    if isinstance(raw, int):
        value = raw
    else:
        text = raw.strip()
        if not (text.isascii() and text.isdecimal()) or len(text) > len(str(MAX_INTEGER_ID)):
            return None
        value = int(text)
    if not 1 <= value <= MAX_INTEGER_ID:
        return None
    return value


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session, event_publisher: Optional[EventPublisher] = None):
        self.db = db
        self.repository = OrderRepository(db)
        self.products = ProductRepository(db)
        self.customers = CustomerRepository(db)
        self.notifications = NotificationRepository(db)
        self.event_publisher = event_publisher or EventPublisher()
    
    def get_all_orders(self, skip: int = 0, limit: int = 100) -> List[OrderResponse]:
        """Get all orders, newest order number first"""
        orders = self.repository.get_all(skip=skip, limit=limit)
        return [OrderResponse.model_validate(o) for o in orders]
    
    def get_order_by_id(self, order_id: int) -> OrderResponse:
        order = self.repository.get_by_id(order_id)
        if not order:
            raise OrderNotFoundError(order_id)
        return OrderResponse.model_validate(order)
    
    def search_orders(self, query: Optional[str]) -> List[OrderResponse]:
        """Search by customer name, item product name or order number"""
        query = (query or "").strip()
        if not query:
            raise ValidationError("Search query is required")
        return [OrderResponse.model_validate(o) for o in self.repository.search(query)]
    
    def _resolve_customer(self, order_data: OrderCreate) -> Dict:
        """Customer fields copied onto the order"""
        if order_data.customer_id is not None:
            customer = self.customers.get_by_id(order_data.customer_id)
            if not customer:
                raise CustomerNotFoundError(order_data.customer_id)
            return {
                "customer_id": customer.id,
                "customer_name": customer.name,
                "customer_email": order_data.customer_email or customer.email,
                "customer_phone": order_data.customer_phone or customer.phone,
            }
        
        return {
            "customer_id": None,
            "customer_name": order_data.customer_name or ANONYMOUS_CUSTOMER,
            "customer_email": order_data.customer_email,
            "customer_phone": order_data.customer_phone,
        }
    
    def _load_products(self, order_data: OrderCreate) -> Dict[int, Product]:
        """
        Lock and validate every product referenced by the order
        
        Quantities of repeated product ids are summed before the stock check.
        """
        requested: Dict[int, int] = {}
        for item in order_data.items:
            product_id = _parse_product_id(item.product_id)
            if product_id is None:
                raise ProductNotFoundError(item.product_id)
            requested[product_id] = requested.get(product_id, 0) + item.quantity
        
        products: Dict[int, Product] = {}
        for product_id, quantity in requested.items():
            product = self.products.get_for_update(product_id)
            if not product:
                raise ProductNotFoundError(product_id)
            if quantity > product.stock:
                raise InsufficientStockError(product.name, product.stock, product_id=product.id)
            products[product_id] = product
        return products
    
    def _next_order_number(self) -> int:
        current = self.repository.max_order_number()
        if current is None:
            return settings.ORDER_NUMBER_START
        return current + 1
    
    def create_order(self, order_data: OrderCreate, created_by: Optional[int] = None) -> OrderResponse:
        """
        Place a new order
        
        Steps, all inside one database transaction:
        1. Resolve the customer (existing id, inline name or "Anonymous")
        2. Validate every product exists and has enough stock
        3. Snapshot product name and price onto each line item, compute total
        4. Allocate the next order number
        5. Save the order with status "pending"
        6. Decrement stock with a conditional update per product
        7. Record notifications (order placed, low stock)
        
        After commit an OrderCreated event is published.
        
        Raises:
            ProductNotFoundError: If any item references an unknown product
            InsufficientStockError: If any quantity exceeds available stock
            CustomerNotFoundError: If customer_id does not resolve
            ConflictError: If another order took the same order number
        """
        try:
            customer = self._resolve_customer(order_data)
            products = self._load_products(order_data)
            
            items = []
            total = 0.0
            for item in order_data.items:
                product = products[_parse_product_id(item.product_id)]
                items.append(OrderItem(
                    product_id=product.id,
                    product_name=product.name,
                    quantity=item.quantity,
                    price=product.price
                ))
                total += product.price * item.quantity
            
            now = datetime.now(timezone.utc)
            order = Order(
                order_number=self._next_order_number(),
                total=total,
                status='pending',
                items=items,
                created_by=created_by,
                created_at=now,
                updated_at=now,
                **customer
            )
            self.repository.add(order)
            
            for product_id, product in products.items():
                quantity = sum(i.quantity for i in items if i.product_id == product_id)
                if not self.products.decrement_stock(product_id, quantity):
                    # Stock moved since validation
                    self.db.refresh(product)
                    raise InsufficientStockError(product.name, product.stock, product_id=product_id)
            
            self.notifications.add(
                f"Order #{order.order_number} placed for {order.customer_name}", "success"
            )
            low_stock = []
            for product in products.values():
                self.db.refresh(product)
                if product.stock < settings.LOW_STOCK_THRESHOLD:
                    self.notifications.add(f"Low stock alert for {product.name}", "warning")
                    low_stock.append(product.id)
            
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            oms_orders_rejected_total.labels(reason=ConflictError.code).inc()
            logger.warning("order_rejected", reason=ConflictError.code, error=str(e.orig))
            raise ConflictError("Order could not be placed due to a concurrent update, please retry") from e
        except OrderManagementError as e:
            self.db.rollback()
            oms_orders_rejected_total.labels(reason=e.code).inc()
            logger.info("order_rejected", reason=e.code, message=e.message)
            raise
        except Exception:
            self.db.rollback()
            raise
        
        self.db.refresh(order)
        response = OrderResponse.model_validate(order)
        
        oms_orders_placed_total.inc()
        if low_stock:
            oms_low_stock_alerts_total.inc(len(low_stock))
        logger.info(
            "order_placed",
            order_id=order.id,
            order_number=order.order_number,
            total=order.total,
            items=len(items),
            low_stock_products=low_stock
        )
        
        self.event_publisher.publish_order_created(response.model_dump(mode="json"))
        return response
    
    def update_order_status(self, order_id: int, new_status: str) -> OrderResponse:
        """
        Overwrite order status
        
        Any status may follow any other; no transition rules are enforced
        and stock is not touched.
        """
        order = self.repository.get_by_id(order_id)
        if not order:
            raise OrderNotFoundError(order_id)
        
        old_status = order.status
        order = self.repository.update_status(order, new_status, datetime.now(timezone.utc))
        response = OrderResponse.model_validate(order)
        
        logger.info("order_status_updated", order_id=order_id, old_status=old_status, new_status=new_status)
        self.event_publisher.publish_order_status_changed({
            'order_id': order.id,
            'order_number': order.order_number,
            'old_status': old_status,
            'new_status': order.status,
            'updated_at': response.updated_at.isoformat()
        })
        return response
    
    def delete_order(self, order_id: int) -> None:
        """
        Delete an order, restoring stock unless it was cancelled
        
        Restore and delete commit together. Items whose product has since
        been deleted are skipped.
        """
        order = self.repository.get_by_id(order_id)
        if not order:
            raise OrderNotFoundError(order_id)
        
        restored = []
        try:
            if order.status != 'cancelled':
                for item in order.items:
                    if self.products.increment_stock(item.product_id, item.quantity):
                        restored.append(item.product_id)
                    else:
                        logger.warning("stock_restore_skipped", order_id=order_id, product_id=item.product_id)
            self.repository.remove(order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        
        logger.info("order_deleted", order_id=order_id, restored_products=restored)
