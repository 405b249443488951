"""
Product Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from oms.errors import NotFoundError, ValidationError
from oms.observability import get_logger
from oms.repositories.product_repository import ProductRepository
from oms.repositories.notification_repository import NotificationRepository
from oms.schemas.product import ProductCreate, ProductUpdate, ProductResponse

logger = get_logger(__name__)

# Columns that cannot be cleared through a partial update
REQUIRED_FIELDS = ("name", "price", "stock")


class ProductService:
    """Service layer for catalog business logic"""
    
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductRepository(db)
        self.notifications = NotificationRepository(db)
    
    def get_all_products(self, skip: int = 0, limit: int = 100) -> List[ProductResponse]:
        """Get all products with pagination"""
        products = self.repository.get_all(skip=skip, limit=limit)
        return [ProductResponse.model_validate(p) for p in products]
    
    def get_product_by_id(self, product_id: int) -> ProductResponse:
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product not found: {product_id}")
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate, created_by: Optional[int] = None) -> ProductResponse:
        """Create new product and announce it in the notification feed"""
        data = product_data.model_dump()
        data["created_by"] = created_by
        try:
            product = self.repository.create(data, commit=False)
            self.notifications.add(f'Product "{product.name}" created', "info")
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(product)
        
        logger.info("product_created", product_id=product.id, name=product.name, stock=product.stock)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: int, product_data: ProductUpdate) -> ProductResponse:
        """Update the provided fields of an existing product"""
        update_data = product_data.model_dump(exclude_unset=True)
        for field in REQUIRED_FIELDS:
            if field in update_data and update_data[field] is None:
                raise ValidationError(f"Product {field} cannot be empty")
        
        product = self.repository.update(product_id, update_data)
        if not product:
            raise NotFoundError(f"Product not found: {product_id}")
        
        logger.info("product_updated", product_id=product_id, fields=sorted(update_data))
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: int) -> None:
        """Delete product. Existing orders keep their item snapshots."""
        if not self.repository.delete(product_id):
            raise NotFoundError(f"Product not found: {product_id}")
        logger.info("product_deleted", product_id=product_id)
