"""
Product Repository - Data Access Layer
"""
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import select, update

from oms.models.product import Product


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get all products with pagination"""
        return self.db.query(Product).order_by(Product.id).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_for_update(self, product_id: int) -> Optional[Product]:
        """
        Get product by ID and lock its row until the transaction ends

        Dialects without row locks (SQLite) ignore FOR UPDATE.
        """
        stmt = select(Product).where(Product.id == product_id).with_for_update()
        return self.db.execute(stmt).scalars().first()
    
    def create(self, product_data: Dict, commit: bool = True) -> Product:
        """Create new product"""
        product = Product(**product_data)
        self.db.add(product)
        if commit:
            self.db.commit()
            self.db.refresh(product)
        else:
            self.db.flush()
        return product
    
    def update(self, product_id: int, update_data: Dict) -> Optional[Product]:
        """Update only the provided fields of an existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def delete(self, product_id: int) -> bool:
        """Delete product"""
        product = self.get_by_id(product_id)
        if not product:
            return False
        
        self.db.delete(product)
        self.db.commit()
        return True
    
    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """
        Atomically subtract quantity from stock if enough is available
        
        Does not commit; the caller owns the transaction.
        
        Returns:
            True if the row was updated, False if stock was insufficient
            or the product no longer exists
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock >= quantity)
            .values(stock=Product.stock - quantity)
        )
        return result.rowcount == 1
    
    def increment_stock(self, product_id: int, quantity: int) -> bool:
        """
        Add quantity back onto stock. Does not commit.
        
        Returns:
            False if the product no longer exists
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id)
            .values(stock=Product.stock + quantity)
        )
        return result.rowcount == 1
    
    def count(self) -> int:
        """Get total count of products"""
        return self.db.query(Product).count()
