"""
Sample data for a fresh database
"""
from sqlalchemy.orm import Session

from oms.config import settings
from oms.models.customer import Customer
from oms.models.product import Product
from oms.models.user import User
from oms.observability import get_logger
from oms.repositories.customer_repository import CustomerRepository
from oms.repositories.product_repository import ProductRepository
from oms.repositories.user_repository import UserRepository
from oms.security import hash_password

logger = get_logger(__name__)

SAMPLE_PRODUCTS = [
    {"name": "Laptop", "price": 999.99, "category": "Electronics", "stock": 50},
    {"name": "Mouse", "price": 29.99, "category": "Electronics", "stock": 200},
    {"name": "Keyboard", "price": 89.99, "category": "Electronics", "stock": 150},
    {"name": "Notebook", "price": 12.99, "category": "Stationery", "stock": 300},
    {"name": "Pen", "price": 2.99, "category": "Stationery", "stock": 500},
]

SAMPLE_CUSTOMERS = [
    {"name": "John Doe", "email": "john@example.com", "phone": "123-456-7890"},
    {"name": "Jane Smith", "email": "jane@example.com", "phone": "987-654-3210"},
    {"name": "Bob Johnson", "email": "bob@example.com", "phone": "555-123-4567"},
]


def seed_sample_data(db: Session) -> dict:
    """
    Create the admin user and sample catalog/directory rows
    
    Each part is only seeded when it is missing, so running twice is harmless.
    
    Returns:
        Counts of created rows per table
    """
    created = {"users": 0, "products": 0, "customers": 0}
    
    if not UserRepository(db).get_by_email(settings.ADMIN_EMAIL):
        db.add(User(
            name=settings.ADMIN_NAME,
            email=settings.ADMIN_EMAIL,
            hashed_password=hash_password(settings.ADMIN_PASSWORD)
        ))
        created["users"] = 1
    
    if ProductRepository(db).count() == 0:
        db.add_all([Product(**data) for data in SAMPLE_PRODUCTS])
        created["products"] = len(SAMPLE_PRODUCTS)
    
    if CustomerRepository(db).count() == 0:
        db.add_all([Customer(**data) for data in SAMPLE_CUSTOMERS])
        created["customers"] = len(SAMPLE_CUSTOMERS)
    
    db.commit()
    logger.info("sample_data_seeded", **created)
    return created
