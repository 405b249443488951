"""Tests for sample data seeding."""

from oms.config import settings
from oms.models.customer import Customer
from oms.models.product import Product
from oms.repositories.user_repository import UserRepository
from oms.security import verify_password
from oms.seed import SAMPLE_CUSTOMERS, SAMPLE_PRODUCTS, seed_sample_data


def test_seed_creates_admin_and_samples(db):
    created = seed_sample_data(db)

    assert created == {"users": 1, "products": len(SAMPLE_PRODUCTS), "customers": len(SAMPLE_CUSTOMERS)}
    admin = UserRepository(db).get_by_email(settings.ADMIN_EMAIL)
    assert verify_password(settings.ADMIN_PASSWORD, admin.hashed_password)


def test_seed_twice_is_harmless(db):
    seed_sample_data(db)
    assert seed_sample_data(db) == {"users": 0, "products": 0, "customers": 0}
    assert db.query(Product).count() == len(SAMPLE_PRODUCTS)
    assert db.query(Customer).count() == len(SAMPLE_CUSTOMERS)


def test_admin_can_log_in_after_seeding(db, client):
    seed_sample_data(db)
    response = client.post(
        "/auth/login", json={"email": settings.ADMIN_EMAIL, "password": settings.ADMIN_PASSWORD}
    )
    assert response.status_code == 200
