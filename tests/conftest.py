import pytest

from appointment_booking.main import create_app, init_db
from appointment_booking.models import db


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "SEED_ADMIN": True,
        "ADMIN_PASSWORD": "admin123",
    })
    init_db(app)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def appointment_data():
    return {
        "customer_name": "Jane Doe",
        "customer_email": "jane@example.com",
        "customer_phone": "555-0100",
        "appointment_date": "2025-03-14",
        "appointment_time": "10:30",
        "service": "Haircut",
    }


@pytest.fixture
def user_data():
    return {
        "first_name": "John",
        "last_name": "Smith",
        "email": "john@example.com",
        "phone": "555-0199",
        "password": "secret",
    }
