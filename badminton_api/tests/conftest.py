import os

# Phải đặt trước khi import ứng dụng: config đọc biến môi trường lúc import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from ..main import app
from ..core.database import Base, engine, SessionLocal


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_factory():
    return SessionLocal


def register_user(client, email="alice@example.com", password="secret123", username="alice"):
    response = client.post("/auth/register", json={
        "username": username,
        "email": email,
        "phone": "0901234567",
        "password": password,
        "address": "1 Le Loi, District 1, Ho Chi Minh City",
    })
    assert response.status_code == 200, response.text
    login = client.post("/auth/login", json={"mail": email, "password": password})
    assert login.status_code == 200, login.text
    return login.json()


def product_fields(name, price=240000, brand="YONEX", **extra):
    fields = {
        "product_name": name,
        "image_url": f"https://cdn.example.com/{name.lower().replace(' ', '-')}.jpg",
        "price": price,
        "brand": brand,
        "description": f"{name} description",
        "status": "AVAILABLE",
        "sales": 0,
        "stock": 10,
        "available_location": ["Ha Noi", "Ho Chi Minh"],
    }
    fields.update(extra)
    return fields


def racket_payload(name, price=240000, brand="YONEX", balance="EVEN", stiffness="MEDIUM", weight="4U"):
    payload = product_fields(name, price=price, brand=brand)
    payload["racket"] = {
        "balance": balance,
        "stiffness": stiffness,
        "weight": weight,
        "length": "675mm",
        "player_level": "Intermediate",
        "playing_style": "All-round",
        "line": "Astrox",
        "technology": "Rotational Generator System",
        "max_tension": "28 lbs",
    }
    return payload


def shoes_payload(name, price=1200000, brand="VICTOR", size=None, available_size=None, color="White"):
    payload = product_fields(name, price=price, brand=brand)
    payload["shoes"] = {
        "color": color,
        "size": size if size is not None else [40, 41],
        "available_size": available_size if available_size is not None else [40],
        "technology": "Power Cushion",
    }
    return payload


def shuttlecock_payload(name, price=480000, brand="YONEX", shuttle_type="Feather", speed=77, no_per_tube=12):
    payload = product_fields(name, price=price, brand=brand)
    payload["shuttlecock"] = {
        "shuttle_type": shuttle_type,
        "speed": speed,
        "no_per_tube": no_per_tube,
    }
    return payload
