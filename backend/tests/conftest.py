import time
from datetime import datetime, timedelta, timezone

import jwt
import pytest
from fastapi.testclient import TestClient

from six_cities.config.settings import Config
from six_cities.domain.entities import Comment, Offer, User
from six_cities.domain.value_objects import (
    Amenity,
    City,
    Coordinates,
    HousingType,
    UserType,
)
from six_cities.fastapi_app import create_fastapi_app
from six_cities.infrastructure.auth import Sha256PasswordHasher
from six_cities.infrastructure.persistence import InMemoryStore
from six_cities.setup.ioc import InMemoryStorageProvider


class TestConfig(Config):
    __test__ = False

    TESTING = True
    STORAGE_BACKEND = "memory"
    JWT_SECRET = "test-secret"
    JWT_ISSUER = "six-cities-test"
    JWT_AUDIENCE = "six-cities-test-clients"
    PASSWORD_SALT = "test-salt"
    LOG_LEVEL = "WARNING"
    LOG_PATH = None


def make_token(
    user: User,
    secret: str = TestConfig.JWT_SECRET,
    expires_in: int = 300,
    issuer: str = TestConfig.JWT_ISSUER,
    audience: str = TestConfig.JWT_AUDIENCE,
) -> str:
    now = int(time.time())
    return jwt.encode(
        {
            "sub": user.id,
            "email": user.email,
            "type": user.type.value,
            "iat": now,
            "exp": now + expires_in,
            "iss": issuer,
            "aud": audience,
        },
        secret,
        algorithm="HS256",
    )


def auth_header(user: User) -> dict:
    return {"Authorization": f"Bearer {make_token(user)}"}


def seed_user(
    store: InMemoryStore,
    email: str = "host@example.com",
    password: str = "secret1",
    type: UserType = UserType.PRO,
) -> User:
    user = User.create(
        email=email,
        password_hash=Sha256PasswordHasher(TestConfig.PASSWORD_SALT).hash(password),
        type=type,
        name=email.split("@")[0][:15],
    )
    store.users[user.id] = user
    return user


_SEED_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def seed_offer(store: InMemoryStore, owner: User, **overrides) -> Offer:
    fields = dict(
        title="Cozy flat by the canal",
        description="Bright two-room flat a short walk from the station.",
        city=City.AMSTERDAM,
        preview_path="preview.jpg",
        image_paths=[f"img{i}.jpg" for i in range(6)],
        is_premium=False,
        type=HousingType.APARTMENT,
        rooms=2,
        guests=3,
        price=1200,
        amenities=[Amenity.BREAKFAST, Amenity.WASHER],
        coordinates=Coordinates(latitude=52.37, longitude=4.89),
    )
    fields.update(overrides)
    offer = Offer.create(owner_id=owner.id, **fields)
    # Strictly increasing creation times keep "newest first" deterministic
    offer.created_at = _SEED_EPOCH + timedelta(seconds=len(store.offers))
    store.offers[offer.id] = offer
    return offer


def seed_comment(store: InMemoryStore, offer: Offer, author: User, rating: int) -> Comment:
    comment = Comment.create(
        offer_id=offer.id, user_id=author.id, text="Lovely stay", rating=rating
    )
    store.comments[comment.id] = comment
    return comment


def offer_payload(**overrides) -> dict:
    payload = {
        "title": "Sunny loft near the park",
        "description": "Spacious loft with a balcony and a view on the park.",
        "city": "Paris",
        "previewPath": "preview.jpg",
        "imagePaths": [f"img{i}.jpg" for i in range(6)],
        "isPremium": True,
        "type": "house",
        "rooms": 3,
        "guests": 4,
        "price": 2500,
        "amenities": ["Breakfast", "Fridge"],
        "coordinates": {"latitude": 48.85, "longitude": 2.35},
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def app(store):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(TestConfig, InMemoryStorageProvider(store))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def owner(store):
    return seed_user(store, "host@example.com")


@pytest.fixture()
def guest(store):
    return seed_user(store, "guest@example.com", type=UserType.REGULAR)
