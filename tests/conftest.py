"""Shared fixtures: an isolated in-memory database per test."""

import os

os.environ.setdefault("WRITE_DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.enums import ActivityLevel, Sex
from database import init_db, models


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user(db):
    """A user with a complete biometric profile (BMR 1649, TDEE 1979)."""
    u = models.User(
        email="alex@example.com",
        name="Alex",
        age=30,
        gender=Sex.MALE,
        height=175,
        weight=70,
        activity_level=ActivityLevel.SEDENTARY,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u


@pytest.fixture
def bare_user(db):
    """A user who has not filled in any biometrics yet."""
    u = models.User(email="sam@example.com", name="Sam")
    db.add(u)
    db.commit()
    db.refresh(u)
    return u
