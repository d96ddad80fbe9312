"""Synthetic pets and users for demos and load tests.

Generated records are plain dicts shaped like the API payloads. Pet names
carry a random suffix so repeated batches don't collide on the unique name,
and user emails come from Faker's unique proxy for the same reason.
"""

import string
import uuid
from datetime import UTC
from typing import Any

from faker import Faker

from petadopt.models import PET_GENDERS, PET_SIZES, USER_ROLES
from petadopt.schemas.pet import PetCreate
from petadopt.schemas.user import UserCreate
from petadopt.security import hash_password

MOCK_PASSWORD = "coder123"

DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

DOG_NAMES = ["Buddy", "Max", "Charlie", "Cooper", "Milo", "Rocky", "Bear", "Leo", "Duke", "Teddy"]
DOG_BREEDS = [
    "Labrador",
    "Beagle",
    "Poodle",
    "Boxer",
    "Bulldog",
    "Chihuahua",
    "Husky",
    "Terrier",
    "Collie",
    "Pug",
]

fake = Faker()


def _suffix(length: int = 4) -> str:
    return fake.lexify("?" * length, letters=string.ascii_letters + string.digits)


def _description() -> str:
    text = fake.paragraph(nb_sentences=2)
    while len(text) < DESCRIPTION_MIN_LENGTH:
        text = f"{text} {fake.sentence()}"
    return text[:DESCRIPTION_MAX_LENGTH].rstrip()


def generate_pet() -> PetCreate:
    return PetCreate(
        name=f"{fake.random_element(DOG_NAMES)}-{_suffix()}",
        birth_date=fake.date_between(start_date="-5y", end_date="today"),
        breed=fake.random_element(DOG_BREEDS),
        gender=fake.random_element(PET_GENDERS),
        size=fake.random_element(PET_SIZES),
        description=_description(),
    )


def generate_user() -> UserCreate:
    return UserCreate(
        first_name=fake.first_name(),
        last_name=fake.last_name(),
        email=fake.unique.email(),
        password=MOCK_PASSWORD,
        role=fake.random_element(USER_ROLES),
    )


def mock_pet_record() -> dict[str, Any]:
    """A pet as it would come back from the API, never persisted."""
    return {
        "id": uuid.uuid4(),
        **generate_pet().model_dump(),
        "is_adopted": fake.pybool(),
        "created_at": fake.past_datetime(start_date="-1y", tzinfo=UTC),
        "updated_at": fake.past_datetime(start_date="-1d", tzinfo=UTC),
    }


def mock_user_record() -> dict[str, Any]:
    """A user as stored, with the mock password already hashed."""
    data = generate_user().model_dump()
    data["password"] = hash_password(data["password"])
    return {
        "id": uuid.uuid4(),
        **data,
        "pets": [],
        "created_at": fake.past_datetime(start_date="-1y", tzinfo=UTC),
        "updated_at": fake.past_datetime(start_date="-1d", tzinfo=UTC),
    }


def mock_pets(count: int) -> list[dict[str, Any]]:
    return [mock_pet_record() for _ in range(count)]


def mock_users(count: int) -> list[dict[str, Any]]:
    return [mock_user_record() for _ in range(count)]
