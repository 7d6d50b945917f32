import factory

from src.database.models import (
    Adoption,
    AdoptionRequest,
    AdoptionRequestStatus,
    AdoptionStatus,
    ContactMethod,
    PetType,
)
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory


class AdoptionFactory(AsyncSQLAlchemyModelFactory[Adoption]):
    class Meta:
        model = Adoption

    id = UUIDFactory()
    name = factory.Faker("first_name")
    type = PetType.DOG
    breed = "Mixed"
    age = "2 years"
    gender = "female"
    size = "medium"
    description = factory.Faker("paragraph")
    location = factory.Faker("city")
    status = AdoptionStatus.AVAILABLE


class AdoptionRequestFactory(AsyncSQLAlchemyModelFactory[AdoptionRequest]):
    class Meta:
        model = AdoptionRequest

    id = UUIDFactory()
    donor_name = factory.Faker("name")
    contact_number = "+15550001111"
    email = factory.Sequence(lambda n: f"adopter{n}@example.com")
    reason = "We have a big garden and lots of time."
    preferred_contact = ContactMethod.EMAIL
    status = AdoptionRequestStatus.PENDING
