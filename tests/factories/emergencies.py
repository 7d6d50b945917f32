import factory

from src.database.models import Emergency, EmergencyStatus
from .base import AsyncSQLAlchemyModelFactory, UUIDFactory


class EmergencyFactory(AsyncSQLAlchemyModelFactory[Emergency]):
    class Meta:
        model = Emergency

    id = UUIDFactory()
    reporter_name = factory.Faker("name")
    phone = factory.Faker("numerify", text="+1555#######")
    email = factory.Sequence(lambda n: f"reporter{n}@example.com")
    animal_type = "dog"
    condition = "Hit by a car"
    location = factory.Faker("city")
    description = factory.Faker("sentence")
    status = EmergencyStatus.NEW
