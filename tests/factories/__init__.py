"""Test factories for WelfareChain API models."""

from .adoptions import AdoptionFactory, AdoptionRequestFactory
from .base import AsyncSQLAlchemyModelFactory
from .cases import CaseFactory, CaseUpdateFactory, DonationFactory
from .emergencies import EmergencyFactory
from .messages import MessageFactory
from .users import UserFactory
from .welfare import (
    DoctorProfileFactory,
    SavedWelfareFactory,
    WelfareOrganizationFactory,
)

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "UserFactory",
    "WelfareOrganizationFactory",
    "SavedWelfareFactory",
    "DoctorProfileFactory",
    "CaseFactory",
    "CaseUpdateFactory",
    "DonationFactory",
    "EmergencyFactory",
    "AdoptionFactory",
    "AdoptionRequestFactory",
    "MessageFactory",
]
