"""Database models for WelfareChain API."""

from .adoptions import (
    Adoption,
    AdoptionRequest,
    AdoptionRequestStatus,
    AdoptionStatus,
    ContactMethod,
    PetType,
)
from .base import Base
from .case_updates import CaseUpdate
from .cases import Case, CaseStatus
from .doctors import DoctorProfile
from .donations import Donation, DonationStatus
from .emergencies import Emergency, EmergencyStatus
from .messages import Message
from .saved_welfares import SavedWelfare
from .users import User, UserRole
from .welfare import WelfareOrganization, WelfareStatus

# Export all models and enums
__all__ = [
    # Base
    "Base",
    # Enums
    "UserRole",
    "WelfareStatus",
    "CaseStatus",
    "DonationStatus",
    "PetType",
    "AdoptionStatus",
    "AdoptionRequestStatus",
    "ContactMethod",
    "EmergencyStatus",
    # Models
    "User",
    "WelfareOrganization",
    "Case",
    "Donation",
    "Adoption",
    "AdoptionRequest",
    "Message",
    "Emergency",
    "CaseUpdate",
    "SavedWelfare",
    "DoctorProfile",
]
