from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession
from web3 import AsyncWeb3

from src.api.core.constants import BEARER_SCHEME
from src.api.core.exceptions.base import WelfareChainException
from src.api.core.messages import MessageCode
from src.core.context import AuthenticatedUserContext
from src.modules.adoption.service import AdoptionService
from src.modules.adoption_request.service import AdoptionRequestService
from src.modules.case.service import CaseService
from src.modules.case_update.service import CaseUpdateService
from src.modules.chain.contract import ChainReadClient
from src.modules.chain.verifier import TransactionVerifier
from src.modules.doctor.service import DoctorService
from src.modules.donation.service import DonationService
from src.modules.emergency.service import EmergencyService
from src.modules.message.service import MessageService
from src.modules.saved_welfare.service import SavedWelfareService
from src.modules.user.auth_handlers import WWW_AUTHENTICATE, handle_jwt_auth
from src.modules.user.management import UserManagementService
from src.modules.welfare.service import WelfareService
from src.utils.settings.chain import ChainSettings

bearer_scheme = HTTPBearer(auto_error=False)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session from app state."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


def get_web3(request: Request) -> AsyncWeb3:
    return request.app.state.web3


def get_chain_read_client(request: Request) -> ChainReadClient:
    return request.app.state.chain_reader


def get_transaction_verifier(request: Request) -> TransactionVerifier:
    return request.app.state.transaction_verifier


def get_chain_settings(request: Request) -> ChainSettings:
    return request.app.state.chain_settings


AsyncSessionDep = Annotated[AsyncSession, Depends(get_db_session)]
Web3Dep = Annotated[AsyncWeb3, Depends(get_web3)]
ChainReadClientDep = Annotated[ChainReadClient, Depends(get_chain_read_client)]
TransactionVerifierDep = Annotated[
    TransactionVerifier, Depends(get_transaction_verifier)
]
ChainSettingsDep = Annotated[ChainSettings, Depends(get_chain_settings)]


async def get_user_management_service(db: AsyncSessionDep) -> UserManagementService:
    """Get user management service with database session."""
    return UserManagementService(db)


async def get_welfare_service(db: AsyncSessionDep) -> WelfareService:
    return WelfareService(db)


async def get_case_service(db: AsyncSessionDep) -> CaseService:
    return CaseService(db)


async def get_message_service(db: AsyncSessionDep) -> MessageService:
    return MessageService(db)


async def get_emergency_service(db: AsyncSessionDep) -> EmergencyService:
    return EmergencyService(db)


async def get_case_update_service(db: AsyncSessionDep) -> CaseUpdateService:
    return CaseUpdateService(db)


async def get_saved_welfare_service(db: AsyncSessionDep) -> SavedWelfareService:
    return SavedWelfareService(db)


async def get_doctor_service(db: AsyncSessionDep) -> DoctorService:
    return DoctorService(db)


async def get_donation_service(
    db: AsyncSessionDep,
    verifier: TransactionVerifierDep,
    settings: ChainSettingsDep,
) -> DonationService:
    """Get donation service wired to the on-chain verifier."""
    return DonationService(db, verifier, settings)


async def get_adoption_service(db: AsyncSessionDep) -> AdoptionService:
    return AdoptionService(db)


async def get_adoption_request_service(
    db: AsyncSessionDep,
    verifier: TransactionVerifierDep,
    settings: ChainSettingsDep,
) -> AdoptionRequestService:
    """Get adoption request service wired to the on-chain verifier."""
    return AdoptionRequestService(db, verifier, settings)


async def get_current_user_authenticated(
    request: Request,
    db: AsyncSessionDep,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
) -> AuthenticatedUserContext:
    """Resolve the bearer token into an explicit caller identity."""
    if credentials is None or credentials.scheme.lower() != BEARER_SCHEME:
        raise WelfareChainException(
            MessageCode.AUTH_REQUIRED,
            status.HTTP_401_UNAUTHORIZED,
            {"description": "Bearer token required"},
            headers=WWW_AUTHENTICATE,
        )

    current_user = await handle_jwt_auth(db, credentials.credentials)
    request.state.user_id = str(current_user.user_id)
    request.state.role = current_user.role.value
    return current_user


UserManagementServiceDep = Annotated[
    UserManagementService, Depends(get_user_management_service)
]
WelfareServiceDep = Annotated[WelfareService, Depends(get_welfare_service)]
CaseServiceDep = Annotated[CaseService, Depends(get_case_service)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
EmergencyServiceDep = Annotated[EmergencyService, Depends(get_emergency_service)]
CaseUpdateServiceDep = Annotated[CaseUpdateService, Depends(get_case_update_service)]
SavedWelfareServiceDep = Annotated[
    SavedWelfareService, Depends(get_saved_welfare_service)
]
DoctorServiceDep = Annotated[DoctorService, Depends(get_doctor_service)]
DonationServiceDep = Annotated[DonationService, Depends(get_donation_service)]
AdoptionServiceDep = Annotated[AdoptionService, Depends(get_adoption_service)]
AdoptionRequestServiceDep = Annotated[
    AdoptionRequestService, Depends(get_adoption_request_service)
]

CurrentUserAuthDep = Annotated[
    AuthenticatedUserContext, Depends(get_current_user_authenticated)
]
