"""Global test configuration and fixtures for WelfareChain API."""

import os

os.environ.setdefault("ENVIRONMENT", "TEST")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-for-testing-only")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from collections.abc import AsyncGenerator
from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.database.models import (
    Adoption,
    AdoptionRequest,
    AdoptionRequestStatus,
    AdoptionStatus,
    Base,
    User,
    UserRole,
    WelfareOrganization,
)
from src.modules.chain.contract import ChainReadClient
from src.modules.chain.verifier import TransactionVerifier, VerifiedTransfer
from src.modules.user.tokens import create_access_token
from src.utils.settings.chain import ChainSettings
from tests.factories import (
    AdoptionFactory,
    AdoptionRequestFactory,
    UserFactory,
    WelfareOrganizationFactory,
)
from tests.utils.constants import BASE_URL, PAYER_ADDRESS, PAYMENT_TX_HASH


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    """File-backed SQLite database, fresh per test."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'welfarechain.db'}",
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging and inspecting test data."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def chain_settings() -> ChainSettings:
    return ChainSettings(
        CHAIN_VERIFY_PAYMENTS=True,
        CHAIN_MIN_CONFIRMATIONS=1,
        PAYMENT_REPLAY_GUARD=True,
    )


@pytest.fixture
def verified_transfer(chain_settings) -> VerifiedTransfer:
    return VerifiedTransfer(
        tx_hash=PAYMENT_TX_HASH,
        sender=PAYER_ADDRESS,
        recipient=chain_settings.ADOPTION_PAYMENT_RECIPIENT,
        value=chain_settings.adoption_fee_base_units,
        block_number=100,
        confirmations=3,
    )


@pytest.fixture
def transaction_verifier(verified_transfer) -> MagicMock:
    """Verifier double that accepts every transfer unless told otherwise."""
    verifier = MagicMock(spec=TransactionVerifier)
    verifier.verify_transfer = AsyncMock(return_value=verified_transfer)
    return verifier


@pytest.fixture
def chain_reader() -> MagicMock:
    reader = MagicMock(spec=ChainReadClient)
    reader.get_organization_info = AsyncMock()
    reader.get_platform_stats = AsyncMock()
    reader.get_donor_history = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def fake_web3() -> MagicMock:
    w3 = MagicMock()
    w3.eth.get_block_number = AsyncMock(return_value=12345)
    return w3


@pytest_asyncio.fixture
async def app(
    session_factory,
    chain_settings,
    transaction_verifier,
    chain_reader,
    fake_web3,
) -> AsyncGenerator[FastAPI, None]:
    """Create FastAPI application with lifespan manager and test doubles."""
    from src.main import app

    async with LifespanManager(app):
        app.state.session_factory = session_factory
        app.state.chain_settings = chain_settings
        app.state.transaction_verifier = transaction_verifier
        app.state.chain_reader = chain_reader
        app.state.web3 = fake_web3
        yield app


# Test Data Fixtures
@pytest_asyncio.fixture
async def donor_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_async(
        db_session, name="Dana Donor", role=UserRole.DONOR
    )


@pytest_asyncio.fixture
async def other_donor(db_session: AsyncSession) -> User:
    return await UserFactory.create_async(
        db_session, name="Omar Other", role=UserRole.DONOR
    )


@pytest_asyncio.fixture
async def welfare_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_async(
        db_session, name="Paws Shelter", role=UserRole.WELFARE
    )


@pytest_asyncio.fixture
async def welfare_org(
    db_session: AsyncSession, welfare_user: User
) -> WelfareOrganization:
    return await WelfareOrganizationFactory.create_async(
        db_session, user_id=welfare_user.id, name="Paws Shelter"
    )


@pytest_asyncio.fixture
async def doctor_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_async(
        db_session, name="Dr. Vet", role=UserRole.DOCTOR
    )


@pytest_asyncio.fixture
async def admin_user(db_session: AsyncSession) -> User:
    return await UserFactory.create_async(
        db_session, name="Ada Admin", role=UserRole.ADMIN
    )


@pytest_asyncio.fixture
async def adoption(db_session: AsyncSession, welfare_user: User) -> Adoption:
    return await AdoptionFactory.create_async(
        db_session, name="Biscuit", posted_by=welfare_user.id
    )


@pytest_asyncio.fixture
async def approved_request(
    db_session: AsyncSession, adoption: Adoption, donor_user: User
) -> AdoptionRequest:
    """An approved request awaiting its adoption fee."""
    adoption.status = AdoptionStatus.PENDING
    return await AdoptionRequestFactory.create_async(
        db_session,
        adoption_id=adoption.id,
        donor_id=donor_user.id,
        donor_name=donor_user.name,
        status=AdoptionRequestStatus.APPROVED,
    )


# JWT Token Fixtures
@pytest.fixture
def token_factory() -> Callable[[User], str]:
    def create_token(user: User) -> str:
        return create_access_token(user.id, UserRole(user.role))

    return create_token


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url=BASE_URL) as ac:
        yield ac


@pytest.fixture
def client_factory(app: FastAPI, token_factory):
    """Factory for creating HTTP clients authorized as a given user."""

    def create_client_for_user(user: User) -> AsyncClient:
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url=BASE_URL,
            headers={"Authorization": f"Bearer {token_factory(user)}"},
        )

    return create_client_for_user


@pytest_asyncio.fixture
async def donor_client(
    client_factory, donor_user: User
) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(donor_user) as ac:
        yield ac


@pytest_asyncio.fixture
async def welfare_client(
    client_factory, welfare_user: User, welfare_org: WelfareOrganization
) -> AsyncGenerator[AsyncClient, None]:
    async with client_factory(welfare_user) as ac:
        yield ac
