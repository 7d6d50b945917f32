from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from src.api.router import api_router
from src.database.connection import AsyncSessionLocal, async_engine
from src.modules.chain.contract import ChainReadClient
from src.modules.chain.provider import build_web3
from src.modules.chain.verifier import TransactionVerifier
from src.utils.logger import setup_logging
from src.utils.settings.app import AppSettings
from src.utils.settings.chain import ChainSettings

app_settings = AppSettings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Wire the session factory and chain clients into ``app.state``."""
    logger = setup_logging(app_settings.is_production)
    app_settings.validate_prod()
    logger.info(
        "Starting WelfareChain API",
        environment=app_settings.ENVIRONMENT,
        version=app_settings.API_VERSION,
    )

    app.state.session_factory = AsyncSessionLocal

    chain_settings = ChainSettings()
    w3 = build_web3(chain_settings)
    app.state.chain_settings = chain_settings
    app.state.web3 = w3
    app.state.chain_reader = ChainReadClient(
        w3, chain_settings.DONATION_CONTRACT_ADDRESS
    )
    app.state.transaction_verifier = TransactionVerifier(
        w3, min_confirmations=chain_settings.CHAIN_MIN_CONFIRMATIONS
    )
    logger.info(
        "Chain clients ready",
        rpc_url=chain_settings.CHAIN_RPC_URL,
        contract=chain_settings.DONATION_CONTRACT_ADDRESS,
        verify_payments=chain_settings.CHAIN_VERIFY_PAYMENTS,
    )

    yield

    logger.info("Shutting down WelfareChain API")
    await w3.provider.disconnect()
    await async_engine.dispose()


def create_app() -> FastAPI:
    hide_docs = app_settings.is_production
    application = FastAPI(
        title="WelfareChain API",
        description=(
            "Donations, adoptions and on-chain payment reconciliation "
            "for animal welfare organizations"
        ),
        version=app_settings.API_VERSION,
        lifespan=lifespan,
        docs_url=None if hide_docs else "/docs",
        redoc_url=None if hide_docs else "/redoc",
        openapi_url=None if hide_docs else "/openapi.json",
    )

    register_exception_handlers(application)

    # Added last runs first: logging wraps everything below it
    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    application.add_middleware(
        SecurityHeadersMiddleware, is_production=app_settings.is_production
    )
    application.add_middleware(
        PayloadSizeMiddleware, max_request_size=app_settings.MAX_REQUEST_SIZE
    )
    application.middleware("http")(logging_middleware)

    application.include_router(api_router)
    return application


app = create_app()


def run_dev_server():
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
