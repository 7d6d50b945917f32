from fastapi import APIRouter

from src.api.adoption_requests.router import router as adoption_requests_router
from src.api.adoptions.router import router as adoptions_router
from src.api.auth.router import router as auth_router
from src.api.case_updates.router import router as case_updates_router
from src.api.cases.router import router as cases_router
from src.api.chain.router import router as chain_router
from src.api.doctors.router import router as doctors_router
from src.api.donations.router import router as donations_router
from src.api.emergencies.router import router as emergencies_router
from src.api.health.router import router as health_router
from src.api.messages.router import router as messages_router
from src.api.saved_welfares.router import router as saved_welfares_router
from src.api.success_stories.router import router as success_stories_router
from src.api.user.router import router as user_router
from src.api.welfare.router import admin_router as welfare_admin_router
from src.api.welfare.router import router as welfare_router

# Application API router
app_router = APIRouter(prefix="/api")

# Include domain routers
app_router.include_router(auth_router)
app_router.include_router(user_router)
app_router.include_router(welfare_router)
app_router.include_router(welfare_admin_router)
app_router.include_router(saved_welfares_router)
app_router.include_router(doctors_router)
app_router.include_router(cases_router)
app_router.include_router(case_updates_router)
app_router.include_router(success_stories_router)
app_router.include_router(donations_router)
app_router.include_router(emergencies_router)
app_router.include_router(adoptions_router)
app_router.include_router(adoption_requests_router)
app_router.include_router(messages_router)
app_router.include_router(chain_router)

# Main API router
api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(app_router)
