"""Public read views over case updates flagged as success stories."""

from uuid import UUID

from fastapi import APIRouter

from src.api.case_updates.schemas import CaseUpdateListResponse, CaseUpdateModel
from src.api.core.dependencies import CaseUpdateServiceDep
from src.api.core.messages import APIResponse

router = APIRouter(prefix="/success-stories", tags=["success-stories"])


@router.get("", response_model=CaseUpdateListResponse)
async def featured_success_stories(
    case_update_service: CaseUpdateServiceDep,
) -> CaseUpdateListResponse:
    stories = await case_update_service.featured_success_stories()
    return APIResponse.success(
        data=[CaseUpdateModel.model_validate(s) for s in stories]
    )


@router.get("/case/{case_id}", response_model=CaseUpdateListResponse)
async def case_success_stories(
    case_id: UUID, case_update_service: CaseUpdateServiceDep
) -> CaseUpdateListResponse:
    stories = await case_update_service.success_stories(case_id=case_id)
    return APIResponse.success(
        data=[CaseUpdateModel.model_validate(s) for s in stories]
    )


@router.get("/welfare/{welfare_id}", response_model=CaseUpdateListResponse)
async def welfare_success_stories(
    welfare_id: UUID, case_update_service: CaseUpdateServiceDep
) -> CaseUpdateListResponse:
    stories = await case_update_service.success_stories(welfare_id=welfare_id)
    return APIResponse.success(
        data=[CaseUpdateModel.model_validate(s) for s in stories]
    )
