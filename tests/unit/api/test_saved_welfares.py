"""Tests for donor bookmarks on welfare organizations."""

import pytest
from sqlalchemy import select

from src.api.core.messages import MessageCode
from src.database.models import SavedWelfare
from tests.factories import SavedWelfareFactory
from tests.utils.assertions import (
    assert_error_response,
    assert_permission_error,
    assert_success_response,
)

UNKNOWN_WELFARE = "00000000-0000-4000-8000-000000000005"


@pytest.mark.asyncio
async def test_save_welfare(donor_client, donor_user, welfare_org, session_factory):
    response = await donor_client.post(
        "/api/saved-welfares", json={"welfareId": str(welfare_org.id)}
    )

    assert_success_response(
        response,
        MessageCode.WELFARE_SAVED,
        expected_status=201,
        data_assertions={"id": str(welfare_org.id), "name": "Paws Shelter"},
    )
    async with session_factory() as session:
        saved = await session.scalar(
            select(SavedWelfare).where(SavedWelfare.donor_id == donor_user.id)
        )
    assert saved.welfare_id == welfare_org.id


@pytest.mark.asyncio
async def test_save_twice_conflicts(donor_client, donor_user, welfare_org, db_session):
    await SavedWelfareFactory.create_async(
        db_session, donor_id=donor_user.id, welfare_id=welfare_org.id
    )

    response = await donor_client.post(
        "/api/saved-welfares", json={"welfareId": str(welfare_org.id)}
    )

    assert_error_response(response, MessageCode.WELFARE_ALREADY_SAVED, 409)


@pytest.mark.asyncio
async def test_save_unknown_welfare(donor_client):
    response = await donor_client.post(
        "/api/saved-welfares", json={"welfareId": UNKNOWN_WELFARE}
    )

    assert_error_response(response, MessageCode.WELFARE_NOT_FOUND, 404)


@pytest.mark.asyncio
async def test_list_is_per_donor(
    donor_client, donor_user, other_donor, welfare_org, db_session
):
    await SavedWelfareFactory.create_async(
        db_session, donor_id=other_donor.id, welfare_id=welfare_org.id
    )

    response = await donor_client.get("/api/saved-welfares")

    assert assert_success_response(response) == []


@pytest.mark.asyncio
async def test_list_saved(donor_client, donor_user, welfare_org, db_session):
    await SavedWelfareFactory.create_async(
        db_session, donor_id=donor_user.id, welfare_id=welfare_org.id
    )

    response = await donor_client.get("/api/saved-welfares")

    data = assert_success_response(response)
    assert [org["id"] for org in data] == [str(welfare_org.id)]


@pytest.mark.asyncio
async def test_unsave(donor_client, donor_user, welfare_org, db_session):
    await SavedWelfareFactory.create_async(
        db_session, donor_id=donor_user.id, welfare_id=welfare_org.id
    )

    response = await donor_client.delete(f"/api/saved-welfares/{welfare_org.id}")

    assert_success_response(response, MessageCode.WELFARE_UNSAVED)
    listed = await donor_client.get("/api/saved-welfares")
    assert assert_success_response(listed) == []


@pytest.mark.asyncio
async def test_unsave_not_saved(donor_client, welfare_org):
    response = await donor_client.delete(f"/api/saved-welfares/{welfare_org.id}")

    assert_error_response(response, MessageCode.SAVED_WELFARE_NOT_FOUND, 404)


@pytest.mark.asyncio
async def test_welfare_cannot_bookmark(welfare_client, welfare_org):
    response = await welfare_client.post(
        "/api/saved-welfares", json={"welfareId": str(welfare_org.id)}
    )

    assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)
