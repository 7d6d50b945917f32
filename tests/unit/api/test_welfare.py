"""Tests for welfare organization endpoints."""

import pytest

from src.api.core.messages import MessageCode
from src.database.models import UserRole, WelfareStatus
from tests.factories import UserFactory, WelfareOrganizationFactory
from tests.utils.assertions import (
    assert_error_response,
    assert_permission_error,
    assert_success_response,
)


@pytest.mark.asyncio
async def test_list_only_approved_organizations(public_client, db_session, welfare_org):
    pending_owner = await UserFactory.create_async(db_session, role=UserRole.WELFARE)
    await WelfareOrganizationFactory.create_async(
        db_session, user_id=pending_owner.id, status=WelfareStatus.PENDING
    )

    response = await public_client.get("/api/welfare")

    data = assert_success_response(response)
    assert [org["id"] for org in data] == [str(welfare_org.id)]


@pytest.mark.asyncio
async def test_get_my_organization(welfare_client, welfare_org):
    response = await welfare_client.get("/api/welfare/me")

    assert_success_response(
        response,
        data_assertions={"id": str(welfare_org.id), "name": "Paws Shelter"},
    )


@pytest.mark.asyncio
async def test_donor_has_no_organization(donor_client):
    response = await donor_client.get("/api/welfare/me")

    assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)


@pytest.mark.asyncio
async def test_update_wallet_is_checksummed(welfare_client):
    response = await welfare_client.patch(
        "/api/welfare/me",
        json={
            "wallet_address": "0x90f79bf6eb2c4f870365e785982e1f101e93b906",
            "description": "Rescue and rehoming since 2010",
        },
    )

    assert_success_response(
        response,
        MessageCode.WELFARE_UPDATED,
        data_assertions={
            "wallet_address": "0x90F79bf6EB2c4f870365E785982E1f101E93b906",
            "description": "Rescue and rehoming since 2010",
        },
    )


@pytest.mark.asyncio
async def test_update_rejects_invalid_wallet(welfare_client, welfare_org):
    response = await welfare_client.patch(
        "/api/welfare/me", json={"wallet_address": "0xnot-an-address"}
    )

    body = assert_error_response(response, MessageCode.INVALID_ADDRESS, 400)
    assert body["details"]["address"] == "0xnot-an-address"


@pytest.mark.asyncio
async def test_admin_approves_organization(
    client_factory, admin_user, db_session
):
    owner = await UserFactory.create_async(db_session, role=UserRole.WELFARE)
    pending = await WelfareOrganizationFactory.create_async(
        db_session, user_id=owner.id, status=WelfareStatus.PENDING
    )

    async with client_factory(admin_user) as client:
        response = await client.patch(
            f"/api/admin/welfare/{pending.id}/status", json={"status": "approved"}
        )

    assert_success_response(
        response,
        MessageCode.WELFARE_UPDATED,
        data_assertions={"status": "approved"},
    )


@pytest.mark.asyncio
async def test_non_admin_cannot_change_status(welfare_client, welfare_org):
    response = await welfare_client.patch(
        f"/api/admin/welfare/{welfare_org.id}/status", json={"status": "approved"}
    )

    assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)


@pytest.mark.asyncio
async def test_admin_status_unknown_organization(client_factory, admin_user):
    async with client_factory(admin_user) as client:
        response = await client.patch(
            "/api/admin/welfare/00000000-0000-4000-8000-000000000003/status",
            json={"status": "rejected"},
        )

    assert_error_response(response, MessageCode.WELFARE_NOT_FOUND, 404)
