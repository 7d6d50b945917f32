"""Tests for adoption request creation, review and completion."""

import pytest
from sqlalchemy import select

from src.api.core.messages import MessageCode
from src.database.models import (
    Adoption,
    AdoptionRequest,
    AdoptionRequestStatus,
    AdoptionStatus,
    Message,
)
from tests.factories import AdoptionFactory, AdoptionRequestFactory
from tests.utils.assertions import (
    assert_error_response,
    assert_permission_error,
    assert_success_response,
    assert_validation_error,
)


def request_payload(adoption_id) -> dict:
    return {
        "adoptionId": str(adoption_id),
        "donorName": "Dana Donor",
        "contactNumber": "+15551234567",
        "email": "dana@example.com",
        "reason": "Fenced yard and a retired schedule.",
        "preferredContact": "phone",
    }


async def messages_for(session_factory, user_id) -> list[Message]:
    async with session_factory() as session:
        result = await session.execute(
            select(Message).where(Message.recipient_id == user_id)
        )
        return list(result.scalars().all())


class TestCreateAdoptionRequest:
    @pytest.mark.asyncio
    async def test_donor_creates_request(
        self, donor_client, adoption, donor_user, welfare_user, session_factory
    ):
        response = await donor_client.post(
            "/api/adoption-requests", json=request_payload(adoption.id)
        )

        assert_success_response(
            response,
            MessageCode.ADOPTION_REQUEST_CREATED,
            expected_status=201,
            data_assertions={
                "status": "pending",
                "donor_id": str(donor_user.id),
                "preferred_contact": "phone",
                "payment_tx_hash": None,
            },
        )

        inbox = await messages_for(session_factory, welfare_user.id)
        assert len(inbox) == 1
        assert "Biscuit" in inbox[0].content

    @pytest.mark.asyncio
    async def test_welfare_cannot_create_request(self, welfare_client, adoption):
        response = await welfare_client.post(
            "/api/adoption-requests", json=request_payload(adoption.id)
        )

        assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)

    @pytest.mark.asyncio
    async def test_adopted_listing_not_available(
        self, donor_client, db_session, welfare_user
    ):
        adopted = await AdoptionFactory.create_async(
            db_session, posted_by=welfare_user.id, status=AdoptionStatus.ADOPTED
        )

        response = await donor_client.post(
            "/api/adoption-requests", json=request_payload(adopted.id)
        )

        assert_error_response(response, MessageCode.ADOPTION_NOT_AVAILABLE, 409)

    @pytest.mark.asyncio
    async def test_cannot_request_own_listing(
        self, donor_client, db_session, donor_user
    ):
        own = await AdoptionFactory.create_async(db_session, posted_by=donor_user.id)

        response = await donor_client.post(
            "/api/adoption-requests", json=request_payload(own.id)
        )

        assert_permission_error(response)

    @pytest.mark.asyncio
    async def test_unknown_adoption(self, donor_client):
        response = await donor_client.post(
            "/api/adoption-requests",
            json=request_payload("00000000-0000-4000-8000-000000000001"),
        )

        assert_error_response(response, MessageCode.ADOPTION_NOT_FOUND, 404)

    @pytest.mark.asyncio
    async def test_invalid_email(self, donor_client, adoption):
        payload = request_payload(adoption.id) | {"email": "not-an-email"}

        response = await donor_client.post("/api/adoption-requests", json=payload)

        assert_validation_error(response)


class TestReviewAdoptionRequest:
    @pytest.mark.asyncio
    async def test_approval_sends_payment_instructions(
        self,
        welfare_client,
        db_session,
        adoption,
        donor_user,
        session_factory,
        chain_settings,
    ):
        pending = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=donor_user.id
        )

        response = await welfare_client.patch(
            f"/api/adoption-requests/{pending.id}", json={"status": "approved"}
        )

        assert_success_response(
            response,
            MessageCode.ADOPTION_REQUEST_UPDATED,
            data_assertions={"status": "approved"},
        )

        async with session_factory() as session:
            listing = await session.get(Adoption, adoption.id)
        assert listing.status == AdoptionStatus.PENDING

        inbox = await messages_for(session_factory, donor_user.id)
        assert len(inbox) == 1
        assert inbox[0].title == "Adoption Request Approved - Payment Required"
        assert chain_settings.ADOPTION_PAYMENT_RECIPIENT in inbox[0].content
        assert "30 USDT" in inbox[0].content

    @pytest.mark.asyncio
    async def test_rejection_notifies_donor(
        self, welfare_client, db_session, adoption, donor_user, session_factory
    ):
        pending = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=donor_user.id
        )

        response = await welfare_client.patch(
            f"/api/adoption-requests/{pending.id}", json={"status": "rejected"}
        )

        assert_success_response(
            response,
            MessageCode.ADOPTION_REQUEST_UPDATED,
            data_assertions={"status": "rejected"},
        )
        inbox = await messages_for(session_factory, donor_user.id)
        assert [m.title for m in inbox] == ["Adoption Request Rejected"]

    @pytest.mark.asyncio
    async def test_review_cannot_mark_paid(
        self, welfare_client, db_session, adoption, donor_user
    ):
        pending = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=donor_user.id
        )

        response = await welfare_client.patch(
            f"/api/adoption-requests/{pending.id}", json={"status": "paid"}
        )

        assert_error_response(response, MessageCode.INVALID_STATUS_TRANSITION, 409)

    @pytest.mark.asyncio
    async def test_review_only_from_pending(self, welfare_client, approved_request):
        response = await welfare_client.patch(
            f"/api/adoption-requests/{approved_request.id}",
            json={"status": "rejected"},
        )

        assert_error_response(response, MessageCode.INVALID_STATUS_TRANSITION, 409)

    @pytest.mark.asyncio
    async def test_second_approval_on_reserved_listing_conflicts(
        self, welfare_client, db_session, adoption, approved_request, other_donor
    ):
        rival = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=other_donor.id
        )

        response = await welfare_client.patch(
            f"/api/adoption-requests/{rival.id}", json={"status": "approved"}
        )

        body = assert_error_response(response, MessageCode.ADOPTION_NOT_AVAILABLE, 409)
        assert body["details"]["reserved_by"] == str(approved_request.id)

    @pytest.mark.asyncio
    async def test_rejection_allowed_while_listing_reserved(
        self, welfare_client, db_session, adoption, approved_request, other_donor
    ):
        rival = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=other_donor.id
        )

        response = await welfare_client.patch(
            f"/api/adoption-requests/{rival.id}", json={"status": "rejected"}
        )

        assert_success_response(
            response,
            MessageCode.ADOPTION_REQUEST_UPDATED,
            data_assertions={"status": "rejected"},
        )

    @pytest.mark.asyncio
    async def test_only_poster_can_review(
        self, client_factory, other_donor, approved_request
    ):
        async with client_factory(other_donor) as client:
            response = await client.patch(
                f"/api/adoption-requests/{approved_request.id}",
                json={"status": "approved"},
            )

        assert_permission_error(response)


class TestCompleteAdoptionRequest:
    @pytest.mark.asyncio
    async def test_complete_paid_request(
        self,
        welfare_client,
        approved_request,
        adoption,
        donor_user,
        db_session,
        session_factory,
    ):
        approved_request.status = AdoptionRequestStatus.PAID
        approved_request.payment_tx_hash = "0x" + "12" * 32
        await db_session.commit()

        response = await welfare_client.post(
            f"/api/adoption-requests/{approved_request.id}/complete"
        )

        assert_success_response(
            response,
            MessageCode.ADOPTION_COMPLETED,
            data_assertions={"status": "completed"},
        )

        async with session_factory() as session:
            listing = await session.get(Adoption, adoption.id)
        assert listing.status == AdoptionStatus.ADOPTED
        assert listing.adopted_by == donor_user.id

        inbox = await messages_for(session_factory, donor_user.id)
        assert [m.title for m in inbox] == ["Adoption Completed"]

    @pytest.mark.asyncio
    async def test_completion_rejects_open_siblings(
        self,
        welfare_client,
        approved_request,
        adoption,
        other_donor,
        db_session,
        session_factory,
    ):
        approved_request.status = AdoptionRequestStatus.PAID
        approved_request.payment_tx_hash = "0x" + "34" * 32
        await db_session.commit()
        sibling = await AdoptionRequestFactory.create_async(
            db_session, adoption_id=adoption.id, donor_id=other_donor.id
        )

        response = await welfare_client.post(
            f"/api/adoption-requests/{approved_request.id}/complete"
        )

        assert_success_response(response, MessageCode.ADOPTION_COMPLETED)
        async with session_factory() as session:
            stored = await session.get(AdoptionRequest, sibling.id)
        assert stored.status == AdoptionRequestStatus.REJECTED
        inbox = await messages_for(session_factory, other_donor.id)
        assert [m.title for m in inbox] == ["Adoption Request Rejected"]

    @pytest.mark.asyncio
    async def test_cannot_complete_unpaid_request(
        self, welfare_client, approved_request
    ):
        response = await welfare_client.post(
            f"/api/adoption-requests/{approved_request.id}/complete"
        )

        assert_error_response(response, MessageCode.INVALID_STATUS_TRANSITION, 409)

    @pytest.mark.asyncio
    async def test_donor_cannot_complete(self, donor_client, approved_request):
        response = await donor_client.post(
            f"/api/adoption-requests/{approved_request.id}/complete"
        )

        assert_permission_error(response)


class TestListAdoptionRequests:
    @pytest.mark.asyncio
    async def test_my_requests(self, donor_client, approved_request, donor_user):
        response = await donor_client.get("/api/adoption-requests/my")

        data = assert_success_response(response)
        assert [r["id"] for r in data] == [str(approved_request.id)]

    @pytest.mark.asyncio
    async def test_requests_on_my_listings(self, welfare_client, approved_request):
        response = await welfare_client.get("/api/adoption-requests/welfare")

        data = assert_success_response(response)
        assert [r["id"] for r in data] == [str(approved_request.id)]

    @pytest.mark.asyncio
    async def test_requests_for_adoption_poster_only(
        self, welfare_client, client_factory, other_donor, approved_request, adoption
    ):
        response = await welfare_client.get(
            f"/api/adoption-requests/adoption/{adoption.id}"
        )
        data = assert_success_response(response)
        assert len(data) == 1

        async with client_factory(other_donor) as client:
            response = await client.get(
                f"/api/adoption-requests/adoption/{adoption.id}"
            )
        assert_permission_error(response)

    @pytest.mark.asyncio
    async def test_other_donor_sees_none(
        self, client_factory, other_donor, approved_request, session_factory
    ):
        async with client_factory(other_donor) as client:
            response = await client.get("/api/adoption-requests/my")

        assert assert_success_response(response) == []

        async with session_factory() as session:
            total = (await session.execute(select(AdoptionRequest))).scalars().all()
        assert len(total) == 1
