"""Tests for doctor accounts and their case assignments."""

import pytest
import pytest_asyncio
from sqlalchemy import select

from src.api.core.messages import MessageCode
from src.database.models import Case, DoctorProfile, User, UserRole
from tests.factories import (
    CaseFactory,
    DoctorProfileFactory,
    UserFactory,
    WelfareOrganizationFactory,
)
from tests.factories.users import DEFAULT_PASSWORD
from tests.utils.assertions import (
    assert_error_response,
    assert_permission_error,
    assert_success_response,
    assert_validation_error,
)


@pytest_asyncio.fixture
async def doctor_profile(db_session, doctor_user, welfare_org) -> DoctorProfile:
    return await DoctorProfileFactory.create_async(
        db_session,
        user_id=doctor_user.id,
        welfare_id=welfare_org.id,
        specialization="Surgery",
    )


@pytest_asyncio.fixture
async def case(db_session, welfare_org) -> Case:
    return await CaseFactory.create_async(db_session, welfare_id=welfare_org.id)


@pytest_asyncio.fixture
async def rival_welfare(db_session):
    rival = await UserFactory.create_async(db_session, role=UserRole.WELFARE)
    await WelfareOrganizationFactory.create_async(db_session, user_id=rival.id)
    return rival


class TestDoctorAccounts:
    @pytest.mark.asyncio
    async def test_register_doctor(self, welfare_client, welfare_org, public_client):
        response = await welfare_client.post(
            "/api/doctors",
            json={
                "name": "Dr. Rivera",
                "email": "Rivera@VetClinic.com",
                "password": "stitches-and-splints",
                "specialization": "Orthopedics",
            },
        )

        assert_success_response(
            response,
            MessageCode.DOCTOR_REGISTERED,
            expected_status=201,
            data_assertions={
                "name": "Dr. Rivera",
                "email": "rivera@vetclinic.com",
                "welfare_id": str(welfare_org.id),
                "is_active": True,
            },
        )
        login = await public_client.post(
            "/api/auth/login",
            json={
                "email": "rivera@vetclinic.com",
                "password": "stitches-and-splints",
            },
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_register_with_taken_email(self, welfare_client, donor_user):
        response = await welfare_client.post(
            "/api/doctors",
            json={
                "name": "Dr. Dup",
                "email": donor_user.email,
                "password": DEFAULT_PASSWORD,
                "specialization": "General",
            },
        )

        assert_error_response(response, MessageCode.EMAIL_ALREADY_REGISTERED, 409)

    @pytest.mark.asyncio
    async def test_register_rejects_bad_email(self, welfare_client):
        response = await welfare_client.post(
            "/api/doctors",
            json={
                "name": "Dr. Typo",
                "email": "not-an-email",
                "password": DEFAULT_PASSWORD,
                "specialization": "General",
            },
        )

        assert_validation_error(response)

    @pytest.mark.asyncio
    async def test_donor_cannot_register_doctor(self, donor_client):
        response = await donor_client.post(
            "/api/doctors",
            json={
                "name": "Dr. Nope",
                "email": "nope@example.com",
                "password": DEFAULT_PASSWORD,
                "specialization": "General",
            },
        )

        assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)

    @pytest.mark.asyncio
    async def test_list_welfare_doctors(
        self, donor_client, welfare_org, doctor_profile, doctor_user
    ):
        response = await donor_client.get(f"/api/doctors/welfare/{welfare_org.id}")

        data = assert_success_response(response)
        assert [d["id"] for d in data] == [str(doctor_profile.id)]
        assert data[0]["name"] == doctor_user.name

    @pytest.mark.asyncio
    async def test_get_unknown_doctor(self, donor_client):
        response = await donor_client.get(
            "/api/doctors/00000000-0000-4000-8000-000000000006"
        )

        assert_error_response(response, MessageCode.DOCTOR_NOT_FOUND, 404)

    @pytest.mark.asyncio
    async def test_update_doctor(self, welfare_client, doctor_profile):
        response = await welfare_client.patch(
            f"/api/doctors/{doctor_profile.id}",
            json={"specialization": "Dentistry", "isActive": False},
        )

        assert_success_response(
            response,
            MessageCode.DOCTOR_UPDATED,
            data_assertions={"specialization": "Dentistry", "is_active": False},
        )

    @pytest.mark.asyncio
    async def test_other_welfare_cannot_update(
        self, client_factory, rival_welfare, doctor_profile
    ):
        async with client_factory(rival_welfare) as client:
            response = await client.patch(
                f"/api/doctors/{doctor_profile.id}", json={"name": "Hijacked"}
            )

        assert_permission_error(response)

    @pytest.mark.asyncio
    async def test_remove_doctor_unassigns_cases(
        self,
        welfare_client,
        db_session,
        doctor_profile,
        doctor_user,
        case,
        session_factory,
    ):
        case.doctor_id = doctor_user.id
        await db_session.commit()

        response = await welfare_client.delete(f"/api/doctors/{doctor_profile.id}")

        assert_success_response(response, MessageCode.DOCTOR_REMOVED)
        async with session_factory() as session:
            assert await session.get(User, doctor_user.id) is None
            assert await session.get(DoctorProfile, doctor_profile.id) is None
            stored = await session.get(Case, case.id)
        assert stored.doctor_id is None


class TestDoctorCases:
    @pytest.mark.asyncio
    async def test_assign_case(self, welfare_client, doctor_profile, doctor_user, case):
        response = await welfare_client.post(
            f"/api/doctors/{doctor_profile.id}/assign-case",
            json={"caseId": str(case.id)},
        )

        assert_success_response(
            response,
            MessageCode.CASE_UPDATED,
            data_assertions={"doctor_id": str(doctor_user.id)},
        )

    @pytest.mark.asyncio
    async def test_inactive_doctor_cannot_take_cases(
        self, welfare_client, db_session, doctor_profile, case
    ):
        doctor_profile.is_active = False
        await db_session.commit()

        response = await welfare_client.post(
            f"/api/doctors/{doctor_profile.id}/assign-case",
            json={"caseId": str(case.id)},
        )

        assert_error_response(response, MessageCode.CONFLICT, 409)

    @pytest.mark.asyncio
    async def test_remove_case(
        self, welfare_client, db_session, doctor_profile, doctor_user, case
    ):
        case.doctor_id = doctor_user.id
        await db_session.commit()

        response = await welfare_client.post(
            f"/api/doctors/{doctor_profile.id}/remove-case",
            json={"caseId": str(case.id)},
        )

        assert_success_response(
            response, MessageCode.CASE_UPDATED, data_assertions={"doctor_id": None}
        )

    @pytest.mark.asyncio
    async def test_remove_case_not_assigned(self, welfare_client, doctor_profile, case):
        response = await welfare_client.post(
            f"/api/doctors/{doctor_profile.id}/remove-case",
            json={"caseId": str(case.id)},
        )

        assert_error_response(response, MessageCode.CONFLICT, 409)

    @pytest.mark.asyncio
    async def test_doctor_sees_assigned_cases(
        self, client_factory, db_session, doctor_profile, doctor_user, case
    ):
        case.doctor_id = doctor_user.id
        await db_session.commit()
        await CaseFactory.create_async(db_session, welfare_id=case.welfare_id)

        async with client_factory(doctor_user) as client:
            response = await client.get("/api/doctors/me/cases")

        data = assert_success_response(response)
        assert [c["id"] for c in data] == [str(case.id)]

    @pytest.mark.asyncio
    async def test_donor_has_no_assigned_cases_view(self, donor_client):
        response = await donor_client.get("/api/doctors/me/cases")

        assert_permission_error(response, MessageCode.AUTH_INSUFFICIENT_ROLE)
