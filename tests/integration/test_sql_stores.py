"""Store tests against SQLite: scoped finds, saves and job snapshots."""

import pytest
from sqlalchemy import select

from gaia.kernel.models import Job, JobStatus, JobType, Stack, StackState, StoredCredentials, TerraformImage
from gaia.kernel.repositories import CredentialsRepository, JobRepository, StackRepository
from gaia.schemas.credentials import AWSCredentials, AzureRMCredentials


class TestStackRepository:

    @pytest.mark.asyncio
    async def test_find_all(self, db_session, seeded):
        stacks = await StackRepository(db_session).find_all()

        assert {s.id for s in stacks} == {"red-stack", "blue-stack", "bob-stack"}

    @pytest.mark.asyncio
    async def test_find_by_owner_team(self, db_session, seeded):
        stacks = await StackRepository(db_session).find_by_owner_team(seeded["red"])

        assert [s.id for s in stacks] == ["red-stack"]

    @pytest.mark.asyncio
    async def test_find_by_created_by(self, db_session, seeded):
        stacks = await StackRepository(db_session).find_by_created_by(seeded["bob"])

        assert [s.id for s in stacks] == ["bob-stack"]

    @pytest.mark.asyncio
    async def test_find_by_id(self, db_session, seeded):
        repository = StackRepository(db_session)

        assert (await repository.find_by_id("blue-stack")).name == "blue network"
        assert await repository.find_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_find_by_id_and_owner_team(self, db_session, seeded):
        repository = StackRepository(db_session)

        assert (await repository.find_by_id_and_owner_team("red-stack", seeded["red"])).id == "red-stack"
        assert await repository.find_by_id_and_owner_team("blue-stack", seeded["red"]) is None
        assert await repository.find_by_id_and_owner_team("bob-stack", seeded["red"]) is None

    @pytest.mark.asyncio
    async def test_loaded_stack_carries_module_and_owners(self, session_maker, seeded):
        async with session_maker() as session:
            stack = await StackRepository(session).find_by_id("red-stack")

        assert stack.module.terraform_image == TerraformImage(repository="hashicorp/terraform", tag="1.5.7")
        assert stack.owner_team.name == "red"
        assert stack.created_by.username == "alice"
        assert stack.state == StackState.ACTIVE

    @pytest.mark.asyncio
    async def test_save_inserts_new_stack(self, db_session, seeded):
        repository = StackRepository(db_session)
        stack = Stack(id="new-stack", name="new", module=seeded["module"], created_by=seeded["bob"])

        await repository.save(stack)
        await db_session.commit()

        assert (await repository.find_by_id("new-stack")).created_by_username == "bob"

    @pytest.mark.asyncio
    async def test_save_updates_existing_stack(self, db_session, seeded):
        repository = StackRepository(db_session)
        stack = seeded["bob_stack"]
        stack.description = "scratch space"

        await repository.save(stack)
        await db_session.commit()

        assert (await repository.find_by_id("bob-stack")).description == "scratch space"


class TestJobRepository:

    @pytest.mark.asyncio
    async def test_job_snapshot_round_trip(self, session_maker, db_session, seeded):
        credentials = AWSCredentials(access_key_id="AKIA", secret_access_key="secret")
        job = Job(
            id="job-1",
            stack_id="red-stack",
            type=JobType.PLAN,
            user=seeded["alice"],
            terraform_image=TerraformImage(repository="hashicorp/terraform", tag="1.5.7"),
            credentials=credentials,
        )
        await JobRepository(db_session).save(job)
        await db_session.commit()

        async with session_maker() as session:
            loaded = (await session.execute(select(Job).where(Job.id == "job-1"))).scalar_one()

        assert loaded.type == JobType.PLAN
        assert loaded.status == JobStatus.PENDING
        assert loaded.user.username == "alice"
        assert loaded.terraform_image == TerraformImage(repository="hashicorp/terraform", tag="1.5.7")
        assert loaded.credentials == credentials

    @pytest.mark.asyncio
    async def test_find_by_stack_id(self, db_session, seeded):
        repository = JobRepository(db_session)
        for job_id in ("job-a", "job-b"):
            await repository.save(Job(
                id=job_id,
                stack_id="bob-stack",
                type=JobType.RUN,
                user=seeded["bob"],
                terraform_image=TerraformImage(),
            ))
        await db_session.commit()

        jobs = await repository.find_by_stack_id("bob-stack")

        assert {j.id for j in jobs} == {"job-a", "job-b"}
        assert await repository.find_by_stack_id("red-stack") == []


class TestCredentialsRepository:

    @pytest.mark.asyncio
    async def test_save_and_find_by_id(self, session_maker, db_session, seeded):
        azure = AzureRMCredentials(client_id="c", client_secret="s", subscription_id="sub", tenant_id="t")
        stored = await CredentialsRepository(db_session).save(
            "azure prod", azure, created_by=seeded["alice"], credentials_id="cred-1"
        )
        await db_session.commit()

        assert stored.provider == "azurerm"
        async with session_maker() as session:
            found = await CredentialsRepository(session).find_by_id("cred-1")
            row = await session.get(StoredCredentials, "cred-1")

        assert found == azure
        assert row.created_by_username == "alice"

    @pytest.mark.asyncio
    async def test_unknown_id_is_none(self, db_session, seeded):
        assert await CredentialsRepository(db_session).find_by_id("nope") is None
