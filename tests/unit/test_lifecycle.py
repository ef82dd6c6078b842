"""Unit tests for the stack lifecycle guard."""

import pytest

from gaia.kernel.exceptions import StackArchivedError
from gaia.kernel.models import Job, JobStatus, Stack, StackState
from gaia.orchestration.state_machine import accepts_work, assert_accepts_work


class TestAcceptsWork:

    def test_active_accepts_work(self):
        assert accepts_work(StackState.ACTIVE) is True

    def test_archived_refuses_work(self):
        assert accepts_work(StackState.ARCHIVED) is False

    def test_plain_string_states(self):
        """SQLite hands enum columns back as plain strings."""
        assert accepts_work("active") is True
        assert accepts_work("archived") is False


class TestAssertAcceptsWork:

    def test_new_stack_defaults_to_active(self):
        stack = Stack(name="fresh")
        assert stack.state == StackState.ACTIVE
        assert_accepts_work(stack)

    def test_archived_stack_raises(self):
        stack = Stack(id="s-1", name="old", state=StackState.ARCHIVED)

        with pytest.raises(StackArchivedError) as exc_info:
            assert_accepts_work(stack)

        assert exc_info.value.stack_id == "s-1"


class TestJobStatus:

    def test_launch_status_is_the_only_status(self):
        """Execution states belong to the worker, not to this core."""
        assert [status.value for status in JobStatus] == ["pending"]

    def test_new_job_is_pending(self):
        assert Job(stack_id="s-1").status == JobStatus.PENDING
