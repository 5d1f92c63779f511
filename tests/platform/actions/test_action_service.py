"""Tests for the action service."""

import pytest
from unittest.mock import AsyncMock

from action_tracker.platform.actions import (
    Action,
    ActionAlreadyClosedError,
    ActionFilter,
    ActionId,
    ActionNotFoundError,
    ActionPatch,
    ActionPersistenceError,
    ActionService,
    ActionStatus,
    OutcomeKind,
    StaticServiceRegistry,
)


class TestActionServiceScenarios:
    """End-to-end behaviour over the in-memory store."""

    @pytest.mark.asyncio
    async def test_create_then_list_by_service(self, action_service, clock):
        created = await action_service.create_action("svc1", 1)
        assert created.is_ok

        listed = await action_service.list_actions(ActionFilter.create(service="svc1"))

        assert [action.id for action in listed.value] == [created.value]
        assert listed.value[0].status == ActionStatus.ACTIVE
        assert listed.value[0].closed_at is None

    @pytest.mark.asyncio
    async def test_close_then_close_again(self, action_service, clock):
        action_id = (await action_service.create_action("svc1", 1)).value

        closed = await action_service.update_action(action_id, ActionPatch.create(status=ActionStatus.COMPLETED))
        again = await action_service.update_action(action_id, ActionPatch.create(status=ActionStatus.COMPLETED))

        assert closed.is_ok
        assert closed.value.status == ActionStatus.COMPLETED
        assert closed.value.closed_at == closed.value.updated_at
        assert again.kind is OutcomeKind.ALREADY_CLOSED
        assert again.message == f"action {action_id} has already been closed with status completed"
        assert again.details["status"] == "completed"

    @pytest.mark.asyncio
    async def test_filter_by_service_and_statuses(self, action_service, clock):
        completed_id = (await action_service.create_action("svc2", 1)).value
        failed_id = (await action_service.create_action("svc2", 2)).value
        await action_service.create_action("svc1", 3)
        await action_service.update_action(completed_id, ActionPatch.create(status=ActionStatus.COMPLETED))
        await action_service.update_action(failed_id, ActionPatch.create(status=ActionStatus.FAILED))

        matching = await action_service.list_actions(ActionFilter.create(
            service="svc2",
            statuses=[ActionStatus.COMPLETED, ActionStatus.FAILED]
        ))
        unrelated = await action_service.list_actions(ActionFilter.create(service="svc3"))

        assert {action.id for action in matching.value} == {completed_id, failed_id}
        assert list(unrelated.value) == []

    @pytest.mark.asyncio
    async def test_unknown_service_persists_nothing(self, action_service, repository):
        outcome = await action_service.create_action("badService", 1)

        assert outcome.kind is OutcomeKind.REGISTRY_CONFLICT
        assert outcome.message == "could not recognize service badService on registry"
        assert len(repository) == 0

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, action_service, sample_action_id):
        outcome = await action_service.update_action(
            sample_action_id, ActionPatch.create(status=ActionStatus.COMPLETED)
        )

        assert outcome.kind is OutcomeKind.NOT_FOUND
        assert outcome.message == f"actionId {sample_action_id} not found"

    @pytest.mark.asyncio
    async def test_list_without_filter_is_newest_first(self, action_service, clock):
        first = (await action_service.create_action("svc1", 1)).value
        second = (await action_service.create_action("svc2", 2)).value

        listed = await action_service.list_actions()

        assert [action.id for action in listed.value] == [second, first]

    @pytest.mark.asyncio
    async def test_get_action(self, action_service, sample_action_id):
        action_id = (await action_service.create_action("svc1", 1, {"key": "value"})).value

        found = await action_service.get_action(action_id)
        missing = await action_service.get_action(sample_action_id)

        assert found.value.metadata == {"key": "value"}
        assert missing.kind is OutcomeKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_active_to_active_keeps_action_open(self, action_service, clock):
        """Setting active on an active action is accepted.

        Open question: this is the current product decision and has not been
        confirmed. Revisit if active to active should be rejected instead.
        """
        action_id = (await action_service.create_action("svc1", 1)).value

        outcome = await action_service.update_action(action_id, ActionPatch.create(status=ActionStatus.ACTIVE))

        assert outcome.is_ok
        assert outcome.value.closed_at is None
        assert outcome.value.updated_at > outcome.value.created_at


class TestActionServiceCollaborators:
    """Interaction with mocked collaborators."""

    @pytest.fixture
    def service(self, mock_action_repository, registry):
        return ActionService(mock_action_repository, registry)

    @pytest.mark.asyncio
    async def test_update_reads_once_and_writes_once(self, service, mock_action_repository):
        current = Action.open("svc1", 1)
        mock_action_repository.find_by_id.return_value = current
        mock_action_repository.update.return_value = current.apply(
            ActionPatch.create(status=ActionStatus.FAILED)
        )
        patch = ActionPatch.create(status=ActionStatus.FAILED)

        outcome = await service.update_action(current.id, patch)

        assert outcome.is_ok
        mock_action_repository.find_by_id.assert_awaited_once_with(current.id)
        mock_action_repository.update.assert_awaited_once_with(current.id, patch)

    @pytest.mark.asyncio
    async def test_closed_action_is_never_written(self, service, mock_action_repository):
        closed = Action.open("svc1", 1).apply(ActionPatch.create(status=ActionStatus.CANCELED))
        mock_action_repository.find_by_id.return_value = closed

        outcome = await service.update_action(closed.id, ActionPatch.create(metadata={}))

        assert outcome.kind is OutcomeKind.ALREADY_CLOSED
        mock_action_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lost_race_is_already_closed(self, service, mock_action_repository):
        current = Action.open("svc1", 1)
        mock_action_repository.find_by_id.return_value = current
        mock_action_repository.update.side_effect = ActionAlreadyClosedError(current.id, ActionStatus.COMPLETED)

        outcome = await service.update_action(current.id, ActionPatch.create(status=ActionStatus.FAILED))

        assert outcome.kind is OutcomeKind.ALREADY_CLOSED
        assert outcome.message.endswith("with status completed")

    @pytest.mark.asyncio
    async def test_deleted_between_read_and_write_is_not_found(self, service, mock_action_repository):
        current = Action.open("svc1", 1)
        mock_action_repository.find_by_id.return_value = current
        mock_action_repository.update.side_effect = ActionNotFoundError(current.id)

        outcome = await service.update_action(current.id, ActionPatch.create(status=ActionStatus.FAILED))

        assert outcome.kind is OutcomeKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_persistence_failure_propagates(self, service, mock_action_repository):
        mock_action_repository.create.side_effect = ActionPersistenceError("failed", operation="create")

        with pytest.raises(ActionPersistenceError, match="failed"):
            await service.create_action("svc1", 1)

    @pytest.mark.asyncio
    async def test_registry_consulted_before_store(self, mock_action_repository, mocker):
        registry = StaticServiceRegistry(["svc1"])
        mocker.patch.object(registry, "is_known", AsyncMock(return_value=False))
        service = ActionService(mock_action_repository, registry)

        outcome = await service.create_action("svc1", 1)

        assert outcome.kind is OutcomeKind.REGISTRY_CONFLICT
        registry.is_known.assert_awaited_once_with("svc1")
        mock_action_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_passes_open_action_to_store(self, service, mock_action_repository):
        mock_action_repository.create.side_effect = lambda action: action

        outcome = await service.create_action("svc1", 7, {"a": 1})

        stored = mock_action_repository.create.call_args[0][0]
        assert isinstance(outcome.value, ActionId)
        assert outcome.value == stored.id
        assert stored.status == ActionStatus.ACTIVE
        assert stored.state == 7
        assert stored.metadata == {"a": 1}
