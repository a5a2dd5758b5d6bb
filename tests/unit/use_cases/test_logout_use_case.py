from uuid import uuid4

import pytest

from src.app.use_cases.auth.logout_use_case import LogoutUseCase


@pytest.mark.asyncio
async def test_logout_revokes_session(mock_uow, session_manager):
    user_id = uuid4()
    issued = await session_manager.issue(user_id)

    result = await LogoutUseCase(mock_uow, session_manager).execute(issued.token)

    assert result.is_ok()
    assert result.value.success is True
    assert await session_manager.resolve(issued.token) is None

    audit = mock_uow.audit_events.create.call_args.args[0]
    assert audit.action == "logout"
    assert audit.user_id == user_id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_twice(mock_uow, session_manager):
    issued = await session_manager.issue(uuid4())
    use_case = LogoutUseCase(mock_uow, session_manager)

    first = await use_case.execute(issued.token)
    second = await use_case.execute(issued.token)

    assert first.is_ok() and first.value.success is True
    assert second.is_ok() and second.value.success is True
    # Only the call that actually revoked something is audited
    mock_uow.audit_events.create.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "unknown-token"])
async def test_logout_without_live_session(mock_uow, session_manager, token):
    result = await LogoutUseCase(mock_uow, session_manager).execute(token)

    assert result.is_ok()
    assert result.value.success is True
    mock_uow.audit_events.create.assert_not_called()
    mock_uow.commit.assert_not_called()
