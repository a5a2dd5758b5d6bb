from datetime import datetime
from uuid import uuid4

import pytest

from src.app.use_cases.auth.load_current_user_use_case import LoadCurrentUserUseCase
from src.domain.entities import User


@pytest.mark.asyncio
async def test_load_current_user(mock_uow):
    user = User(
        id=uuid4(),
        name="Lifecycle User",
        username="lifecycle_user",
        email="lifecycle@example.com",
        password_hash="$2b$04$hash",
        created_at=datetime(2026, 1, 1),
    )
    mock_uow.users.get_by_id.return_value = user

    result = await LoadCurrentUserUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    profile = result.value.model_dump()
    assert profile["id"] == str(user.id)
    assert profile["username"] == "lifecycle_user"
    assert "password_hash" not in profile
    mock_uow.users.get_by_id.assert_called_once_with(user.id)


@pytest.mark.asyncio
async def test_load_current_user_deleted(mock_uow):
    mock_uow.users.get_by_id.return_value = None

    result = await LoadCurrentUserUseCase(mock_uow).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
