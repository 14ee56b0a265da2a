from datetime import timedelta

import pytest

from src.auth.dependencies import get_current_user, get_current_admin_user
from src.auth.exceptions import TokenMissingException, TokenInvalidException, PermissionDeniedException
from src.auth.models import CurrentUser
from src.auth.security import create_access_token, decode_access_token


@pytest.mark.asyncio
async def test_get_current_user_reads_claims():
    token = create_access_token({"sub": "42", "role": "Customer"})

    user = await get_current_user(token)

    assert user.id == "42"
    assert user.role == "Customer"
    assert user.is_elevated is False

@pytest.mark.asyncio
async def test_get_current_user_without_token():
    with pytest.raises(TokenMissingException) as exc_info:
        await get_current_user(None)
    assert exc_info.value.status_code == 401
    assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}

@pytest.mark.asyncio
async def test_get_current_user_expired_token():
    token = create_access_token({"sub": "42"}, expires_delta=timedelta(minutes=-5))
    with pytest.raises(TokenInvalidException):
        await get_current_user(token)

def test_decode_token_without_subject():
    token = create_access_token({"role": "Admin"})
    assert decode_access_token(token) is None

@pytest.mark.asyncio
async def test_admin_dependency():
    admin = CurrentUser(id="1", role="Admin")
    assert await get_current_admin_user(admin) is admin

    with pytest.raises(PermissionDeniedException) as exc_info:
        await get_current_admin_user(CurrentUser(id="2", role="Customer"))
    assert exc_info.value.status_code == 403

@pytest.mark.parametrize("role, requested, expected", [
    ("Admin", "u2", "u2"),
    ("Admin", None, "me"),
    ("Customer", "u2", "me"),
    (None, "u2", "me"),
])
def test_resolve_owner_id(role, requested, expected):
    user = CurrentUser(id="me", role=role)
    assert user.resolve_owner_id(requested) == expected
