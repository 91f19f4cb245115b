from datetime import timedelta

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.admin_repository import AdminRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.reset_tokens import hash_reset_token
from src.domain.base import utcnow
from src.domain.entities import Admin, User
from tests.fixtures.principals import create_principal


@pytest.mark.asyncio
async def test_get_by_reset_token_ignores_expired(db_session: AsyncSession):
    _, live = await create_principal(db_session, User, email="live@example.com", with_token=True)
    _, stale = await create_principal(
        db_session, User, email="stale@example.com", with_token=True, expired=True
    )
    repository = UserRepository(db_session)

    found = await repository.get_by_reset_token(hash_reset_token(live), utcnow())
    missing = await repository.get_by_reset_token(hash_reset_token(stale), utcnow())

    assert found.email == "live@example.com"
    assert missing is None


@pytest.mark.asyncio
async def test_consume_reset_token_succeeds_once(db_session: AsyncSession):
    user, token = await create_principal(db_session, User, with_token=True)
    user_id = user.id
    repository = UserRepository(db_session)
    token_hash = hash_reset_token(token)

    first = await repository.consume_reset_token(user_id, token_hash, "new-hash-1", utcnow())
    second = await repository.consume_reset_token(user_id, token_hash, "new-hash-2", utcnow())
    await db_session.commit()

    assert first is True
    assert second is False

    stored = await repository.get_by_id(user_id)
    assert stored.password_hash == "new-hash-1"
    assert stored.reset_token is None
    assert stored.reset_token_expiry is None


@pytest.mark.asyncio
async def test_consume_rejects_token_expiring_now(db_session: AsyncSession):
    user, token = await create_principal(db_session, User, with_token=True)
    repository = UserRepository(db_session)

    consumed = await repository.consume_reset_token(
        user.id, hash_reset_token(token), "new-hash", user.reset_token_expiry
    )

    assert consumed is False


@pytest.mark.asyncio
async def test_clear_reset_token_is_conditional(db_session: AsyncSession):
    """A newer token issued meanwhile must survive clearing the old one"""
    user, token = await create_principal(db_session, User, with_token=True)
    user_id = user.id
    repository = UserRepository(db_session)

    cleared_other = await repository.clear_reset_token(user_id, hash_reset_token("0" * 64))
    assert cleared_other is False

    cleared = await repository.clear_reset_token(user_id, hash_reset_token(token))
    await db_session.commit()
    assert cleared is True

    stored = await repository.get_by_id(user_id)
    assert stored.reset_token is None


@pytest.mark.asyncio
async def test_purge_expired_reset_tokens(db_session: AsyncSession):
    await create_principal(db_session, Admin, email="a@example.com", with_token=True, expired=True)
    await create_principal(db_session, Admin, email="b@example.com", with_token=True)
    await create_principal(db_session, Admin, email="c@example.com")
    repository = AdminRepository(db_session)

    purged = await repository.purge_expired_reset_tokens(utcnow())
    await db_session.commit()

    assert purged == 1
    remaining = await repository.get_by_email("b@example.com")
    assert remaining.reset_token is not None
    assert remaining.reset_token_expiry > utcnow() + timedelta(minutes=1)
