from __future__ import annotations

import pytest

from milktech.application.errors import AuthError, ConflictError, ValidationError
from milktech.application.use_cases.auth import (
    get_current_user,
    login_user,
    logout_user,
    register_user,
)
from milktech.domain.value_objects.user_role import UserRole


async def register(uow, password_hasher, **overrides):
    data = {"email": "Ana@Fazenda.com ", "password": "segredo123", "name": "Ana"}
    data.update(overrides)
    return await register_user.execute(
        uow=uow,
        payload=register_user.RegisterUserInput(**data),
        password_hasher=password_hasher,
    )


async def test_register_signs_in(uow, password_hasher):
    session_user = await register(uow, password_hasher, role="dairy")

    assert session_user.email == "ana@fazenda.com"
    assert session_user.role is UserRole.DAIRY
    assert await get_current_user.is_authenticated(uow)
    stored = await uow.users.get_by_email("ANA@fazenda.com")
    assert stored.hashed_password != "segredo123"
    assert password_hasher.verify("segredo123", stored.hashed_password)


async def test_register_rejects_duplicates_and_bad_input(uow, password_hasher):
    await register(uow, password_hasher)
    with pytest.raises(ConflictError):
        await register(uow, password_hasher, email="ana@fazenda.com")
    with pytest.raises(ValidationError):
        await register(uow, password_hasher, email="novo@fazenda.com", role="admin")
    with pytest.raises(ValidationError):
        await register(uow, password_hasher, email="  ")


async def test_login_and_logout(uow, password_hasher):
    await register(uow, password_hasher)
    await logout_user.execute(uow)
    assert await get_current_user.execute(uow) is None

    session_user = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email="ANA@fazenda.com", password="segredo123"),
        password_hasher=password_hasher,
    )

    assert (await get_current_user.execute(uow)).id == session_user.id


@pytest.mark.parametrize(
    "email, password",
    [("ana@fazenda.com", "errada"), ("outra@fazenda.com", "segredo123"), ("", "")],
)
async def test_login_failures(uow, password_hasher, email, password):
    await register(uow, password_hasher)
    await logout_user.execute(uow)
    with pytest.raises(AuthError):
        await login_user.execute(
            uow=uow,
            payload=login_user.LoginInput(email=email, password=password),
            password_hasher=password_hasher,
        )
    assert not await get_current_user.is_authenticated(uow)


def test_verify_tolerates_unrecognised_hashes(password_hasher):
    assert not password_hasher.verify("segredo123", "")
    assert not password_hasher.verify("segredo123", "segredo123")
