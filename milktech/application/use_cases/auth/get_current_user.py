from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork
from milktech.domain.models.user import SessionUser


async def execute(uow: UnitOfWork) -> SessionUser | None:
    return await uow.session.get()


async def is_authenticated(uow: UnitOfWork) -> bool:
    return await uow.session.get() is not None
