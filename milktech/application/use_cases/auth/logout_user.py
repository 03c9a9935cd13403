from __future__ import annotations

from milktech.application.interfaces.unit_of_work import UnitOfWork


async def execute(uow: UnitOfWork) -> None:
    await uow.session.clear()
    await uow.commit()
