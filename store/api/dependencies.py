# store/api/dependencies.py
from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from store.infrastructure.event_dispatcher import EventDispatcher
from store.infrastructure.unit_of_work import UnitOfWork
from store.interactors.customer_interactor import CustomerInteractor
from store.interactors.order_interactor import OrderInteractor
from store.interactors.product_interactor import ProductInteractor


def get_event_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.event_dispatcher


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.database.session() as session:
        yield session


async def get_uow(session: AsyncSession = Depends(get_session)) -> UnitOfWork:
    return UnitOfWork(session)


async def get_customer_interactor(
    uow: UnitOfWork = Depends(get_uow),
    event_dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    return CustomerInteractor(uow, event_dispatcher)


async def get_product_interactor(
    uow: UnitOfWork = Depends(get_uow),
    event_dispatcher: EventDispatcher = Depends(get_event_dispatcher),
):
    return ProductInteractor(uow, event_dispatcher)


async def get_order_interactor(uow: UnitOfWork = Depends(get_uow)):
    return OrderInteractor(uow)
