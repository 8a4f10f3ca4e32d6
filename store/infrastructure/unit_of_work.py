# store/infrastructure/unit_of_work.py
from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from store.domain.interfaces import (
    AbstractCustomerRepository,
    AbstractOrderRepository,
    AbstractProductRepository,
)
from store.infrastructure.repositories import (
    SQLAlchemyCustomerRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)


class AbstractUnitOfWork(ABC):
    """One business transaction over the customer, product and order repositories.

    Leaving the ``async with`` block commits, or rolls back when the block
    raised, and then releases the underlying resources.
    """

    customers: AbstractCustomerRepository
    products: AbstractProductRepository
    orders: AbstractOrderRepository

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type:
                await self.rollback()
            else:
                await self.commit()
        finally:
            await self.close()

    @abstractmethod
    async def commit(self):
        raise NotImplementedError

    @abstractmethod
    async def rollback(self):
        raise NotImplementedError

    @abstractmethod
    async def close(self):
        raise NotImplementedError


class UnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.customers = SQLAlchemyCustomerRepository(self.session)
        self.products = SQLAlchemyProductRepository(self.session)
        self.orders = SQLAlchemyOrderRepository(self.session)
        return await super().__aenter__()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

    async def close(self):
        await self.session.close()
