# store/infrastructure/repositories.py
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from store.domain.entities import Customer, Order, Product
from store.domain.exceptions import EntityNotFoundError
from store.domain.interfaces import (
    AbstractCustomerRepository,
    AbstractOrderRepository,
    AbstractProductRepository,
)
from store.infrastructure import models
from store.infrastructure.data_mappers import CustomerMapper, OrderMapper, ProductMapper


class SQLAlchemyCustomerRepository(AbstractCustomerRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: Customer) -> None:
        self.session.add(CustomerMapper.to_orm(entity))
        await self.session.flush()

    async def update(self, entity: Customer) -> None:
        db_customer = await self.session.get(models.CustomerModel, entity.id)
        if not db_customer:
            raise EntityNotFoundError("Customer not found")
        CustomerMapper.copy_to_orm(entity, db_customer)
        await self.session.flush()

    async def find(self, id: str) -> Customer:
        result = await self.session.execute(
            select(models.CustomerModel).filter(models.CustomerModel.id == id)
        )
        customer = result.scalar_one_or_none()
        if not customer:
            raise EntityNotFoundError("Customer not found")
        return CustomerMapper.to_domain(customer)

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Customer]:
        stmt = select(models.CustomerModel).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [CustomerMapper.to_domain(customer) for customer in result.scalars().all()]


class SQLAlchemyProductRepository(AbstractProductRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: Product) -> None:
        self.session.add(ProductMapper.to_orm(entity))
        await self.session.flush()

    async def update(self, entity: Product) -> None:
        db_product = await self.session.get(models.ProductModel, entity.id)
        if not db_product:
            raise EntityNotFoundError("Product not found")
        db_product.name = entity.name
        db_product.price = entity.price
        await self.session.flush()

    async def find(self, id: str) -> Product:
        result = await self.session.execute(
            select(models.ProductModel).filter(models.ProductModel.id == id)
        )
        product = result.scalar_one_or_none()
        if not product:
            raise EntityNotFoundError("Product not found")
        return ProductMapper.to_domain(product)

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Product]:
        stmt = select(models.ProductModel).offset(skip).limit(limit)
        result = await self.session.execute(stmt)
        return [ProductMapper.to_domain(product) for product in result.scalars().all()]


class SQLAlchemyOrderRepository(AbstractOrderRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entity: Order) -> None:
        self.session.add(OrderMapper.to_orm(entity))
        await self.session.flush()

    async def update(self, entity: Order) -> None:
        exists = await self.session.scalar(
            select(models.OrderModel.id).filter(models.OrderModel.id == entity.id)
        )
        if not exists:
            raise EntityNotFoundError("Order not found")

        # item rows are rewritten from the aggregate on every update
        await self.session.execute(
            delete(models.OrderItemModel)
            .where(models.OrderItemModel.order_id == entity.id)
            .execution_options(synchronize_session="fetch")
        )
        self.session.add_all(
            [
                OrderMapper.item_to_orm(item, entity.id, position)
                for position, item in enumerate(entity.items)
            ]
        )
        await self.session.execute(
            update(models.OrderModel)
            .where(models.OrderModel.id == entity.id)
            .values(total=entity.total())
            .execution_options(synchronize_session="fetch")
        )
        await self.session.flush()

    async def find(self, id: str) -> Order:
        stmt = (
            select(models.OrderModel)
            .filter(models.OrderModel.id == id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        order = result.scalar_one_or_none()
        if not order:
            raise EntityNotFoundError("Order not found")
        return OrderMapper.to_domain(order)

    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Order]:
        stmt = (
            select(models.OrderModel)
            .offset(skip)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [OrderMapper.to_domain(order) for order in result.scalars().all()]
