# store/interactors/order_interactor.py
from uuid import uuid4

from store.domain.entities import Order, OrderItem
from store.domain.exceptions import EntityNotFoundError
from store.domain.services import OrderService
from store.infrastructure import schemas
from store.infrastructure.unit_of_work import AbstractUnitOfWork


def to_schema(order: Order) -> schemas.Order:
    return schemas.Order(
        id=order.id,
        customer_id=order.customer_id,
        total=order.total(),
        items=[
            schemas.OrderItem(
                id=item.id,
                name=item.name,
                price=item.price,
                product_id=item.product_id,
                quantity=item.quantity,
                total=item.total(),
            )
            for item in order.items
        ],
    )


class OrderInteractor:
    def __init__(self, uow: AbstractUnitOfWork):
        self.uow = uow

    async def _build_item(self, item: schemas.OrderItemCreate) -> OrderItem:
        product = await self.uow.products.find(item.product_id)
        return OrderItem(
            id=str(uuid4()),
            name=product.name,
            price=product.price,
            product_id=product.id,
            quantity=item.quantity,
        )

    async def get_order(self, order_id: str) -> schemas.Order | None:
        async with self.uow:
            try:
                order = await self.uow.orders.find(order_id)
            except EntityNotFoundError:
                return None
        return to_schema(order)

    async def get_orders(self, skip: int = 0, limit: int = 100) -> list[schemas.Order]:
        async with self.uow:
            orders = await self.uow.orders.find_all(skip, limit)
        return [to_schema(order) for order in orders]

    async def place_order(self, order: schemas.OrderCreate) -> schemas.Order:
        async with self.uow:
            customer = await self.uow.customers.find(order.customer_id)
            items = [await self._build_item(item) for item in order.items]
            new_order = OrderService.place_order(customer, items)
            await self.uow.orders.create(new_order)
            await self.uow.customers.update(customer)
        return to_schema(new_order)

    async def add_item(self, order_id: str, item: schemas.OrderItemCreate) -> schemas.Order:
        async with self.uow:
            order = await self.uow.orders.find(order_id)
            order.add_item(await self._build_item(item))
            await self.uow.orders.update(order)
        return to_schema(order)

    async def remove_item(self, order_id: str, item_id: str) -> schemas.Order:
        async with self.uow:
            order = await self.uow.orders.find(order_id)
            order.remove_item(item_id)
            await self.uow.orders.update(order)
        return to_schema(order)
