# store/interactors/product_interactor.py
from uuid import uuid4

from store.domain.entities import Product
from store.domain.events import ProductCreatedEvent
from store.domain.exceptions import EntityNotFoundError
from store.infrastructure import schemas
from store.infrastructure.event_dispatcher import EventDispatcher
from store.infrastructure.unit_of_work import AbstractUnitOfWork


class ProductInteractor:
    def __init__(self, uow: AbstractUnitOfWork, event_dispatcher: EventDispatcher):
        self.uow = uow
        self.event_dispatcher = event_dispatcher

    async def get_product(self, product_id: str) -> schemas.Product | None:
        async with self.uow:
            try:
                product = await self.uow.products.find(product_id)
            except EntityNotFoundError:
                return None
        return schemas.Product.model_validate(product)

    async def get_products(self, skip: int = 0, limit: int = 100) -> list[schemas.Product]:
        async with self.uow:
            products = await self.uow.products.find_all(skip, limit)
        return [schemas.Product.model_validate(product) for product in products]

    async def create_product(self, product: schemas.ProductCreate) -> schemas.Product:
        new_product = Product(id=str(uuid4()), name=product.name, price=product.price)
        async with self.uow:
            await self.uow.products.create(new_product)

        self.event_dispatcher.notify(
            ProductCreatedEvent(
                event_data={
                    "id": new_product.id,
                    "name": new_product.name,
                    "price": new_product.price,
                }
            )
        )
        return schemas.Product.model_validate(new_product)

    async def update_product(
        self, product_id: str, product_update: schemas.ProductUpdate
    ) -> schemas.Product:
        async with self.uow:
            product = await self.uow.products.find(product_id)
            if product_update.name is not None:
                product.change_name(product_update.name)
            if product_update.price is not None:
                product.change_price(product_update.price)
            await self.uow.products.update(product)
        return schemas.Product.model_validate(product)
