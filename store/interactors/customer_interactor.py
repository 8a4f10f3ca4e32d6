# store/interactors/customer_interactor.py
from uuid import uuid4

from store.domain.entities import Address, Customer
from store.domain.events import CustomerAddressUpdatedEvent, CustomerCreatedEvent
from store.domain.exceptions import EntityNotFoundError
from store.infrastructure import schemas
from store.infrastructure.event_dispatcher import EventDispatcher
from store.infrastructure.unit_of_work import AbstractUnitOfWork


class CustomerInteractor:
    def __init__(self, uow: AbstractUnitOfWork, event_dispatcher: EventDispatcher):
        self.uow = uow
        self.event_dispatcher = event_dispatcher

    async def get_customer(self, customer_id: str) -> schemas.Customer | None:
        async with self.uow:
            try:
                customer = await self.uow.customers.find(customer_id)
            except EntityNotFoundError:
                return None
        return schemas.Customer.model_validate(customer)

    async def get_customers(self, skip: int = 0, limit: int = 100) -> list[schemas.Customer]:
        async with self.uow:
            customers = await self.uow.customers.find_all(skip, limit)
        return [schemas.Customer.model_validate(customer) for customer in customers]

    async def create_customer(self, customer: schemas.CustomerCreate) -> schemas.Customer:
        new_customer = Customer(id=str(uuid4()), name=customer.name)
        if customer.address:
            new_customer.change_address(Address(**customer.address.model_dump()))
        async with self.uow:
            await self.uow.customers.create(new_customer)

        self.event_dispatcher.notify(CustomerCreatedEvent(event_data=new_customer))
        return schemas.Customer.model_validate(new_customer)

    async def update_customer(
        self, customer_id: str, customer_update: schemas.CustomerUpdate
    ) -> schemas.Customer:
        async with self.uow:
            customer = await self.uow.customers.find(customer_id)
            if customer_update.name is not None:
                customer.change_name(customer_update.name)
            await self.uow.customers.update(customer)
        return schemas.Customer.model_validate(customer)

    async def change_address(
        self, customer_id: str, address: schemas.Address
    ) -> schemas.Customer:
        async with self.uow:
            customer = await self.uow.customers.find(customer_id)
            customer.change_address(Address(**address.model_dump()))
            await self.uow.customers.update(customer)

        self.event_dispatcher.notify(CustomerAddressUpdatedEvent(event_data=customer))
        return schemas.Customer.model_validate(customer)

    async def activate_customer(self, customer_id: str) -> schemas.Customer:
        async with self.uow:
            customer = await self.uow.customers.find(customer_id)
            customer.activate()
            await self.uow.customers.update(customer)
        return schemas.Customer.model_validate(customer)

    async def deactivate_customer(self, customer_id: str) -> schemas.Customer:
        async with self.uow:
            customer = await self.uow.customers.find(customer_id)
            customer.deactivate()
            await self.uow.customers.update(customer)
        return schemas.Customer.model_validate(customer)
