# store/domain/interfaces.py
from abc import ABC, abstractmethod

from store.domain.entities import Customer, Order, Product
from store.domain.events import Event


class EventHandler(ABC):
    @abstractmethod
    def handle(self, event: Event) -> None:
        pass


class AbstractCustomerRepository(ABC):
    @abstractmethod
    async def create(self, entity: Customer) -> None:
        pass

    @abstractmethod
    async def update(self, entity: Customer) -> None:
        pass

    @abstractmethod
    async def find(self, id: str) -> Customer:
        pass

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Customer]:
        pass


class AbstractProductRepository(ABC):
    @abstractmethod
    async def create(self, entity: Product) -> None:
        pass

    @abstractmethod
    async def update(self, entity: Product) -> None:
        pass

    @abstractmethod
    async def find(self, id: str) -> Product:
        pass

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Product]:
        pass


class AbstractOrderRepository(ABC):
    @abstractmethod
    async def create(self, entity: Order) -> None:
        pass

    @abstractmethod
    async def update(self, entity: Order) -> None:
        pass

    @abstractmethod
    async def find(self, id: str) -> Order:
        pass

    @abstractmethod
    async def find_all(self, skip: int = 0, limit: int = 100) -> list[Order]:
        pass
