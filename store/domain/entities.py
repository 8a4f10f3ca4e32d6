# store/domain/entities.py
from dataclasses import dataclass, field

from store.domain.exceptions import DomainValidationError, EntityNotFoundError


@dataclass(frozen=True)
class Address:
    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self) -> None:
        if not self.street:
            raise DomainValidationError("Street is required")
        if not self.number:
            raise DomainValidationError("Number is required")
        if not self.zipcode:
            raise DomainValidationError("Zip is required")
        if not self.city:
            raise DomainValidationError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zipcode} {self.city}"


@dataclass
class Customer:
    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.name:
            raise DomainValidationError("Name is required")

    def change_name(self, name: str) -> None:
        if not name:
            raise DomainValidationError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def is_active(self) -> bool:
        return self.active

    def activate(self) -> None:
        if self.address is None:
            raise DomainValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        self.reward_points += points


@dataclass
class Product:
    id: str
    name: str
    price: float

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.name:
            raise DomainValidationError("Name is required")
        if self.price < 0:
            raise DomainValidationError("Price must be greater than zero")

    def change_name(self, name: str) -> None:
        if not name:
            raise DomainValidationError("Name is required")
        self.name = name

    def change_price(self, price: float) -> None:
        if price < 0:
            raise DomainValidationError("Price must be greater than zero")
        self.price = price


@dataclass
class OrderItem:
    id: str
    name: str
    price: float
    product_id: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity <= 0:
            raise DomainValidationError("Quantity must be greater than 0")

    def total(self) -> float:
        return self.price * self.quantity


@dataclass
class Order:
    id: str
    customer_id: str
    items: list[OrderItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise DomainValidationError("Id is required")
        if not self.customer_id:
            raise DomainValidationError("CustomerId is required")
        if not self.items:
            raise DomainValidationError("Items are required")

    def total(self) -> float:
        return sum(item.total() for item in self.items)

    def add_item(self, item: OrderItem) -> None:
        self.items.append(item)
        self.validate()

    def remove_item(self, item_id: str) -> None:
        remaining = [item for item in self.items if item.id != item_id]
        if len(remaining) == len(self.items):
            raise EntityNotFoundError("Order item not found")
        if not remaining:
            raise DomainValidationError("Items are required")
        self.items = remaining
