# store/infrastructure/schemas.py
from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    street: str = Field(..., min_length=1)
    number: int = Field(..., gt=0)
    zipcode: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)

    model_config = ConfigDict(from_attributes=True)


class CustomerBase(BaseModel):
    name: str


class CustomerCreate(CustomerBase):
    address: Address | None = None


class CustomerUpdate(BaseModel):
    name: str | None = None


class Customer(CustomerBase):
    id: str
    address: Address | None = None
    active: bool
    reward_points: int

    model_config = ConfigDict(from_attributes=True)


class ProductBase(BaseModel):
    name: str
    price: float


class ProductCreate(ProductBase):
    pass


class ProductUpdate(BaseModel):
    name: str | None = None
    price: float | None = None


class Product(ProductBase):
    id: str

    model_config = ConfigDict(from_attributes=True)


class OrderItemCreate(BaseModel):
    product_id: str
    quantity: int = Field(..., gt=0)


class OrderItem(BaseModel):
    id: str
    name: str
    price: float
    product_id: str
    quantity: int
    total: float


class OrderCreate(BaseModel):
    customer_id: str
    items: list[OrderItemCreate] = Field(..., min_length=1)


class Order(BaseModel):
    id: str
    customer_id: str
    total: float
    items: list[OrderItem] = Field(default_factory=list)
