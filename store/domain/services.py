# store/domain/services.py
from uuid import uuid4

from store.domain.entities import Customer, Order, OrderItem, Product
from store.domain.exceptions import DomainValidationError


class OrderService:
    @staticmethod
    def place_order(customer: Customer, items: list[OrderItem]) -> Order:
        if not items:
            raise DomainValidationError("Order must have at least one item")
        order = Order(id=str(uuid4()), customer_id=customer.id, items=list(items))
        customer.add_reward_points(int(order.total() / 2))
        return order

    @staticmethod
    def total(orders: list[Order]) -> float:
        return sum(order.total() for order in orders)


class ProductService:
    @staticmethod
    def increase_price(products: list[Product], percentage: float) -> list[Product]:
        new_prices = [product.price * percentage / 100 + product.price for product in products]
        if any(price < 0 for price in new_prices):
            raise DomainValidationError("Price must be greater than zero")
        for product, price in zip(products, new_prices):
            product.change_price(price)
        return products
