# store/infrastructure/data_mappers.py
from store.domain.entities import Address, Customer, Order, OrderItem, Product
from store.infrastructure import models


class CustomerMapper:
    @staticmethod
    def to_orm(entity: Customer) -> models.CustomerModel:
        model = models.CustomerModel(id=entity.id)
        CustomerMapper.copy_to_orm(entity, model)
        return model

    @staticmethod
    def copy_to_orm(entity: Customer, model: models.CustomerModel) -> None:
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zipcode if address else None
        model.city = address.city if address else None
        model.active = entity.is_active()
        model.reward_points = entity.reward_points

    @staticmethod
    def to_domain(model: models.CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zipcode=model.zipcode,
                city=model.city,
            )
        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=bool(model.active),
            reward_points=model.reward_points or 0,
        )


class ProductMapper:
    @staticmethod
    def to_orm(entity: Product) -> models.ProductModel:
        return models.ProductModel(id=entity.id, name=entity.name, price=entity.price)

    @staticmethod
    def to_domain(model: models.ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=model.price)


class OrderMapper:
    @staticmethod
    def item_to_orm(item: OrderItem, order_id: str, position: int) -> models.OrderItemModel:
        return models.OrderItemModel(
            id=item.id,
            name=item.name,
            price=item.price,
            product_id=item.product_id,
            quantity=item.quantity,
            order_id=order_id,
            position=position,
        )

    @staticmethod
    def to_orm(entity: Order) -> models.OrderModel:
        return models.OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
            items=[
                OrderMapper.item_to_orm(item, entity.id, position)
                for position, item in enumerate(entity.items)
            ],
        )

    @staticmethod
    def to_domain(model: models.OrderModel) -> Order:
        items = [
            OrderItem(
                id=item.id,
                name=item.name,
                price=item.price,
                product_id=item.product_id,
                quantity=item.quantity,
            )
            for item in model.items
        ]
        return Order(id=model.id, customer_id=model.customer_id, items=items)
