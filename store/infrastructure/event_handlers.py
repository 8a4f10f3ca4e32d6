# store/infrastructure/event_handlers.py
import logging

from store.domain.events import (
    CustomerAddressUpdatedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from store.domain.interfaces import EventHandler
from store.infrastructure.event_dispatcher import EventDispatcher


class SendEmailWhenProductIsCreatedHandler(EventHandler):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: ProductCreatedEvent) -> None:
        self.logger.info(f"Sending email to .....: product created {event.event_data}")


class LogWhenCustomerIsCreatedHandler1(EventHandler):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: CustomerCreatedEvent) -> None:
        self.logger.info("This is the first log of the event: CustomerCreated")


class LogWhenCustomerIsCreatedHandler2(EventHandler):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: CustomerCreatedEvent) -> None:
        self.logger.info("This is the second log of the event: CustomerCreated")


class LogWhenCustomerAddressIsChangedHandler(EventHandler):
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: CustomerAddressUpdatedEvent) -> None:
        customer = event.event_data
        self.logger.info(
            f"Customer address: {customer.id}, {customer.name} changed to: {customer.address}"
        )


def register_event_handlers(dispatcher: EventDispatcher, logger: logging.Logger) -> None:
    dispatcher.register(
        "ProductCreatedEvent", SendEmailWhenProductIsCreatedHandler(logger)
    )
    dispatcher.register("CustomerCreatedEvent", LogWhenCustomerIsCreatedHandler1(logger))
    dispatcher.register("CustomerCreatedEvent", LogWhenCustomerIsCreatedHandler2(logger))
    dispatcher.register(
        "CustomerAddressUpdatedEvent", LogWhenCustomerAddressIsChangedHandler(logger)
    )
