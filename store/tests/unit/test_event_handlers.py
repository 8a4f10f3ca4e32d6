# store/tests/unit/test_event_handlers.py
import logging
from unittest.mock import Mock

import pytest

from store.domain.entities import Address, Customer
from store.domain.events import (
    CustomerAddressUpdatedEvent,
    CustomerCreatedEvent,
    ProductCreatedEvent,
)
from store.infrastructure.event_dispatcher import EventDispatcher
from store.infrastructure.event_handlers import (
    LogWhenCustomerAddressIsChangedHandler,
    LogWhenCustomerIsCreatedHandler1,
    LogWhenCustomerIsCreatedHandler2,
    SendEmailWhenProductIsCreatedHandler,
    register_event_handlers,
)


@pytest.fixture
def logger():
    return Mock(spec=logging.Logger)


@pytest.fixture
def customer():
    customer = Customer("1", "Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    return customer


def test_send_email_when_product_is_created(logger):
    handler = SendEmailWhenProductIsCreatedHandler(logger)

    handler.handle(ProductCreatedEvent(event_data={"name": "Product 1", "price": 10.0}))

    logger.info.assert_called_once()
    assert "Product 1" in logger.info.call_args.args[0]


def test_customer_created_handlers_log_in_turn(logger, customer):
    event = CustomerCreatedEvent(event_data=customer)

    LogWhenCustomerIsCreatedHandler1(logger).handle(event)
    LogWhenCustomerIsCreatedHandler2(logger).handle(event)

    messages = [call.args[0] for call in logger.info.call_args_list]
    assert messages == [
        "This is the first log of the event: CustomerCreated",
        "This is the second log of the event: CustomerCreated",
    ]


def test_address_changed_handler_logs_new_address(logger, customer):
    handler = LogWhenCustomerAddressIsChangedHandler(logger)

    handler.handle(CustomerAddressUpdatedEvent(event_data=customer))

    logger.info.assert_called_once_with(
        "Customer address: 1, Customer 1 changed to: Street 1, 1, Zipcode 1 City 1"
    )


def test_register_event_handlers_wires_defaults(logger):
    dispatcher = EventDispatcher()

    register_event_handlers(dispatcher, logger)

    event_handlers = dispatcher.event_handlers
    assert isinstance(
        event_handlers["ProductCreatedEvent"][0], SendEmailWhenProductIsCreatedHandler
    )
    assert [type(h) for h in event_handlers["CustomerCreatedEvent"]] == [
        LogWhenCustomerIsCreatedHandler1,
        LogWhenCustomerIsCreatedHandler2,
    ]
    assert isinstance(
        event_handlers["CustomerAddressUpdatedEvent"][0],
        LogWhenCustomerAddressIsChangedHandler,
    )
