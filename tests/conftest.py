import os

# Set environment variables BEFORE any imports that might use settings
os.environ["ERRORSTORE_EMIT_HTTP_STATUS"] = "true"
os.environ["ERRORSTORE_EXPOSE_DEBUG"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from errorstore.api.deps import ErrorResponder, get_error_responder
from errorstore.api.exception_handlers import RegisteredError
from errorstore.main import create_app
from errorstore.services.registry import ErrorRegistry, build_registry

ORDER_NOT_FOUND = 1001
INVALID_QUANTITY = 1002
PAYMENT_DECLINED = "PAYMENT_DECLINED"


def populate_shop(registry: ErrorRegistry) -> None:
    """Domain errors of a small shop application."""
    registry.add_error(
        ORDER_NOT_FOUND,
        "ORDER_NOT_FOUND",
        404,
        lambda order_id: f"Order {order_id} does not exist",
        "The order could not be found.",
    )
    registry.add_error(
        INVALID_QUANTITY,
        "INVALID_QUANTITY",
        400,
        ["quantity must be positive", "quantity must be an integer"],
        lambda quantity: f"{quantity} is not a valid quantity.",
    )
    registry.add_error(
        PAYMENT_DECLINED,
        "PAYMENT_DECLINED",
        402,
        "Gateway declined the charge",
        "Your payment was declined.",
        admin_message=lambda reference: f"Check gateway reference {reference}",
    ).set_data({"retryable": False})


@pytest.fixture(scope="function")
def emitted() -> list[int]:
    """HTTP statuses handed to the registry's status emitter."""
    return []


@pytest.fixture(scope="function")
def registry(emitted: list[int]) -> ErrorRegistry:
    return build_registry(populate_shop, status_emitter=emitted.append)


@pytest.fixture(scope="function")
def client(registry: ErrorRegistry):
    """Test client for an app serving the shop registry plus two sample routes."""
    app = create_app(registry)

    @app.get("/orders/{order_id}")
    def get_order(order_id: int):
        raise RegisteredError(ORDER_NOT_FOUND, debug_args=[order_id])

    @app.post("/payments")
    def pay(respond: ErrorResponder = Depends(get_error_responder)):
        return respond(PAYMENT_DECLINED, admin_args=["ch_123"])

    yield TestClient(app)
