"""A single entry point that coordinates the services behind placing an order."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field


class OrderError(Exception):
    """Raised when a service refuses a request or an order cannot be placed."""


class InventoryService:
    """Checks and adjusts product stock."""

    def check_stock(self, product_id: str, quantity: int) -> None:
        print(f"Inventory: Checking stock for Product {product_id}, Qty {quantity}...")
        if quantity > 10:
            raise OrderError("inventory: not enough stock available")
        print("Inventory: Stock available.")

    def decrease_stock(self, product_id: str, quantity: int) -> None:
        print(f"Inventory: Decreasing stock for Product {product_id}, Qty {quantity}...")
        print("Inventory: Stock decreased.")

    def increase_stock(self, product_id: str, quantity: int) -> None:
        print(f"Inventory: Increasing stock for Product {product_id}, Qty {quantity}...")
        print("Inventory: Stock Increased.")


class PaymentGateway:
    """Charges and refunds cards."""

    def charge_card(self, card_number: str, amount: float) -> None:
        print(f"Payment: Charging {amount:.2f} using card {card_number}...")
        if amount > 5000.0:
            raise OrderError("payment: transaction amount exceeds limit")
        print("Payment: Payment successful.")

    def refund_charge(self, card_number: str, amount: float) -> None:
        print(f"Payment: Refunding {amount:.2f} to card {card_number}...")
        print("Payment: Refund successful.")


class ShippingService:
    """Schedules deliveries."""

    def schedule_delivery(self, product_id: str, quantity: int, address: str) -> None:
        print(f"Shipping: Scheduling delivery for {quantity} of {product_id} to {address}...")
        print("Shipping: Delivery scheduled.")


class NotificationService:
    """Sends confirmation messages to customers."""

    def send_order_confirmation(self, customer_email: str, order_id: str) -> None:
        print(
            f"Notification: Sending order confirmation email to {customer_email} "
            f"for order {order_id}..."
        )
        print("Notification: Email sent.")


class OrderRepository:
    """Stores placed orders."""

    def save_order(
        self, order_id: str, product_id: str, quantity: int, customer_email: str
    ) -> None:
        print(
            f"Repository: Saving order {order_id} for {product_id} (Qty {quantity}) "
            f"for customer {customer_email}..."
        )
        print("Repository: Order saved.")


@dataclass(frozen=True)
class CustomerInfo:
    """Where an order goes and who is told about it."""

    email: str
    address: str


@dataclass(frozen=True)
class PaymentDetails:
    """The card to charge and how much."""

    card_number: str
    amount: float


@dataclass
class OrderFacade:
    """Runs the whole order workflow, undoing earlier steps when a later one fails."""

    inventory: InventoryService = field(default_factory=InventoryService)
    payment: PaymentGateway = field(default_factory=PaymentGateway)
    shipping: ShippingService = field(default_factory=ShippingService)
    notification: NotificationService = field(default_factory=NotificationService)
    repository: OrderRepository = field(default_factory=OrderRepository)
    clock: Callable[[], int] = time.time_ns

    def place_order(
        self,
        product_id: str,
        quantity: int,
        customer: CustomerInfo,
        payment: PaymentDetails,
    ) -> str:
        """Place an order and return its identifier; raise OrderError on failure."""
        print("\n--- Order Facade: Starting PlaceOrder Process ---")

        try:
            self.inventory.check_stock(product_id, quantity)
        except OrderError as err:
            print("Order Facade: Inventory check failed.")
            raise OrderError(f"order placement failed: inventory check: {err}") from err

        try:
            self.payment.charge_card(payment.card_number, payment.amount)
        except OrderError as err:
            print("Order Facade: Payment processing failed.")
            raise OrderError(f"order placement failed: payment process: {err}") from err

        try:
            self.inventory.decrease_stock(product_id, quantity)
        except OrderError as err:
            print("Order Facade: Decreasing stock failed.")
            self.payment.refund_charge(payment.card_number, payment.amount)
            raise OrderError(f"order placement failed: decrease stock: {err}") from err

        try:
            self.shipping.schedule_delivery(product_id, quantity, customer.address)
        except OrderError as err:
            print("Order Facade: Shipping scheduling failed.")
            self.inventory.increase_stock(product_id, quantity)
            self.payment.refund_charge(payment.card_number, payment.amount)
            raise OrderError(f"order placement failed: shipping schedule: {err}") from err

        order_id = f"ORDER-{self.clock()}"
        try:
            self.repository.save_order(order_id, product_id, quantity, customer.email)
        except OrderError as err:
            print("Order Facade: Saving order failed.")
            self.inventory.increase_stock(product_id, quantity)
            self.payment.refund_charge(payment.card_number, payment.amount)
            raise OrderError(f"order placement failed: save order: {err}") from err

        try:
            self.notification.send_order_confirmation(customer.email, order_id)
        except OrderError:
            print("Order Facade: Sending notification failed (order might still be valid).")

        print(f"--- Order Facade: Order {order_id} Placed Successfully ---")
        return order_id


def _order_successful(facade: OrderFacade) -> None:
    try:
        order_id = facade.place_order(
            "LAPTOP-XYZ",
            1,
            CustomerInfo(email="alice@example.com", address="101 High Street, Cityville"),
            PaymentDetails(card_number="TEST-CARD-A", amount=1200.0),
        )
    except OrderError as err:
        print(f"Client received error for successful order attempt: {err}")
    else:
        print(f"Client successfully placed order with ID: {order_id}")


def _order_fail_low_stock(facade: OrderFacade) -> None:
    try:
        facade.place_order(
            "GADGET-PRO",
            15,
            CustomerInfo(email="bob@example.com", address="202 Low Road, Villagetown"),
            PaymentDetails(card_number="TEST-CARD-B", amount=500.0),
        )
    except OrderError as err:
        print(f"Client received expected error for low stock order: {err}")
    else:
        print("Client unexpectedly placed order (should have failed).")


def _order_fail_high_payment(facade: OrderFacade) -> None:
    try:
        facade.place_order(
            "SERVER-RACK",
            1,
            CustomerInfo(email="charlie@example.com", address="303 Big Building, Metropolis"),
            PaymentDetails(card_number="TEST-CARD-C", amount=7000.0),
        )
    except OrderError as err:
        print(f"Client received expected error for high payment amount: {err}")
    else:
        print("Client unexpectedly placed order (should have failed).")


def main(argv: Sequence[str] | None = None) -> None:
    """Run one successful and two failing sample orders."""
    facade = OrderFacade()
    _order_successful(facade)
    print("--- Client: Attempting a successful order ---")

    _order_fail_low_stock(facade)
    print("\n--- Client: Attempting an order that fails due to low stock ---")

    _order_fail_high_payment(facade)
    print("\n--- Client: Attempting an order that fails due to high payment amount ---")


if __name__ == "__main__":
    main()