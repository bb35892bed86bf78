"""Products that alert waiting clients when their requested quantity is reached."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol


class MessageSender(Protocol):
    """A channel over which a client is notified."""

    def send_message(self) -> Any: ...


def _announce(channel: str) -> str:
    line = f"sending Message with {channel}"
    print(line)
    return line


class SMSSender:
    """Notifies by SMS."""

    def send_message(self) -> str:
        return _announce("SMS")


class EmailSender:
    """Notifies by e-mail."""

    def send_message(self) -> str:
        return _announce("Email")


class TelegramSender:
    """Notifies by Telegram."""

    def send_message(self) -> str:
        return _announce("Telegram")


@dataclass(frozen=True)
class Client:
    """A client waiting for a product to reach a given number."""

    id: int
    message_sender: MessageSender
    number_of_request: int


@dataclass
class Product:
    """A product whose clients are alerted when ``number`` matches their request."""

    name: str
    number: int = 0
    clients: dict[int, Client] = field(default_factory=dict)

    def add_client(self, client: Client) -> None:
        """Add a client, replacing any with the same id."""
        self.clients[client.id] = client

    def remove_client(self, client_id: int) -> None:
        """Remove a client; unknown ids are ignored."""
        self.clients.pop(client_id, None)

    def broadcast(self) -> list[Any]:
        """Notify the clients whose requested number equals the current one."""
        return [
            client.message_sender.send_message()
            for client in list(self.clients.values())
            if client.number_of_request == self.number
        ]


def main(argv: Sequence[str] | None = None) -> None:
    """Alert the matching clients of two sample products."""
    ahmad = Client(1, SMSSender(), 5)
    sajjad = Client(2, EmailSender(), 6)
    product1 = Product("shalvar")
    product2 = Product("lebas")

    product1.add_client(ahmad)
    product1.add_client(sajjad)
    product1.number = 6
    product1.broadcast()

    product2.add_client(ahmad)
    product2.number = 5
    product2.broadcast()


if __name__ == "__main__":
    main()