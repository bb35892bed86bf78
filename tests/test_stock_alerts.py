from patternkit.stock_alerts import (
    Client,
    EmailSender,
    Product,
    SMSSender,
    TelegramSender,
    main,
)


class _Recorder:
    def __init__(self, name):
        self.name = name
        self.count = 0

    def send_message(self):
        self.count += 1
        return self.name


def test_only_matching_clients_are_notified():
    product = Product("p")
    match, other = _Recorder("match"), _Recorder("other")
    product.add_client(Client(1, match, 3))
    product.add_client(Client(2, other, 4))
    product.number = 3
    assert product.broadcast() == ["match"]
    assert (match.count, other.count) == (1, 0)


def test_default_number_matches_zero_requests():
    product = Product("p")
    sender = _Recorder("zero")
    product.add_client(Client(1, sender, 0))
    assert product.broadcast() == ["zero"]


def test_removed_client_is_not_notified():
    product = Product("p", number=2)
    sender = _Recorder("gone")
    product.add_client(Client(1, sender, 2))
    product.remove_client(1)
    product.remove_client(99)
    assert product.broadcast() == []
    assert sender.count == 0


def test_same_id_replaces_client():
    product = Product("p", number=1)
    old, new = _Recorder("old"), _Recorder("new")
    product.add_client(Client(1, old, 1))
    product.add_client(Client(1, new, 1))
    assert product.broadcast() == ["new"]


def test_senders_print_their_channel(capsys):
    assert SMSSender().send_message() == "sending Message with SMS"
    assert EmailSender().send_message() == "sending Message with Email"
    assert TelegramSender().send_message() == "sending Message with Telegram"
    assert capsys.readouterr().out.splitlines() == [
        "sending Message with SMS",
        "sending Message with Email",
        "sending Message with Telegram",
    ]


def test_main_notifies_in_order(capsys):
    main()
    assert capsys.readouterr().out.splitlines() == [
        "sending Message with Email",
        "sending Message with SMS",
    ]