import pytest

from patternkit.notification import (
    SMS,
    Email,
    Notification,
    NotificationFactory,
    Push,
    UnsupportedNotificationError,
    main,
)


@pytest.fixture
def factory():
    f = NotificationFactory()
    f.register("SMS", SMS)
    f.register("Email", Email)
    f.register("Push", Push)
    return f


@pytest.mark.parametrize(
    "name, expected",
    [
        ("SMS", "Sending SMS Notification"),
        ("Email", "Sending Email Notification"),
        ("Push", "Sending Push Notification"),
    ],
)
def test_create_registered(factory, name, expected):
    assert factory.create(name).send() == expected


def test_create_returns_fresh_instances(factory):
    created = [factory.create("SMS") for _ in range(2)]
    assert len({id(n) for n in created}) == 2
    assert [n.send() for n in created] == ["Sending SMS Notification"] * 2


def test_unknown_type_raises(factory):
    with pytest.raises(UnsupportedNotificationError, match="notificatio Fax don't support"):
        factory.create("Fax")


def test_lookup_is_case_sensitive(factory):
    with pytest.raises(UnsupportedNotificationError):
        factory.create("sms")


def test_register_replaces_creator(factory):
    factory.register("SMS", Email)
    assert factory.create("SMS").send() == "Sending Email Notification"


def test_custom_creator():
    class Pager(Notification):
        def send(self):
            return "beep"

    f = NotificationFactory()
    f.register("Pager", Pager)
    assert f.create("Pager").send() == "beep"


def test_notification_is_abstract():
    with pytest.raises(TypeError):
        Notification()


def test_main_prints_sms(capsys):
    main([])
    assert capsys.readouterr().out.strip() == "Sending SMS Notification"