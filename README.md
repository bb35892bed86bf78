# patternkit

A collection of small, self-contained implementations of classic design
patterns. Each module covers one pattern. All but one ship a demo that you
can run from the command line. The package uses only the standard library.

| Module | Pattern | Demo command |
| --- | --- | --- |
| `patternkit.bridge` | Bridge | `patternkit-bridge` |
| `patternkit.builder` | Builder | `patternkit-builder` |
| `patternkit.chain` | Chain of responsibility | `patternkit-chain` |
| `patternkit.composite` | Composite | `patternkit-composite` |
| `patternkit.iterator` | Iterator | `patternkit-iterator` |
| `patternkit.singleton` | Singleton | `patternkit-singleton` |
| `patternkit.decorator` | Decorator | — |
| `patternkit.adaptor` | Adapter | `patternkit-adaptor` |
| `patternkit.facade` | Facade | `patternkit-facade` |
| `patternkit.notification` | Factory method | `patternkit-notification` |
| `patternkit.memento` | Memento | `patternkit-memento` |
| `patternkit.strategy` | Strategy | `patternkit-strategy` |
| `patternkit.visitor` | Visitor | `patternkit-visitor` |
| `patternkit.observer` | Observer (publish/subscribe) | `patternkit-observer` |
| `patternkit.stock_alerts` | Observer (stock alerts) | `patternkit-stock-alerts` |
| `patternkit.document` | State (document workflow) | `patternkit-document` |
| `patternkit.mood` | State (moods) | `patternkit-mood` |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

### Factory method

```python
from patternkit.notification import (
    Email,
    NotificationFactory,
    SMS,
    UnsupportedNotificationError,
)

factory = NotificationFactory()
factory.register("SMS", SMS)
factory.register("Email", Email)

print(factory.create("SMS").send())   # Sending SMS Notification

try:
    factory.create("Fax")
except UnsupportedNotificationError as exc:
    print(exc)
```

### Singleton

```python
from patternkit.singleton import IdServiceSingleton

holder = IdServiceSingleton()
first = holder.get_service()
second = holder.get_service()

print(first.next_id())   # 1
print(second.next_id())  # 2 – the same service is shared
```

### Decorator

`SoldierWithSword` adds 10 attack. `SoldierWithShield` takes away 6 attack
and adds 20 defence. Each wraps any object that has `attack()` and
`defence()` methods.

```python
from patternkit.decorator import SoldierWithShield, SoldierWithSword

class Recruit:
    def attack(self) -> int:
        return 5

    def defence(self) -> int:
        return 5

armed = SoldierWithSword(SoldierWithShield(Recruit()))
print(armed.attack(), armed.defence())  # 9 25
```

### Strategy

```python
from patternkit.strategy import DataProcessor, NormalizationStrategy, UserData

processor = DataProcessor(NormalizationStrategy(("Name", "City")))
users = processor.process_data([UserData("1", name="  ALICE ", city=" Paris ")])
print(users[0].name, users[0].city)  # alice paris
```

If no strategy is set, `DataProcessor.process_data` raises `NoStrategyError`.

### State

A document moves through Draft → Moderation → Published → Archived.
Operations that are not allowed in the current state raise
`OperationNotAllowedError`.

```python
from patternkit.document import Document, DraftState, OperationNotAllowedError

doc = Document("My Article", "Some content.")
doc.set_state(DraftState())

doc.submit_for_review()
print(doc.current_state_name())  # Moderation

doc.approve()
print(doc.current_state_name())  # Published

try:
    doc.save()
except OperationNotAllowedError as exc:
    print(exc)
```

### Demos

Every demo command runs a fixed sample scenario for its pattern. Some print
to standard output. Others write through the `logging` module, which sends
its output to standard error. For example:

```
patternkit-facade
patternkit-visitor
patternkit-document
```

The commands take no options.

## What this package does not do

- The services behind `OrderFacade` only print what they would do. They
  take no real payments, keep no stock and store no orders. Stock checks
  fail above 10 items and charges fail above 5000.
- `patternkit.decorator` provides only the two wrappers. It has no soldier
  class of its own and no demo command.
- The notification and alert senders print a line. They do not send any
  SMS, e-mail, push or Telegram message.