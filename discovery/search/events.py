"""
Search Events Module

Event hooks around search operations, built on blinker signals. A shared
namespace lets listeners (such as the backend manager) subscribe once for
every event manager created against it.
"""

from typing import Any, Callable, List

from blinker import Namespace

RESOLVE = "resolve"
PRE = "pre"
POST = "post"
ERROR = "error"


class SharedEventManager:
    """Signal namespace shared by all search event managers."""

    def __init__(self) -> None:
        self.namespace = Namespace()

    def signal(self, identifier: str, event: str):
        return self.namespace.signal(f"{identifier}.{event}")

    def attach(self, identifier: str, event: str, listener: Callable[..., Any]) -> None:
        self.signal(identifier, event).connect(listener, weak=False)


class EventManager:
    """Triggers events for one identifier on top of the shared namespace."""

    def __init__(self, shared: SharedEventManager, identifier: str = "search") -> None:
        self.shared = shared
        self.identifier = identifier

    def attach(self, event: str, listener: Callable[..., Any]) -> None:
        self.shared.attach(self.identifier, event, listener)

    def trigger(self, event: str, target: Any, **params: Any) -> List[Any]:
        """Send ``event`` and return the listeners' return values in order."""
        signal = self.shared.signal(self.identifier, event)
        return [result for _receiver, result in signal.send(target, **params)]
