from typing import Any, List, Optional, Protocol


class Navigator(Protocol):
    def navigate_to(self, route: str, payload: Any) -> None: ...


class InMemoryNavigator:
    """
    Keeps the current route and its transient state in memory, the way a
    browser router holds location state for the next view.
    """

    def __init__(self, initial_route: str = "/"):
        self.route = initial_route
        self.state: Optional[Any] = None
        self.history: List[str] = [initial_route]

    def navigate_to(self, route: str, payload: Any) -> None:
        self.route = route
        self.state = payload
        self.history.append(route)
