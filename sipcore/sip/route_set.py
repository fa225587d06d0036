"""Ordered, immutable set of routes.

The first route is the next hop. Every modifying operation returns a new
RouteSet.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from sipcore.core.exceptions import RouteSetError

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class RouteSet(Generic[T]):
    """Ordered route sequence in header traversal order."""

    routes: tuple[T, ...] = ()

    @classmethod
    def new(cls) -> "RouteSet":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.routes

    def add_first(self, route: T) -> "RouteSet[T]":
        return RouteSet((route,) + self.routes)

    def add_last(self, route: T) -> "RouteSet[T]":
        return RouteSet(self.routes + (route,))

    def first(self) -> T:
        if not self.routes:
            raise RouteSetError("take first route")
        return self.routes[0]

    def last(self) -> T:
        if not self.routes:
            raise RouteSetError("take last route")
        return self.routes[-1]

    def remove_first(self) -> "RouteSet[T]":
        if not self.routes:
            raise RouteSetError("remove first route")
        return RouteSet(self.routes[1:])

    def remove_last(self) -> "RouteSet[T]":
        if not self.routes:
            raise RouteSetError("remove last route")
        return RouteSet(self.routes[:-1])

    def reverse(self) -> "RouteSet[T]":
        return RouteSet(self.routes[::-1])

    def foldl(self, fun: Callable[[T, A], A], acc: A) -> A:
        """Fold routes first-to-last: fun(route, acc) -> acc."""
        for route in self.routes:
            acc = fun(route, acc)
        return acc

    def __iter__(self) -> Iterator[T]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)
