"""Looking up and calling methods by name at run time."""

from __future__ import annotations

import inspect
from typing import Any


class Greeter:
    def greet(self, name: str) -> str:
        return "Hello, " + name


def public_methods(obj: Any) -> list[str]:
    """Names of the public methods of ``obj``'s type, sorted."""
    return [
        name
        for name, _ in inspect.getmembers(type(obj), predicate=callable)
        if not name.startswith("_")
    ]


def call_method(obj: Any, name: str, *args: Any) -> Any:
    """Call the public method ``name`` of ``obj`` with ``args``."""
    if name.startswith("_"):
        raise AttributeError(f"{type(obj).__name__} has no public method {name!r}")
    method = getattr(obj, name)
    if not callable(method):
        raise AttributeError(f"{type(obj).__name__}.{name} is not a method")
    return method(*args)


def reflection_demo() -> str:
    """List a Greeter's methods and call greet by name."""
    greeter = Greeter()
    cls = type(greeter)
    print("Type:", f"{cls.__module__}.{cls.__qualname__}")
    for index, name in enumerate(public_methods(greeter)):
        print(f"Method {index}: {name}")
    result = call_method(greeter, "greet", "World")
    print("Results:", result)
    return result