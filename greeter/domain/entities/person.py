# greeter/domain/entities/person.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, TextIO


@dataclass(frozen=True)
class Person:
    """
    Represents a named individual who can say hello.
    The name may be empty; nothing about its content is constrained.
    """
    name: str

    @classmethod
    def new(cls, name: str) -> Person:
        return cls(name=name)

    def greeting(self) -> str:
        return f"Hello, {self.name}!"

    def hello(self, stream: Optional[TextIO] = None) -> None:
        """Write the greeting plus a newline (stdout unless `stream` is given)."""
        out = stream if stream is not None else sys.stdout
        print(self.greeting(), file=out)
