"""SchemaRegistry — lookup of message schemas by qualified name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from query_authz.exceptions import SchemaError
from query_authz.schema._model import MessageSchema

__all__ = ["SchemaRegistry"]


class SchemaRegistry:
    """Registry that maps qualified type names to message schemas.

    Populated once by a schema loader, then read-only during
    resolution. Names are matched exactly as they appear in field
    ``type_name`` references.

    Example::

        registry = SchemaRegistry([user_msg, address_msg])
        registry.get(".pkg.User")
    """

    def __init__(self, messages: Iterable[MessageSchema] = ()) -> None:
        self._messages: dict[str, MessageSchema] = {}
        for message in messages:
            self.register(message)

    def register(self, message: MessageSchema) -> None:
        """Register a message schema under its qualified name.

        Registering the same name twice replaces the earlier schema.

        Args:
            message: The message schema to register.

        Returns:
            None
        """
        self._messages[message.name] = message

    def lookup(self, name: str) -> MessageSchema | None:
        """Return the message registered under *name*, or ``None``."""
        return self._messages.get(name)

    def get(self, name: str | None) -> MessageSchema:
        """Return the message registered under *name*.

        Raises:
            SchemaError: If no message is registered under *name*.
        """
        message = self._messages.get(name) if name else None
        if message is None:
            raise SchemaError(f"Cannot find named object of type {name!r}")
        return message

    def __contains__(self, name: object) -> bool:
        return name in self._messages

    def __iter__(self) -> Iterator[MessageSchema]:
        return iter(self._messages.values())

    def __len__(self) -> int:
        return len(self._messages)

    def clear(self) -> None:
        """Remove all registered messages."""
        self._messages.clear()
