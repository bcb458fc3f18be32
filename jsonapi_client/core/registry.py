"""Registry mapping JSON:API types to domain classes."""

from __future__ import annotations

from typing import Any

from jsonapi_client.core.document import Document

MATERIALIZE_HOOK = "from_document"


class TypeRegistry:
    """Map JSON:API type names to the classes that materialize them."""

    def __init__(self) -> None:
        self._types: dict[str, Any] = {}

    def register(self, resource_type: str, factory: Any) -> None:
        """Register ``factory`` for ``resource_type`` (last registration wins)."""
        self._types[str(resource_type)] = factory

    def lookup(self, resource_type: str) -> Any | None:
        """Return the factory registered for ``resource_type``."""
        return self._types.get(str(resource_type))

    def flush(self) -> None:
        """Forget every registration."""
        self._types.clear()

    def factory(self, document: Document | dict[str, Any]) -> Any:
        """Turn a Document into its registered domain object.

        Types without a registered ``from_document`` hook come back as the
        Document itself.
        """
        if not isinstance(document, Document):
            document = Document(document)
        factory = self.lookup(document.type)
        hook = getattr(factory, MATERIALIZE_HOOK, None)
        if callable(hook):
            return hook(document)
        return document

    def __contains__(self, resource_type: object) -> bool:
        return str(resource_type) in self._types

    def __len__(self) -> int:
        return len(self._types)


default_registry = TypeRegistry()


def register_type(resource_type: str, factory: Any) -> None:
    """Register a type on the process-wide default registry."""
    default_registry.register(resource_type, factory)


def lookup_type(resource_type: str) -> Any | None:
    """Look a type up on the process-wide default registry."""
    return default_registry.lookup(resource_type)
