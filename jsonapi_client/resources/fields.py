"""Field descriptors declaring a resource's attributes and relationships."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from jsonapi_client.core.attribute import AttributeSchema
from jsonapi_client.core.collection import Collection
from jsonapi_client.core.document import Document

if TYPE_CHECKING:
    from jsonapi_client.resources.base import Resource


class Attribute:
    """Typed attribute accessor backed by the resource's document.

    Reading returns the cast value; assigning stores the value and writes
    its serialized form into the document so it is sent on save.
    """

    def __init__(
        self,
        cast_type: Any = None,
        *,
        default: Any = None,
        array: bool = False,
        serialize: Callable[[Any], Any] | str | None = None,
    ) -> None:
        self.cast_type = cast_type
        self.options = {"default": default, "array": array, "serialize": serialize}
        self.name = ""
        self.schema: AttributeSchema | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.schema = AttributeSchema(name, self.cast_type, **self.options)

    def __get__(self, instance: Resource | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.attributes.get(self.name)

    def __set__(self, instance: Resource, value: Any) -> None:
        instance.document.attributes[self.name] = self.schema.serialize(value)
        instance.attributes[self.name] = value


class Relationship:
    """Base class for relationship accessors; results are cached per instance."""

    def __init__(self) -> None:
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Resource | None, owner: type) -> Any:
        if instance is None:
            return self
        cache = instance._relationship_cache
        if self.name not in cache:
            cache[self.name] = self.resolve(instance)
        return cache[self.name]

    def resolve(self, instance: Resource) -> Any:
        raise NotImplementedError


class HasOne(Relationship):
    """To-one relationship resolved from the included resources."""

    def resolve(self, instance: Resource) -> Any:
        related = instance.document.relationship(self.name)
        if related is None:
            return None
        if isinstance(related, list):
            raise TypeError(f"Relationship '{self.name}' is to-many; declare it with HasMany().")
        return type(instance).registry().factory(related)


class HasMany(Relationship):
    """To-many relationship resolved into a Collection."""

    def resolve(self, instance: Resource) -> Collection:
        related = instance.document.relationship(self.name)
        if related is None:
            documents: list[Document] = []
        elif isinstance(related, Document):
            documents = [related]
        else:
            documents = related
        registry = type(instance).registry()
        return Collection([registry.factory(document) for document in documents])
