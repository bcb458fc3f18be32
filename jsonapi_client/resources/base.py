"""Base class for schema-driven JSON:API resources."""

from __future__ import annotations

from typing import Any, Mapping

from jsonapi_client.client import Agent, Client
from jsonapi_client.core.attribute import AttributeSchema
from jsonapi_client.core.collection import Collection
from jsonapi_client.core.document import Document
from jsonapi_client.core.registry import TypeRegistry, default_registry
from jsonapi_client.query.builder import Query
from jsonapi_client.resources.fields import Attribute, Relationship
from jsonapi_client.schemas.resource import JSONAPIErrorObject


class Resource:
    """Subclass to declare a JSON:API resource.

    Example::

        class Article(Resource):
            class Meta:
                type_ = "articles"

            title = Attribute(str)
            published = Attribute("date")
            author = HasOne()
            comments = HasMany()

        article = Article.include("author").find(1)
        article.author.name
    """

    class Meta:
        """Resource metadata (type, path, key type, registry)."""

        type_: str = ""
        path: str | None = None
        key_type: Any = str
        registry: TypeRegistry | None = None

    schema: dict[str, AttributeSchema] = {}
    relationships: tuple[str, ...] = ()
    _client: Client | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        schema: dict[str, AttributeSchema] = {}
        relationships: list[str] = []
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Attribute):
                    schema[value.name] = value.schema
                elif isinstance(value, Relationship) and value.name not in relationships:
                    relationships.append(value.name)
        cls.schema = schema
        cls.relationships = tuple(relationships)
        cls._client = None
        if "Meta" in cls.__dict__ and cls.get_type():
            cls.registry().register(cls.get_type(), cls)

    def __init__(self, document: Document | None = None, **attributes: Any) -> None:
        if document is None:
            resource_id = attributes.pop("id", None)
            document = Document(
                {
                    "data": {
                        "type": self.get_type(),
                        "id": None if resource_id is None else str(resource_id),
                        "attributes": self._serialize(attributes),
                    }
                }
            )
        self.document = document
        self._relationship_cache: dict[str, Any] = {}
        self._initialize_attributes()

    def _initialize_attributes(self) -> None:
        self.attributes: dict[str, Any] = dict(self.document.attributes)
        for name, attribute in self.schema.items():
            self.attributes[name] = attribute.process(self.attributes.get(name))

    @classmethod
    def _serialize(cls, attributes: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: cls.schema[name].serialize(value) if name in cls.schema else value
            for name, value in attributes.items()
        }

    @classmethod
    def _meta(cls, option: str, default: Any = None) -> Any:
        return getattr(cls.Meta, option, default)

    @classmethod
    def get_type(cls) -> str:
        """Return the JSON:API type."""
        return cls._meta("type_", "")

    @classmethod
    def registry(cls) -> TypeRegistry:
        return cls._meta("registry") or default_registry

    @classmethod
    def client(cls) -> Client:
        """Return the Client shared by every instance of this resource."""
        if cls.__dict__.get("_client") is None:
            cls._client = Client(
                type_=cls.get_type(), path=cls._meta("path"), registry=cls.registry()
            )
        return cls._client

    @classmethod
    def from_document(cls, document: Document) -> Resource:
        """Materialize a resource from a Document (registry hook)."""
        return cls(document)

    @classmethod
    def format_id(cls, resource_id: Any) -> Any:
        key_type = cls._meta("key_type", str)
        return key_type(resource_id) if callable(key_type) else resource_id

    @classmethod
    def query(cls) -> Query:
        return cls.client().query()

    @classmethod
    def include(cls, *args: Any) -> Query:
        return cls.query().include(*args)

    @classmethod
    def sort(cls, *args: Any) -> Query:
        return cls.query().sort(*args)

    @classmethod
    def filter(cls, *args: Mapping[str, Any]) -> Query:
        return cls.query().filter(*args)

    @classmethod
    def fields(cls, *args: Any) -> Query:
        """Sparse fieldsets; bare names apply to this resource's own type.

        ``Cat.fields("name", {"people": ["name"]})`` sends
        ``fields[cats]=name&fields[people]=name``.
        """
        own = [arg for arg in args if not isinstance(arg, Mapping)]
        mappings = [arg for arg in args if isinstance(arg, Mapping)]
        if own:
            mappings.insert(0, {cls.get_type(): own})
        return cls.query().fields(*mappings)

    @classmethod
    def page(cls, **opts: Any) -> Query:
        return cls.query().page(**opts)

    @classmethod
    def headers(cls, **opts: str) -> Query:
        return cls.query().headers(**opts)

    @classmethod
    def fetch(cls) -> Collection:
        return cls.query().fetch()

    @classmethod
    def fetch_from(cls, endpoint: str, *, collection: bool = True) -> Any:
        return cls.query().fetch_from(endpoint, collection=collection)

    @classmethod
    def find(cls, resource_id: Any) -> Any:
        return cls.query().find(resource_id)

    @property
    def id(self) -> Any:
        if self.document.id is None:
            return None
        return self.format_id(self.document.id)

    @property
    def persisted(self) -> bool:
        return self.id is not None

    @property
    def is_new(self) -> bool:
        return not self.persisted

    @property
    def errors(self) -> list[JSONAPIErrorObject]:
        return self.document.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.document.errors)

    def agent(self) -> Agent:
        return self.client().agent()

    def save(self) -> bool:
        """Create or update the resource; the document is replaced by the server's.

        A rejected save raises :class:`ApiErrorResponse` and leaves the
        resource unchanged. The return value is False only when the returned
        resource object itself carries ``errors``.
        """
        self.document = self.document.save(self.agent())
        self._relationship_cache.clear()
        self._initialize_attributes()
        return not self.has_errors

    def destroy(self) -> bool:
        return self.document.destroy(self.agent())

    def serialized_attributes(self) -> dict[str, Any]:
        """Return declared attributes in their wire representation."""
        return {
            name: attribute.serialize(self.attributes.get(name))
            for name, attribute in self.schema.items()
        }

    def to_key(self) -> list[Any]:
        return [] if self.is_new else [self.id]

    def to_param(self) -> str | None:
        return None if self.is_new else str(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        return self.get_type() == other.get_type() and self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash((self.get_type(), self.id))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
