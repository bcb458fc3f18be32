import pytest

from domain import Album, Artist
from jsonapi_client import (
    ApiErrorResponse,
    Collection,
    Document,
    ResponseMapper,
    TypeRegistry,
    WrongShapeError,
)
from payloads import ALBUMS, ALBUMS_INCLUDE_ARTIST, ARTIST_9_INCLUDE_ALBUMS_RECORD_LABEL, ERRORS


class TestResource:
    def test_single_resource(self):
        mapper = ResponseMapper({"data": {"type": "cats", "id": "1"}})
        cat = mapper.resource()
        assert isinstance(cat, Document)
        assert (cat.type, cat.id) == ("cats", "1")

    def test_collection_call_on_single_resource(self):
        with pytest.raises(WrongShapeError):
            ResponseMapper({"data": {"type": "cats", "id": "1"}}).collection()

    def test_resource_call_on_collection(self):
        with pytest.raises(WrongShapeError):
            ResponseMapper(ALBUMS).resource()

    def test_null_data(self):
        mapper = ResponseMapper({"data": None})
        assert mapper.resource() is None
        with pytest.raises(WrongShapeError):
            mapper.collection()

    def test_registered_type_is_materialized(self):
        artist = ResponseMapper(ARTIST_9_INCLUDE_ALBUMS_RECORD_LABEL).resource()
        assert isinstance(artist, Artist)
        assert artist.name == "The Decemberists"

    def test_explicit_registry(self):
        registry = TypeRegistry()
        artist = ResponseMapper(ARTIST_9_INCLUDE_ALBUMS_RECORD_LABEL, registry=registry).resource()
        assert isinstance(artist, Document)


class TestCollection:
    def test_collection(self):
        albums = ResponseMapper({"data": [{"type": "cats", "id": "1"}], "included": []}).collection()
        assert isinstance(albums, Collection)
        assert len(albums) == 1
        assert albums[0].type == "cats"

    def test_order_and_envelope_members(self):
        albums = ResponseMapper(ALBUMS).collection()
        assert [album.id for album in albums] == ["1", "2", "3"]
        assert all(isinstance(album, Album) for album in albums)
        assert albums.meta == {"total_count": 3}
        assert albums.links == {"self": "http://api.example.com/albums/"}
        assert albums.jsonapi == {"version": "1.0"}

    def test_items_share_the_included_table(self):
        registry = TypeRegistry()
        mapper = ResponseMapper(ALBUMS_INCLUDE_ARTIST, registry=registry)
        first, second = mapper.collection()
        assert first.included is second.included is mapper.included
        assert first.relationship("artist").id == second.relationship("artist").id == "9"

    def test_empty_collection(self):
        albums = ResponseMapper({"data": []}).collection()
        assert len(albums) == 0
        assert albums.first is None


class TestErrors:
    @pytest.mark.parametrize("entry_point", ["resource", "collection"])
    def test_errors_short_circuit(self, entry_point):
        mapper = ResponseMapper(ERRORS, status=422)
        with pytest.raises(ApiErrorResponse) as excinfo:
            getattr(mapper, entry_point)()
        assert excinfo.value.errors == ERRORS["errors"]
        assert excinfo.value.status == 422
        assert "422 Invalid Attribute" in str(excinfo.value)

    def test_errors_win_over_data(self):
        body = {"data": {"type": "cats"}, "errors": [{"title": "Nope"}]}
        with pytest.raises(ApiErrorResponse):
            ResponseMapper(body).resource()

    def test_has_errors(self):
        assert ResponseMapper(ERRORS).has_errors()
        assert not ResponseMapper(ALBUMS).has_errors()

    def test_error_objects(self):
        with pytest.raises(ApiErrorResponse) as excinfo:
            ResponseMapper(ERRORS).collection()
        error = excinfo.value.error_objects[0]
        assert error.source == {"pointer": "/data/attributes/first_name"}
        assert error.status == "422"


class TestJsonapiResources:
    def test_primary_data_then_included(self):
        resources = ResponseMapper(ARTIST_9_INCLUDE_ALBUMS_RECORD_LABEL).jsonapi_resources()
        assert [resource["type"] for resource in resources] == [
            "artists",
            "albums",
            "albums",
            "record_labels",
        ]

    def test_collection_data(self):
        resources = ResponseMapper(ALBUMS_INCLUDE_ARTIST).jsonapi_resources()
        assert [(r["type"], r["id"]) for r in resources] == [
            ("albums", "1"),
            ("albums", "2"),
            ("artists", "9"),
        ]

    def test_null_data(self):
        assert ResponseMapper({"data": None}).jsonapi_resources() == []
