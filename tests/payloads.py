"""JSON:API response bodies served by the stub server."""

ARTIST_9_INCLUDE_ALBUMS_RECORD_LABEL = {
    "data": {
        "type": "artists",
        "id": "9",
        "attributes": {"name": "The Decemberists", "twitter": "thedecemberists"},
        "relationships": {
            "albums": {
                "data": [
                    {"type": "albums", "id": "1"},
                    {"type": "albums", "id": "2"},
                ],
                "links": {
                    "self": "http://api.example.com/artists/9/relationships/albums",
                    "related": "http://api.example.com/artists/9/albums",
                },
            },
            "members": {"links": {"related": "http://api.example.com/artists/9/members"}},
            "record_label": {"data": {"type": "record_labels", "id": "1"}},
            "manager": {"data": None},
        },
        "links": {"self": "http://api.example.com/artists/9"},
    },
    "included": [
        {"type": "albums", "id": "1", "attributes": {"title": "The Crane Wife"}},
        {"type": "albums", "id": "2", "attributes": {"title": "Picaresque"}},
        {"type": "record_labels", "id": "1", "attributes": {"name": "Capitol"}},
    ],
}

ARTIST_9 = {
    "data": {
        "type": "artists",
        "id": "9",
        "attributes": {"name": "The Decemberists", "twitter": "thedecemberists"},
        "relationships": {
            "albums": {"data": [{"type": "albums", "id": "1"}]},
            "record_label": {"data": {"type": "record_labels", "id": "1"}},
        },
    }
}

ALBUM_1_INCLUDE_ARTIST = {
    "data": {
        "type": "albums",
        "id": "1",
        "attributes": {"title": "The Crane Wife"},
        "relationships": {
            "artist": {
                "data": {"type": "artists", "id": "9"},
                "links": {
                    "self": "http://api.example.com/albums/1/relationships/artist",
                    "related": "http://api.example.com/albums/1/artist",
                },
            }
        },
    },
    "included": [
        {"type": "artists", "id": "9", "attributes": {"name": "The Decemberists"}},
    ],
}

ALBUMS_INCLUDE_ARTIST = {
    "data": [
        {
            "type": "albums",
            "id": "1",
            "attributes": {"title": "The Crane Wife"},
            "relationships": {"artist": {"data": {"type": "artists", "id": "9"}}},
        },
        {
            "type": "albums",
            "id": "2",
            "attributes": {"title": "Picaresque"},
            "relationships": {"artist": {"data": {"type": "artists", "id": "9"}}},
        },
    ],
    "included": [
        {"type": "artists", "id": "9", "attributes": {"name": "The Decemberists"}},
    ],
}

ALBUMS = {
    "jsonapi": {"version": "1.0"},
    "meta": {"total_count": 3},
    "links": {"self": "http://api.example.com/albums/"},
    "data": [
        {"type": "albums", "id": "1", "attributes": {"title": "The Crane Wife"}},
        {"type": "albums", "id": "2", "attributes": {"title": "Picaresque"}},
        {"type": "albums", "id": "3", "attributes": {"title": "Her Majesty"}},
    ],
}

VENUE_1 = {"data": {"type": "venues", "id": "1", "attributes": {"name": "Crystal Ballroom"}}}

VENUES = {
    "data": [
        {"type": "venues", "id": "1", "attributes": {"name": "Crystal Ballroom"}},
        {"type": "venues", "id": "2", "attributes": {"name": "Roseland"}},
    ]
}

PERSON_9 = {
    "data": {
        "type": "people",
        "id": "9",
        "attributes": {
            "first_name": "Chauncy",
            "last_name": "Vunderboot",
            "twitter": "chauncy",
            "created_at": "2016-03-01T12:30:00+00:00",
            "post_count": "12",
            "meta": {"shoe_size": 11},
        },
        "relationships": {"articles": {"data": []}},
    }
}

ARTICLES_INCLUDE_AUTHOR_COMMENTS_DASHERIZED = {
    "data": [
        {
            "type": "articles",
            "id": "1",
            "attributes": {"title": "JSON API paints my bikeshed!"},
            "relationships": {
                "author": {"data": {"type": "people", "id": "9"}},
                "comments": {
                    "data": [
                        {"type": "comments", "id": "5"},
                        {"type": "comments", "id": "12"},
                    ]
                },
            },
        }
    ],
    "included": [
        {
            "type": "people",
            "id": "9",
            "attributes": {
                "first-name": "Dan",
                "last-name": "Gebhardt",
                "twitter": "dgeb",
                "post-count": "3",
            },
        },
        {
            "type": "comments",
            "id": "5",
            "attributes": {
                "body": "First!",
                "score": "1.5",
                "created-at": "2016-03-02T08:00:00Z",
                "is-spam": False,
                "mentions": ["dgeb", "ChauncyT"],
            },
            "relationships": {"author": {"data": {"type": "people", "id": "9"}}},
        },
        {
            "type": "comments",
            "id": "12",
            "attributes": {
                "body": "I like XML better",
                "score": "0",
                "created-at": "not a time",
                "is-spam": True,
                "mentions": "dgeb",
            },
            "relationships": {"author": {"data": {"type": "people", "id": "9"}}},
        },
    ],
}

ERRORS = {
    "errors": [
        {
            "status": "422",
            "title": "Invalid Attribute",
            "detail": "First name must contain at least three characters.",
            "source": {"pointer": "/data/attributes/first_name"},
        }
    ]
}
