from oas_normalizer.oas2.request import translate_to_request
from oas_normalizer.schema import JSON_SCHEMA_DIALECT

DOC = {"definitions": {"Pet": {"type": "object", "properties": {"name": {"type": "string"}}}}}


class TestParameters:
    def test_bucketed_by_location(self):
        request = translate_to_request(
            DOC,
            [
                {"name": "petId", "in": "path", "required": True, "type": "string"},
                {"name": "limit", "in": "query", "type": "integer"},
                {"name": "X-Trace", "in": "header", "type": "string"},
                {"name": "weird", "in": "cookie", "type": "string"},
            ],
            [],
        )
        assert [p.name for p in request.path] == ["petId"]
        assert [p.name for p in request.query] == ["limit"]
        assert [p.name for p in request.headers] == ["X-Trace"]
        assert request.cookie == []

    def test_type_keywords_go_into_schema(self):
        request = translate_to_request(
            DOC,
            [{"name": "limit", "in": "query", "type": "integer", "maximum": 50, "description": "Page size"}],
            [],
        )
        assert request.query[0].to_dict() == {
            "name": "limit",
            "style": "form",
            "description": "Page size",
            "schema": {"$schema": JSON_SCHEMA_DIALECT, "type": "integer", "maximum": 50},
        }

    def test_collection_format_multi_explodes(self):
        request = translate_to_request(
            DOC,
            [{"name": "tags", "in": "query", "type": "array", "items": {"type": "string"}, "collectionFormat": "multi"}],
            [],
        )
        assert request.query[0].style == "form"
        assert request.query[0].explode is True

    def test_collection_format_pipes(self):
        request = translate_to_request(
            DOC,
            [{"name": "tags", "in": "query", "type": "array", "items": {"type": "string"}, "collectionFormat": "pipes"}],
            [],
        )
        assert request.query[0].style == "pipeDelimited"
        assert request.query[0].explode is False

    def test_header_and_path_are_simple(self):
        request = translate_to_request(
            DOC,
            [{"name": "id", "in": "path", "type": "string"}, {"name": "X-Id", "in": "header", "type": "string"}],
            [],
        )
        assert request.path[0].style == "simple"
        assert request.headers[0].style == "simple"


class TestBody:
    def test_body_param_per_consumed_media_type(self):
        request = translate_to_request(
            DOC,
            [{"name": "pet", "in": "body", "required": True, "schema": {"$ref": "#/definitions/Pet"}}],
            ["application/json", "application/xml"],
        )
        body = request.body.to_dict()
        assert body["required"] is True
        assert [c["mediaType"] for c in body["contents"]] == ["application/json", "application/xml"]
        assert body["contents"][0]["schema"] == {
            "$schema": JSON_SCHEMA_DIALECT,
            "type": "object",
            "properties": {"name": {"type": "string"}},
        }

    def test_form_data_becomes_object_schema(self):
        request = translate_to_request(
            DOC,
            [
                {"name": "name", "in": "formData", "type": "string", "required": True},
                {"name": "file", "in": "formData", "type": "file"},
            ],
            ["multipart/form-data"],
        )
        [content] = request.body.contents
        assert content.media_type == "multipart/form-data"
        assert content.schema_ == {
            "$schema": JSON_SCHEMA_DIALECT,
            "type": "object",
            "properties": {"name": {"type": "string"}, "file": {"type": "file"}},
            "required": ["name"],
        }

    def test_form_data_defaults_to_urlencoded(self):
        request = translate_to_request(DOC, [{"name": "q", "in": "formData", "type": "string"}], ["application/json"])
        assert [c.media_type for c in request.body.contents] == ["application/x-www-form-urlencoded"]

    def test_no_body(self):
        request = translate_to_request(DOC, [], ["application/json"])
        assert request.body.to_dict() == {"contents": []}
