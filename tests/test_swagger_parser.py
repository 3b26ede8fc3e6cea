import json
from pathlib import Path

from api_term.parser.detect import detect_version
from api_term.parser.loader import load_file
from api_term.parser.swagger import parse_document

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectVersion:
    def test_detect_openapi3(self):
        assert detect_version({"openapi": "3.0.3"}) == "openapi3"

    def test_detect_swagger2(self):
        assert detect_version({"swagger": "2.0"}) == "swagger2"

    def test_detect_unknown(self):
        assert detect_version({"info": {}}) is None
        assert detect_version({"openapi": "1.0"}) is None


class TestOpenApiParser:
    def test_parse_endpoints_count(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        assert len(endpoints) == 5

    def test_methods_follow_document_order(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        assert [(e.method, e.path) for e in endpoints] == [
            ("GET", "/pets"),
            ("POST", "/pets"),
            ("GET", "/pets/{petId}"),
            ("DELETE", "/pets/{petId}"),
            ("GET", "/search"),
        ]

    def test_parse_ref_parameter(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        get_pets = endpoints[0]
        assert [p.name for p in get_pets.parameters] == ["limit", "tag"]
        assert get_pets.parameters[0].location == "query"
        assert get_pets.parameters[0].required is False

    def test_path_level_parameters_are_inherited(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        get_pet = endpoints[2]
        assert get_pet.parameters[0].name == "petId"
        assert get_pet.parameters[0].location == "path"
        assert get_pet.parameters[0].required is True

    def test_operation_parameters_follow_inherited_ones(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        delete_pet = endpoints[3]
        assert [(p.name, p.location) for p in delete_pet.parameters] == [
            ("petId", "path"),
            ("X-Request-Id", "header"),
        ]

    def test_operation_overrides_path_level_parameter(self):
        doc = {
            "paths": {
                "/a/{id}": {
                    "parameters": [{"name": "id", "in": "path", "required": True}],
                    "get": {"parameters": [{"name": "id", "in": "path", "required": False}]},
                }
            }
        }
        [endpoint] = parse_document(doc)
        assert len(endpoint.parameters) == 1
        assert endpoint.parameters[0].required is False

    def test_unresolvable_ref_is_skipped(self):
        endpoints = load_file(FIXTURES / "api.yaml")
        search = endpoints[4]
        assert [p.name for p in search.parameters] == ["q"]

    def test_non_http_keys_are_ignored(self):
        doc = {"paths": {"/x": {"summary": "x", "head": {}, "get": {}}}}
        endpoints = parse_document(doc)
        assert [e.method for e in endpoints] == ["GET"]

    def test_parse_swagger2_json(self):
        doc = json.loads((FIXTURES / "swagger.json").read_text())
        [endpoint] = parse_document(doc)
        assert endpoint.path == "/users/{id}/posts"
        assert [p.name for p in endpoint.required_params("path")] == ["id"]
        assert [p.name for p in endpoint.required_params("query")] == ["since"]

    def test_required_must_be_boolean_true(self):
        doc = {
            "paths": {
                "/a": {
                    "get": {
                        "parameters": [
                            {"name": "s", "in": "query", "required": "false"},
                            {"name": "t", "in": "query", "required": True},
                        ]
                    }
                }
            }
        }
        [endpoint] = parse_document(doc)
        assert [p.required for p in endpoint.parameters] == [False, True]
