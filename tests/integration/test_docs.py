"""Integration tests for the generated API documentation."""

import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    @pytest.fixture()
    def schema(self, api_client):
        response = api_client.get("/docs/schema", HTTP_ACCEPT="application/json")
        assert response.status_code == 200
        return response.json()

    def test_schema_lists_product_paths(self, schema):
        assert "/api/products" in schema["paths"]
        assert "/api/products/{id}" in schema["paths"]

    def test_paths_are_published_without_trailing_slash(self, schema):
        assert not [path for path in schema["paths"] if path.endswith("/")]

    def test_collection_operations(self, schema):
        operations = schema["paths"]["/api/products"]
        assert set(operations) >= {"get", "post"}
        assert "201" in operations["post"]["responses"]
        assert "400" in operations["post"]["responses"]

    def test_detail_operations(self, schema):
        operations = schema["paths"]["/api/products/{id}"]
        assert set(operations) >= {"get", "put", "patch", "delete"}
        for method in ("get", "put", "patch", "delete"):
            assert "404" in operations[method]["responses"]

    def test_operations_are_tagged(self, schema):
        for operation in schema["paths"]["/api/products"].values():
            assert operation["tags"] == ["Products"]

    def test_product_component(self, schema):
        properties = schema["components"]["schemas"]["Product"]["properties"]
        assert set(properties) >= {"id", "name", "price", "availability"}

    def test_info(self, schema):
        assert schema["info"]["title"] == "Products REST API"


class TestDocsPages:
    def test_swagger_ui(self, client):
        response = client.get("/docs")
        assert response.status_code == 200
        assert b"swagger" in response.content.lower()

    def test_redoc(self, client):
        response = client.get("/docs/redoc")
        assert response.status_code == 200


class TestEnvelopes:
    @pytest.fixture()
    def schema(self, api_client):
        return api_client.get("/docs/schema", HTTP_ACCEPT="application/json").json()

    def test_list_response_is_an_envelope_not_an_array(self, schema):
        response = schema["paths"]["/api/products"]["get"]["responses"]["200"]
        body = response["content"]["application/json"]["schema"]
        assert body == {"$ref": "#/components/schemas/ProductListEnvelope"}

    def test_validation_error_component(self, schema):
        component = schema["components"]["schemas"]["ValidationErrors"]
        assert "errors" in component["properties"]
