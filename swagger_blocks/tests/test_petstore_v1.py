"""
Swagger 1.2 petstore: declarations spread over several classes.

Test data based on the Swagger UI petstore 1.2 example
(resource listing "api-docs" and the "pet" API declaration).
"""

import json
from pathlib import Path

import pytest

from swagger_blocks import (
    AggregatorConfig,
    DeclarationError,
    SwaggerBlocks,
    build_api_json,
    build_root_json,
    declarations,
    swagger_api_root,
    swagger_model,
    swagger_root,
)

TEST_DATA = Path(__file__).parent / "test_data" / "v1"


def load_reference(name):
    with open(TEST_DATA / name) as f:
        return json.load(f)


class PetController(SwaggerBlocks):
    @swagger_root(swaggerVersion="1.2")
    def resource_listing(root):
        root.set("apiVersion", "1.0.0")
        with root.info(title="Swagger Sample App") as info:
            info.set(
                "description",
                "This is a sample server Petstore server.  You can find out more about Swagger "
                "at http://swagger.wordnik.com or on irc.freenode.net, #swagger.",
            )
            info.set("termsOfServiceUrl", "http://helloreverb.com/terms/")
            info.keys(contact="apiteam@wordnik.com", license="Apache 2.0")
            info.set("licenseUrl", "http://www.apache.org/licenses/LICENSE-2.0.html")
        root.api(path="/pet", description="Operations about pets")
        with root.api() as api:
            api.set("path", "/user")
            api.set("description", "Operations about user")
        with root.api() as api:
            api.set("path", "/store")
            api.set("description", "Operations about store")
        with root.authorization("oauth2", type="oauth2") as oauth2:
            oauth2.scope(scope="email", description="Access to your email address")
            with oauth2.scope() as scope:
                scope.set("scope", "pets")
                scope.set("description", "Access to your pets")
            with oauth2.grant_type("implicit", tokenName="access_token") as implicit:
                with implicit.login_endpoint() as endpoint:
                    endpoint.set("url", "http://petstore.swagger.wordnik.com/oauth/dialog")
            with oauth2.grant_type("authorization_code") as code:
                with code.token_request_endpoint(clientSecretName="client_secret") as endpoint:
                    endpoint.set("url", "http://petstore.swagger.wordnik.com/oauth/requestToken")
                    endpoint.set("clientIdName", "client_id")
                with code.token_endpoint(tokenName="access_code") as endpoint:
                    endpoint.set("url", "http://petstore.swagger.wordnik.com/oauth/token")

    # All swagger_api_root declarations with the same key are merged.
    @swagger_api_root("pets", swaggerVersion="1.2")
    def pets(resource):
        resource.set("apiVersion", "1.0.0")
        resource.set("basePath", "http://petstore.swagger.wordnik.com/api")
        resource.set("resourcePath", "/pet")
        resource.set("produces", ["application/json", "application/xml", "text/plain", "text/html"])
        with resource.api() as api:
            api.set("path", "/pet/{petId}")
            with api.operation(method="GET") as operation:
                operation.set("summary", "Find pet by ID")
                operation.set("notes", "Returns a pet based on ID")
                operation.set("type", "Pet")
                operation.set("nickname", "getPetById")
                with operation.parameter(name="petId") as parameter:
                    parameter.set("paramType", "path")
                    parameter.set("description", "ID of pet that needs to be fetched")
                    parameter.set("required", True)
                    parameter.set("type", "integer")
                    parameter.set("format", "int64")
                    parameter.set("minimum", "1.0")
                    parameter.set("maximum", "100000.0")
                with operation.response_message() as message:
                    message.set("code", 400)
                    message.set("message", "Invalid ID supplied")
                with operation.response_message() as message:
                    message.set("code", 404)
                    message.set("message", "Pet not found")

    @swagger_api_root("pets")
    def pets_partial_update(resource):
        with resource.api() as api:
            api.set("path", "/pet/{petId}")
            with api.operation(method="PATCH") as operation:
                operation.set("summary", "partial updates to a pet")
                operation.set("notes", "")
                operation.set("type", "array")
                operation.set("nickname", "partialUpdate")
                operation.set("items", {"$ref": "Pet"})
                operation.set("produces", ["application/json", "application/xml"])
                operation.set("consumes", ["application/json", "application/xml"])
                with operation.authorization("oauth2") as scopes:
                    with scopes.scope() as scope:
                        scope.set("scope", "test:anything")
                        scope.set("description", "anything")
                with operation.parameter("petId", {"paramType": "path"}) as parameter:
                    parameter.set("description", "ID of pet that needs to be fetched")
                    parameter.set("required", True)
                    parameter.set("type", "string")
                with operation.parameter("body") as parameter:
                    parameter.set("paramType", "body")
                    parameter.set("description", "Pet object that needs to be added to the store")
                    parameter.set("required", True)
                    parameter.set("type", "Pet")
                operation.response_message(code=400, block=lambda m: m.set("message", "Invalid tag value"))

    @swagger_api_root("pets")
    def pets_find_by_status(resource):
        with resource.api() as api:
            api.set("path", "/pet/findByStatus")
            with api.operation(method="GET") as operation:
                operation.set("summary", "Finds Pets by status")
                operation.set("notes", "Multiple status values can be provided with comma seperated strings")
                operation.set("type", "array")
                operation.set("nickname", "findPetsByStatus")
                operation.field("items", {"$ref": "Pet"})
                with operation.parameter("status") as parameter:
                    parameter.set("paramType", "query")
                    parameter.set("description", "Status values that need to be considered for filter")
                    parameter.set("defaultValue", "available")
                    parameter.set("required", True)
                    parameter.set("type", "string")
                    parameter.set("enum", ["available", "pending", "sold"])
                operation.response_message(code=400, message="Invalid status value")


class StoreController:
    pass


declarations(StoreController).declare_api_root("stores", block=lambda resource: resource.api(path="/store"))


class UserController:
    pass


with declarations(UserController).declare_api_root("users") as users:
    users.api(path="/user")


class TagModel(SwaggerBlocks):
    @swagger_model("Tag")
    def tag(model):
        model.set("id", "Tag")
        with model.property("id") as prop:
            prop.set("type", "integer")
            prop.set("format", "int64")
        model.property("name", type="string")


class OtherModelsContainer(SwaggerBlocks):
    @swagger_model("Pet", id="Pet")
    def pet(model):
        model.set("required", ["id", "name"])
        with model.property("id") as prop:
            prop.set("type", "integer")
            prop.set("format", "int64")
            prop.set("description", "unique identifier for the pet")
            prop.set("minimum", "0.0")
            prop.set("maximum", "100.0")
        model.property("category", {"$ref": "Category"})
        model.property("name", type="string")
        with model.property("photoUrls") as prop:
            prop.set("type", "array")
            prop.items(type="string")
        with model.property("tags") as prop:
            prop.set("type", "array")
            prop.items({"$ref": "Tag"})
        with model.property("status") as prop:
            prop.set("type", "string")
            prop.set("description", "pet status in the store")
            prop.set("enum", ["available", "pending", "sold"])

    @swagger_model("Category")
    def category(model):
        model.set("id", "Category")
        model.property("id", type="integer", format="int64")
        model.property("name", type="string")


class BlankController:
    pass


SWAGGERED_CLASSES = [
    PetController,
    UserController,
    StoreController,
    TagModel,
    OtherModelsContainer,
]


class TestBuildRootJson:
    """Resource listing aggregation."""

    def test_outputs_the_declared_listing(self):
        """Without summaries, the listing is exactly the declared root."""
        config = AggregatorConfig(summarize_api_roots=False)
        actual = build_root_json(SWAGGERED_CLASSES, config)
        data = load_reference("resource_listing.json")

        assert actual["info"] == data["info"]
        assert actual["authorizations"] == data["authorizations"]
        for i, api_data in enumerate(actual["apis"]):
            assert api_data == data["apis"][i]
        assert actual == data

    def test_summarizes_api_roots(self):
        """Keyed resources contribute one {path, description} entry per distinct pair."""
        actual = build_root_json(SWAGGERED_CLASSES)
        declared = load_reference("resource_listing.json")["apis"]

        assert actual["apis"] == declared + [
            {"path": "/pet/{petId}"},
            {"path": "/pet/findByStatus"},
            {"path": "/user"},
            {"path": "/store"},
        ]

    def test_is_idempotent(self):
        swaggered_classes = [PetController, UserController, StoreController]
        first = build_root_json(swaggered_classes)
        second = build_root_json(swaggered_classes)
        assert first == second
        assert first is not second

    def test_errors_if_no_swagger_root_is_declared(self):
        with pytest.raises(DeclarationError):
            build_root_json([])

    def test_errors_if_multiple_swagger_roots_are_declared(self):
        with pytest.raises(DeclarationError):
            build_root_json([PetController, PetController])

    def test_does_not_error_if_given_non_swaggered_classes(self):
        assert build_root_json([PetController, BlankController]) == build_root_json([PetController])


class TestBuildApiJson:
    """API declaration aggregation."""

    def test_outputs_the_correct_data(self):
        actual = build_api_json("pets", SWAGGERED_CLASSES)
        data = load_reference("api_declaration.json")

        # Multiple expectations for better test diff output.
        assert actual["apis"][0]["operations"][0] == data["apis"][0]["operations"][0]
        assert actual["apis"][0]["operations"][1] == data["apis"][0]["operations"][1]
        assert actual["apis"][0]["operations"] == data["apis"][0]["operations"]
        assert actual["apis"] == data["apis"]
        assert actual["models"] == data["models"]
        assert actual == data

    def test_preserves_declaration_order(self):
        actual = build_api_json("pets", SWAGGERED_CLASSES)
        assert list(actual) == ["swaggerVersion", "apiVersion", "basePath", "resourcePath", "produces", "apis", "models"]
        assert [operation["method"] for operation in actual["apis"][0]["operations"]] == ["GET", "PATCH"]
        assert list(actual["models"]) == ["Tag", "Pet", "Category"]

    def test_is_idempotent(self):
        first = build_api_json("pets", SWAGGERED_CLASSES)
        second = build_api_json("pets", SWAGGERED_CLASSES)
        assert first == second
        assert first == load_reference("api_declaration.json")

    def test_other_resources(self):
        actual = build_api_json("stores", SWAGGERED_CLASSES)
        assert actual["apis"] == [{"path": "/store"}]

    def test_unknown_resource_has_empty_apis(self):
        actual = build_api_json("fake", SWAGGERED_CLASSES)
        assert actual["apis"] == []
        assert list(actual["models"]) == ["Tag", "Pet", "Category"]

    def test_errors_if_no_swagger_root_is_declared(self):
        with pytest.raises(DeclarationError):
            build_api_json("pets", [])

    def test_errors_if_multiple_swagger_roots_are_declared(self):
        with pytest.raises(DeclarationError):
            build_api_json("pets", [PetController, PetController])
