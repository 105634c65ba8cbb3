import pytest

from apps.layout_service import InvalidQuery, LayoutService, MalformedDocument
from lib.config.layout_service_loader import ServiceConfig

NOT_FOUND = {
    "item": None,
    "sitecore": {
        "route": {
            "name": "not-found",
            "fields": [{"name": "pageTitle", "value": "Not Found"}],
            "placeholders": {"main": []},
        }
    },
}


def test_miss_returns_not_found(service):
    assert service.layout("any", "/missing", "en").model_dump() == NOT_FOUND
    assert service.layout("any", "/", "fr").model_dump() == NOT_FOUND


def test_about_route_end_to_end(service, write_route):
    write_route(
        "/about",
        "en",
        {
            "name": "About Us",
            "fields": {"pageTitle": "About"},
            "placeholders": {
                "main": [{"componentName": "TeamList", "fields": {"count": 5}}]
            },
        },
    )
    result = service.layout(site="x", routePath="/about", language="en")
    assert result.model_dump() == {
        "item": None,
        "sitecore": {
            "route": {
                "name": "About Us",
                "fields": [{"name": "pageTitle", "value": "About"}],
                "placeholders": {
                    "main": [
                        {"name": "TeamList", "fields": [{"name": "count", "value": "5"}]}
                    ]
                },
            }
        },
    }


def test_home_name_and_language_files(service, write_route):
    write_route("/", "en", {"fields": {"pageTitle": "Home"}})
    write_route("/", "da", {"fields": {"pageTitle": "Hjem"}})
    en = service.layout("x", "/", "en").sitecore.route
    da = service.layout("x", "/", "da").sitecore.route
    assert en.name == "home" and en.fields[0].value == "Home"
    assert da.name == "home" and da.fields[0].value == "Hjem"


def test_site_does_not_partition_store(service, write_route):
    write_route("/about", "en", {"name": "About"})
    assert service.layout("a", "/about", "en") == service.layout("b", "/about", "en")


def test_repeated_queries_are_identical(service, write_route):
    write_route("/about", "en", {"fields": {"a": 1}})
    first = service.layout("x", "/about", "en").model_dump()
    second = service.layout("x", "/about", "en").model_dump()
    assert first == second


def test_documents_are_read_fresh(service, write_route):
    write_route("/about", "en", {"name": "Before"})
    assert service.layout("x", "/about", "en").sitecore.route.name == "Before"
    write_route("/about", "en", {"name": "After"})
    assert service.layout("x", "/about", "en").sitecore.route.name == "After"


def test_malformed_document_propagates(service, write_route):
    write_route("/bad", "en", "name: [oops\n")
    with pytest.raises(MalformedDocument):
        service.layout("x", "/bad", "en")


@pytest.mark.parametrize(
    "site,route_path,language",
    [(None, "/", "en"), ("x", None, "en"), ("x", "/", None), ("x", 7, "en")],
)
def test_missing_query_fields_are_rejected(service, site, route_path, language):
    with pytest.raises(InvalidQuery):
        service.layout(site, route_path, language)


def test_injected_lookup_needs_no_filesystem():
    docs = {("about",): {"name": "About"}}
    service = LayoutService(
        config=ServiceConfig(),
        lookup=lambda segments, language: docs.get(tuple(segments)),
    )
    assert service.layout("x", "/about", "en").sitecore.route.name == "About"
    assert service.layout("x", "/other", "en").sitecore.route.name == "not-found"


def test_empty_text_is_a_valid_query(service, write_route):
    assert service.layout("", "/missing", "en").model_dump() == NOT_FOUND
    assert service.layout("x", "/", "").model_dump() == NOT_FOUND
    write_route("/", "en", {"fields": {"pageTitle": "Home"}})
    route = service.layout("x", "", "en").sitecore.route
    assert route.name == "home"
    assert route.fields[0].value == "Home"


def test_numeric_names_and_keys_are_text(service, write_route):
    write_route(
        "/errors/404",
        "en",
        "name: 404\n"
        "fields:\n"
        "  2024: Year\n"
        "  true: yes\n"
        "placeholders:\n"
        "  main:\n"
        "    - componentName: 2024\n"
        "      fields:\n"
        "        1: one\n",
    )
    route = service.layout("x", "/errors/404", "en").model_dump()["sitecore"]["route"]
    assert route == {
        "name": "404",
        "fields": [
            {"name": "2024", "value": "Year"},
            {"name": "true", "value": "true"},
        ],
        "placeholders": {
            "main": [{"name": "2024", "fields": [{"name": "1", "value": "one"}]}]
        },
    }
