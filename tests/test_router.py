"""Tests for tasklane.routing.router — compiled trie-based page router."""

import pytest

from tasklane.errors import ConfigurationError, NotFound
from tasklane.routing.route import PageRoute, View
from tasklane.routing.router import PageRouter, parse_path


def _router(*routes: PageRoute) -> PageRouter:
    r = PageRouter()
    for route in routes:
        r.add(route)
    r.compile()
    return r


class TestParsePath:
    def test_static(self) -> None:
        segments = parse_path("/today")
        assert len(segments) == 1
        assert segments[0].value == "today"
        assert segments[0].is_param is False

    def test_param(self) -> None:
        segments = parse_path("/list/{id}")
        assert len(segments) == 2
        assert segments[1].is_param is True
        assert segments[1].param_name == "id"
        assert segments[1].param_type == "str"

    def test_typed_param(self) -> None:
        segments = parse_path("/list/{id:int}")
        assert segments[1].param_type == "int"

    def test_root(self) -> None:
        assert parse_path("/") == []

    def test_rejects_flask_style_param(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_path("/list/<id>")
        assert "{param}" in str(exc_info.value)
        assert "/list/<id>" in str(exc_info.value)

    def test_rejects_colon_param(self) -> None:
        with pytest.raises(ConfigurationError, match="/list/:id"):
            parse_path("/list/:id")

    def test_rejects_unknown_converter(self) -> None:
        with pytest.raises(ConfigurationError, match="uuid"):
            parse_path("/list/{id:uuid}")

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(ConfigurationError, match="empty parameter"):
            parse_path("/list/{}")


class TestResolveStatic:
    def test_root(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        match = r.resolve("/")
        assert match.view == View.HOME
        assert match.params == {}

    def test_empty_path_is_root(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        assert r.resolve("").view == View.HOME

    def test_trailing_slash_ignored(self) -> None:
        r = _router(PageRoute("/today", View.TODAY))
        assert r.resolve("/today/").view == View.TODAY

    def test_query_and_fragment_ignored(self) -> None:
        r = _router(PageRoute("/today", View.TODAY))
        assert r.resolve("/today?sort=due#top").view == View.TODAY

    def test_unmatched_raises(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        with pytest.raises(NotFound) as exc_info:
            r.resolve("/settings")
        assert exc_info.value.path == "/settings"

    def test_prefix_is_not_a_match(self) -> None:
        r = _router(PageRoute("/today", View.TODAY))
        with pytest.raises(NotFound):
            r.resolve("/today/extra")


class TestResolveParams:
    def test_string_param(self) -> None:
        r = _router(PageRoute("/list/{id}", View.LIST))
        match = r.resolve("/list/groceries")
        assert match.params == {"id": "groceries"}

    def test_params_stay_strings(self) -> None:
        r = _router(PageRoute("/list/{id:int}", View.LIST))
        assert r.resolve("/list/9").params == {"id": "9"}

    def test_int_param_rejects_non_digit(self) -> None:
        r = _router(PageRoute("/list/{id:int}", View.LIST))
        with pytest.raises(NotFound):
            r.resolve("/list/abc")

    def test_missing_param(self) -> None:
        r = _router(PageRoute("/list/{id}", View.LIST))
        with pytest.raises(NotFound):
            r.resolve("/list")

    def test_static_beats_param(self) -> None:
        r = _router(
            PageRoute("/list/{id}", View.LIST),
            PageRoute("/list/new", "new-list"),
        )
        assert r.resolve("/list/new").view == "new-list"
        assert r.resolve("/list/7").view == View.LIST

    def test_catch_all(self) -> None:
        r = _router(PageRoute("/docs/{rest:path}", "docs"))
        assert r.resolve("/docs/a/b/c").params == {"rest": "a/b/c"}


class TestRegistration:
    def test_add_after_compile(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        with pytest.raises(RuntimeError, match="after compilation"):
            r.add(PageRoute("/today", View.TODAY))

    def test_duplicate_pattern(self) -> None:
        r = PageRouter()
        r.add(PageRoute("/today", View.TODAY))
        with pytest.raises(ConfigurationError, match="already bound"):
            r.add(PageRoute("/today", View.UPCOMING))

    def test_duplicate_name(self) -> None:
        r = PageRouter()
        r.add(PageRoute("/today", View.TODAY))
        with pytest.raises(ConfigurationError, match="Duplicate route name"):
            r.add(PageRoute("/now", View.TODAY))

    def test_path_converter_must_be_last(self) -> None:
        r = PageRouter()
        with pytest.raises(ConfigurationError, match="must be last"):
            r.add(PageRoute("/docs/{rest:path}/edit", "docs"))

    def test_conflicting_param_names(self) -> None:
        r = PageRouter()
        r.add(PageRoute("/a/{id}/x", "ax"))
        with pytest.raises(ConfigurationError, match="conflicts with"):
            r.add(PageRoute("/a/{name}/y", "ay"))

    def test_conflicting_param_converters(self) -> None:
        r = PageRouter()
        r.add(PageRoute("/a/{id:int}/x", "ax"))
        with pytest.raises(ConfigurationError, match=r"\{id:int\}"):
            r.add(PageRoute("/a/{id}/y", "ay"))

    def test_same_param_shared(self) -> None:
        r = _router(PageRoute("/a/{id}/x", "ax"), PageRoute("/a/{id}/y", "ay"))
        assert r.resolve("/a/7/y").view == "ay"
        assert r.resolve("/a/7/x").params == {"id": "7"}

    def test_routes_in_registration_order(self) -> None:
        routes = (PageRoute("/today", View.TODAY), PageRoute("/", View.HOME))
        assert _router(*routes).routes == list(routes)

    def test_name_defaults_to_view(self) -> None:
        assert PageRoute("/today", View.TODAY).name == "today"


class TestPathFor:
    def test_static(self) -> None:
        r = _router(PageRoute("/today", View.TODAY))
        assert r.path_for("today") == "/today"

    def test_root(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        assert r.path_for("home") == "/"

    def test_param(self) -> None:
        r = _router(PageRoute("/list/{id}", View.LIST))
        assert r.path_for("list", id=9) == "/list/9"

    def test_missing_param(self) -> None:
        r = _router(PageRoute("/list/{id}", View.LIST))
        with pytest.raises(ConfigurationError, match="requires parameter 'id'"):
            r.path_for("list")

    def test_unknown_name(self) -> None:
        r = _router(PageRoute("/", View.HOME))
        with pytest.raises(ConfigurationError, match="No page route named"):
            r.path_for("settings")
