"""Unit tests for IntentBuilder and parse()."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from hypermedia.query.api import IntentBuilder, parse
from hypermedia.query.core import (
    MismatchedFieldsParams,
    MismatchedSortParams,
    MissingFetchIDsCapability,
    ParseCapabilities,
    SortDirection,
)


@pytest.fixture
def fetch_ids():
    """Create a fetch_ids collaborator returning two IDs."""
    return MagicMock(return_value=["1", "2"])


@pytest.fixture
def builder(fetch_ids):
    """Create an IntentBuilder for articles."""
    return IntentBuilder("articles", ParseCapabilities(fetch_ids=fetch_ids))


class TestParsePrimaryIDs:
    """Test the primary-ID fetch stage."""

    def test_missing_fetch_ids(self):
        """Test parse() without fetch_ids is a configuration error."""
        with pytest.raises(MissingFetchIDsCapability):
            parse("articles", {}, None)

    def test_primary_ids_fetched_once(self, builder, fetch_ids):
        """Test the IDs collaborator is called once and its result kept in order."""
        intent = builder.parse({})

        fetch_ids.assert_called_once_with()
        assert intent.primary_kind == "articles"
        assert intent.primary_ids == ("1", "2")

    def test_fetch_ids_error_propagates(self):
        """Test collaborator errors are raised unchanged."""
        error = LookupError("no such collection")
        builder = IntentBuilder(
            "articles", ParseCapabilities(fetch_ids=MagicMock(side_effect=error))
        )

        with pytest.raises(LookupError) as exc_info:
            builder.parse({})
        assert exc_info.value is error


class TestParseIncludes:
    """Test include parsing."""

    def test_includes_in_request_order(self, builder):
        """Test include paths are split and kept in order."""
        intent = builder.parse({"include": ["comments,author.company,author"]})
        assert intent.includes == ("comments", "author.company", "author")

    def test_include_not_a_filter(self, builder):
        """Test include is consumed and never treated as a filter."""
        intent = builder.parse({"include": ["author"]})
        assert "include" not in intent.filters

    def test_no_include(self, builder):
        """Test requests without include have no include paths."""
        assert builder.parse({}).includes == ()


class TestParseFields:
    """Test fields and fields[kind] parsing."""

    def test_bare_fields_scope_to_primary_kind(self, builder):
        """Test bare fields apply to the primary kind."""
        intent = builder.parse({"fields": ["title,body"]})
        assert intent.fields == {"articles": ["title", "body"]}
        assert intent.filters == {}

    def test_bracketed_fields_per_kind(self, builder):
        """Test fields[kind] apply to the named kinds."""
        intent = builder.parse(
            {"fields[articles]": ["title"], "fields[people]": ["name,email"]}
        )
        assert intent.fields == {"articles": ["title"], "people": ["name", "email"]}

    @pytest.mark.parametrize(
        "params",
        [
            {"fields": ["title"], "fields[people]": ["name"]},
            {"fields[people]": ["name"], "fields": ["title"]},
        ],
    )
    def test_mixed_forms_rejected_regardless_of_order(self, builder, params):
        """Test mixing bare and bracketed fields fails."""
        with pytest.raises(MismatchedFieldsParams):
            builder.parse(params)

    def test_mixed_forms_rejected_for_primary_kind_too(self, builder):
        """Test the exclusivity rule is request-wide, not per kind."""
        with pytest.raises(MismatchedFieldsParams):
            builder.parse({"fields": ["title"], "fields[articles]": ["body"]})

    def test_only_first_value_used(self, builder):
        """Test repeated fields parameters only honour the first value."""
        intent = builder.parse({"fields": ["title", "body"]})
        assert intent.fields == {"articles": ["title"]}


class TestParseSort:
    """Test sort and sort[kind] parsing."""

    def test_bare_sort_scopes_to_primary_kind(self, builder):
        """Test bare sort applies to the primary kind with directions."""
        intent = builder.parse({"sort": ["-created,title"]})
        assert intent.sortings == {
            "articles": [
                ("created", SortDirection.DESC),
                ("title", SortDirection.ASC),
            ]
        }

    def test_bracketed_sort_per_kind(self, builder):
        """Test sort[kind] applies to the named kind."""
        intent = builder.parse({"sort[comments]": ["-created"]})
        assert intent.sortings == {"comments": [("created", SortDirection.DESC)]}

    @pytest.mark.parametrize(
        "params",
        [
            {"sort": ["title"], "sort[people]": ["name"]},
            {"sort[people]": ["name"], "sort": ["title"]},
        ],
    )
    def test_mixed_forms_rejected_regardless_of_order(self, builder, params):
        """Test mixing bare and bracketed sort fails."""
        with pytest.raises(MismatchedSortParams):
            builder.parse(params)

    def test_sort_and_fields_tracked_independently(self, builder):
        """Test bare sort with bracketed fields is allowed."""
        intent = builder.parse({"sort": ["title"], "fields[people]": ["name"]})
        assert intent.sortings == {"articles": [("title", SortDirection.ASC)]}
        assert intent.fields == {"people": ["name"]}


class TestParseFilters:
    """Test filter candidate handling."""

    def test_residual_params_become_filters(self, builder):
        """Test unrecognized keys keep all their values."""
        intent = builder.parse({"status": ["draft", "published"], "author": ["9"]})
        assert intent.filters == {"status": ["draft", "published"], "author": ["9"]}

    @pytest.mark.parametrize("key", ["fields[people", "sort[]", "fields[]", "sortx[a]"])
    def test_malformed_directives_fall_through_to_filters(self, builder, key):
        """Test keys that are not well-formed directives are plain filter candidates."""
        intent = builder.parse({key: ["x"]})
        assert intent.filters == {key: ["x"]}
        assert intent.fields == {}
        assert intent.sortings == {}

    def test_allow_list_drops_unknown_filters(self, fetch_ids):
        """Test the allow-list collaborator decides which filters survive."""
        allowed = MagicMock(side_effect=lambda key: key == "status")
        intent = parse(
            "articles",
            {"status": ["draft"], "secret": ["1"], "fields[people": ["x"]},
            fetch_ids,
            filter_allowed=allowed,
        )

        assert intent.filters == {"status": ["draft"]}
        assert allowed.call_count == 3

    def test_allow_list_not_consulted_for_directives(self, fetch_ids):
        """Test include, fields and sort keys never reach the allow-list."""
        allowed = MagicMock(return_value=True)
        parse(
            "articles",
            {"include": ["a"], "fields[people]": ["name"], "sort": ["title"]},
            fetch_ids,
            filter_allowed=allowed,
        )
        allowed.assert_not_called()


class TestDefaultFields:
    """Test default-field injection."""

    def test_defaults_added_for_sorted_kinds(self, fetch_ids):
        """Test defaults are appended for every kind with sort terms."""
        defaults = MagicMock(side_effect=lambda kind: ["id", "type"])
        intent = parse(
            "articles",
            {"fields[articles]": ["title"], "sort[articles]": ["-created"]},
            fetch_ids,
            default_fields=defaults,
        )

        assert intent.fields == {"articles": ["title", "id", "type"]}
        defaults.assert_called_once_with("articles")

    def test_defaults_follow_sort_kinds_not_field_kinds(self, fetch_ids):
        """Test kinds with fields but no sort terms get no defaults."""
        defaults = MagicMock(return_value=["id"])
        intent = parse(
            "articles",
            {"fields[people]": ["name"], "sort[comments]": ["created"]},
            fetch_ids,
            default_fields=defaults,
        )

        assert intent.fields == {"people": ["name"], "comments": ["id"]}
        defaults.assert_called_once_with("comments")

    def test_no_sort_no_defaults(self, fetch_ids):
        """Test nothing is injected when no kind is sorted."""
        defaults = MagicMock(return_value=["id"])
        intent = parse("articles", {"fields": ["title"]}, fetch_ids, default_fields=defaults)

        assert intent.fields == {"articles": ["title"]}
        defaults.assert_not_called()


def test_parse_does_not_mutate_params(builder):
    """Test the caller's parameter mapping is left untouched."""
    params = {"include": ["author"], "fields": ["title"], "sort": ["-id"], "q": ["x"]}
    snapshot = {key: list(values) for key, values in params.items()}

    builder.parse(params)

    assert params == snapshot
