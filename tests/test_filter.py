import pytest

from markit.filter import Filter, FilterKind, apply_filter
from markit.models import Snippet, SnippetStore


def snippet(name, tags):
    return Snippet(name=name, description="desc", content="ls", executable=True, tags=tags)


@pytest.fixture
def store():
    return SnippetStore(
        snippets=[
            snippet("deploy-prod", ["Ops"]),
            snippet("Deploy-staging", ["ops", "dev"]),
            snippet("backup", ["dev"]),
        ]
    )


def test_all_returns_every_snippet(store):
    result = apply_filter(store, Filter(FilterKind.ALL))
    assert [s.name for s in result] == ["deploy-prod", "Deploy-staging", "backup"]


def test_name_is_case_insensitive_substring(store):
    result = apply_filter(store, Filter(FilterKind.NAME, "DEPLOY"))
    assert [s.name for s in result] == ["deploy-prod", "Deploy-staging"]


def test_name_without_match_is_empty(store):
    assert apply_filter(store, Filter(FilterKind.NAME, "missing")) == []


def test_tag_matches_case_insensitively(store):
    result = apply_filter(store, Filter(FilterKind.TAG, "OPS"))
    assert [s.name for s in result] == ["deploy-prod", "Deploy-staging"]


def test_tag_needs_whole_match(store):
    assert apply_filter(store, Filter(FilterKind.TAG, "de")) == []


def test_results_are_copies(store):
    result = apply_filter(store, Filter(FilterKind.ALL))
    result[0].tags.append("extra")
    result[0].name = "renamed"
    assert store.snippets[0].tags == ["Ops"]
    assert store.snippets[0].name == "deploy-prod"


def test_filter_needs_value_for_name():
    with pytest.raises(ValueError):
        Filter(FilterKind.NAME)


def test_filter_needs_value_for_tag():
    with pytest.raises(ValueError):
        Filter(FilterKind.TAG)