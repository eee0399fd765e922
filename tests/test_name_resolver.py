"""Tests for API name resolution."""

import pytest
from hypothesis import given, strategies as st

from scrape_docs.extractors import presumed_api_name, resolve_api_name


@pytest.mark.parametrize("stem, expected", [
    ("nf-fileapi-createfilew", "createfilew"),
    ("ns-winuser-lastinputinfo", "lastinputinfo"),
    ("nf-d3d12-id3d12device-createheap", "id3d12device-createheap"),
    ("readme", None),
    ("n-fileapi-createfilew", None),
    ("nf-fileapi", None),
])
def test_presumed_api_name(stem, expected):
    assert presumed_api_name(stem) == expected


def test_resolves_case_insensitively():
    assert resolve_api_name("nf-fileapi-createfilew", ["fileapi/CreateFileW", "CreateFileW"]) == "CreateFileW"


def test_dots_in_declared_names_match_dashes():
    assert resolve_api_name("nf-foo-foo-bar", ["Foo.Bar"]) == "Foo.Bar"


def test_first_declared_match_wins():
    assert resolve_api_name("nf-fileapi-createfilew", ["createfilew", "CreateFileW"]) == "createfilew"


def test_no_declared_match():
    assert resolve_api_name("nf-fileapi-createfilew", ["CreateFileA", "DeleteFileW"]) is None


def test_non_conforming_file_name_never_matches():
    assert resolve_api_name("readme", ["readme"]) is None


name_part = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_",
                    min_size=1, max_size=12)
api_names = st.lists(name_part, min_size=1, max_size=3).map(".".join)


@given(name=api_names, other=st.lists(api_names, max_size=3))
def test_declared_name_matching_file_name_is_returned(name, other):
    stem = "nf-header-" + name.replace(".", "-").swapcase()
    declared = [n for n in other if n.replace(".", "-").lower() != name.replace(".", "-").lower()]
    declared.append(name)

    assert resolve_api_name(stem, declared) == name


@given(name=api_names)
def test_unrelated_names_do_not_match(name):
    stem = "nf-header-" + name.replace(".", "-") + "-x"

    assert resolve_api_name(stem, [name]) is None


def test_matching_is_lowercase_comparison_not_casefolding():
    assert resolve_api_name("nf-header-strasse", ["STRAßE"]) is None
    assert resolve_api_name("nf-header-straße", ["STRAßE"]) == "STRAßE"
