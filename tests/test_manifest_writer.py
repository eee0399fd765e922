"""Tests for manifest serialization."""

import yaml

from scrape_docs.config import APP
from scrape_docs.data_models import ApiDoc
from scrape_docs.pipeline import Manifest, render_manifest, write_manifest
from scrape_docs.utils import file_utils


def build_manifest(*docs):
    manifest = Manifest()
    for doc in docs:
        manifest.try_add(doc)
    return manifest


def test_entry_omits_empty_sections():
    doc = ApiDoc(api_name="DeleteFileW", help_link="https://example.test/deletefilew")

    assert doc.to_manifest_entry() == {"HelpLink": "https://example.test/deletefilew"}


def test_entry_includes_present_sections_in_order():
    doc = ApiDoc(
        api_name="CreateFileW",
        help_link="https://example.test/createfilew",
        description="Opens a file.",
        parameters={"lpFileName": "Name."},
        fields={"cbSize": "Size."},
        return_value="",
    )

    entry = doc.to_manifest_entry()

    assert list(entry) == ["HelpLink", "Description", "Parameters", "Fields", "ReturnValue"]
    assert entry["ReturnValue"] == ""


def test_rendered_manifest_starts_with_header_and_loads_back():
    manifest = build_manifest(
        ApiDoc(api_name="B", help_link="https://example.test/b",
               parameters={"x": "line one\nline two"}),
        ApiDoc(api_name="A", help_link="https://example.test/a", return_value="Zero on failure."),
    )

    text = render_manifest(manifest)

    assert text.splitlines()[0] == APP.generated_header
    assert yaml.safe_load(text) == {
        "A": {"HelpLink": "https://example.test/a", "ReturnValue": "Zero on failure."},
        "B": {"HelpLink": "https://example.test/b", "Parameters": {"x": "line one\nline two"}},
    }
    assert text.index("\nA:") < text.index("\nB:")


def test_empty_manifest_renders_empty_mapping():
    text = render_manifest(Manifest())

    assert yaml.safe_load(text) == {}


def test_write_creates_parent_directories(tmp_path):
    output = tmp_path / "out" / "nested" / "ApiDocs.yml"

    assert write_manifest(build_manifest(ApiDoc(api_name="A", help_link="h")), output)

    assert output.read_text(encoding="utf-8").startswith("# This file was generated by the scrape_docs tool")


def test_failed_write_keeps_previous_manifest(tmp_path, monkeypatch):
    output = tmp_path / "ApiDocs.yml"
    output.write_text("previous\n", encoding="utf-8")

    def fail_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(file_utils.os, "replace", fail_replace)

    assert not write_manifest(build_manifest(ApiDoc(api_name="A", help_link="h")), output)
    assert output.read_text(encoding="utf-8") == "previous\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["ApiDocs.yml"]


def test_write_replaces_existing_manifest(tmp_path):
    output = tmp_path / "ApiDocs.yml"
    output.write_text("previous\n", encoding="utf-8")

    assert write_manifest(build_manifest(ApiDoc(api_name="A", help_link="h")), output)

    assert yaml.safe_load(output.read_text(encoding="utf-8")) == {"A": {"HelpLink": "h"}}
