from __future__ import annotations

import logging

import pytest

from mdot.adapters.config_file import translate_document, translate_entry
from mdot.domain import Link, MalformedEntryError


def test_bare_string_keeps_value_as_package_name() -> None:
    entry = translate_entry("fish", "fish-shell")

    assert entry.name == "fish"
    assert entry.package_name == "fish-shell"
    assert entry.depends == ()
    assert entry.links == ()
    assert entry.exclude == ()


def test_table_fields_are_translated() -> None:
    entry = translate_entry(
        "hypr",
        {
            "depends": ["fish", "neovim"],
            "pkg": {"arch": "hyprland"},
            "exclude": "*",
            "templates": ["hyprland.conf"],
        },
    )

    assert entry.depends == ("fish", "neovim")
    assert entry.package_name == {"arch": "hyprland"}
    assert entry.exclude == ("*",)
    assert entry.templates == ("hyprland.conf",)
    assert entry.enabled is True


def test_links_table_accepts_single_and_multiple_targets() -> None:
    entry = translate_entry(
        "bash",
        {"links": {"bashrc.sh": "~/.bashrc", "profile": ["~/.profile", "~/.bash_profile"]}},
    )

    assert entry.links == (
        Link(source="bashrc.sh", targets=("~/.bashrc",)),
        Link(source="profile", targets=("~/.profile", "~/.bash_profile")),
    )


def test_links_array_carries_flags() -> None:
    entry = translate_entry(
        "tmux",
        {"links": [{"source": "src", "targets": "tar", "backup": True}]},
    )

    assert entry.links == (Link(source="src", targets=("tar",), overwrite=False, backup=True),)


def test_key_wins_over_conflicting_name(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        entry = translate_entry("hypr", {"name": "Hyprland"})

    assert entry.name == "hypr"
    assert "Key 'hypr' overrides entry name 'Hyprland'" in caplog.text


def test_unknown_keys_are_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        entry = translate_entry("git", {"on_install": "make", "depends": ["hypr"]})

    assert entry.depends == ("hypr",)
    assert "Key 'on_install' of entry 'git' is ignored" in caplog.text


@pytest.mark.parametrize(
    "value",
    [
        {"depends": "fish"},
        {"depends": [1, 2]},
        {"enabled": "yes"},
        {"links": [{"source": "src"}]},
        {"links": [{"source": "src", "targets": []}]},
        {"exclude": "*", "excludes": ["x"]},
        {"package_name": "git", "pkg": "git"},
    ],
)
def test_wrong_field_shapes_are_malformed(value: dict[str, object]) -> None:
    with pytest.raises(MalformedEntryError) as excinfo:
        translate_entry("broken", value)

    assert excinfo.value.name == "broken"
    assert excinfo.value.kind == "MalformedEntry"


def test_non_table_value_is_malformed() -> None:
    with pytest.raises(MalformedEntryError, match="expected a string or a table"):
        translate_entry("broken", 42)


def test_document_mapping_preserves_declaration_order() -> None:
    entries = translate_document({"ly": "ly", "git": {"depends": ["ly"]}, "fish": "fish"})

    assert [entry.name for entry in entries] == ["ly", "git", "fish"]


def test_document_list_requires_named_tables() -> None:
    entries = translate_document(["ly", {"name": "alacritty", "excludes": "as_string"}])

    assert [entry.name for entry in entries] == ["ly", "alacritty"]
    assert entries[1].exclude == ("as_string",)

    with pytest.raises(MalformedEntryError, match="must have a 'name'"):
        translate_document([{"links": {"src": "tar"}}])


def test_document_must_be_table_or_list() -> None:
    with pytest.raises(MalformedEntryError, match="top level"):
        translate_document("ly", source="conf.json")
