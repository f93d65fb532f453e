# Rev 1.0.0

from __future__ import annotations

from assistlaunch.models.app_entry import AppEntry
from assistlaunch.services.enumerator import enumerate_apps, sort_entries

from conftest import FakeCatalog


def test_apps_sorted_by_display_name(sample_apps) -> None:
    result = enumerate_apps(FakeCatalog(sample_apps))

    assert [entry.name for entry in result] == ["Browser", "Music", "Notes"]


def test_one_entry_per_identifier() -> None:
    apps = [
        AppEntry(name="Camera", identifier="org.example.camera"),
        AppEntry(name="Video", identifier="org.example.camera"),
        AppEntry(name="Clock", identifier="org.example.clock"),
    ]

    result = enumerate_apps(FakeCatalog(apps))

    assert [entry.identifier for entry in result] == ["org.example.camera", "org.example.clock"]
    assert result[0].name == "Camera"


def test_same_name_keeps_both_apps_in_stable_order() -> None:
    apps = [
        AppEntry(name="Terminal", identifier="xterm.desktop"),
        AppEntry(name="Terminal", identifier="kitty.desktop"),
    ]

    result = sort_entries(apps)

    assert [entry.identifier for entry in result] == ["kitty.desktop", "xterm.desktop"]


def test_failed_query_yields_empty_list(sample_apps) -> None:
    catalog = FakeCatalog(sample_apps, fail=True)

    assert enumerate_apps(catalog) == []
    assert catalog.list_calls == 1


def test_each_call_rescans(sample_apps) -> None:
    catalog = FakeCatalog(sample_apps)
    enumerate_apps(catalog)
    catalog.apps.append(AppEntry(name="Atlas", identifier="org.example.atlas"))

    result = enumerate_apps(catalog)

    assert catalog.list_calls == 2
    assert result[0].identifier == "org.example.atlas"
