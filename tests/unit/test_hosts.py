import json
from pathlib import Path

import pytest

from domain.exceptions import RegistrationConflictError
from infrastructure.config.models import HostKind, RunConfig
from infrastructure.hosts import InMemoryHost, ManifestHost, make_host
from infrastructure.hosts.registry import get_host_class, register_host


def test_make_host_resolves_configured_kind() -> None:
    assert isinstance(make_host(RunConfig()), InMemoryHost)
    assert isinstance(make_host(RunConfig(host=HostKind.MANIFEST)), ManifestHost)


def test_make_host_passes_override_flag() -> None:
    host = make_host(RunConfig(override=True))
    assert host.override is True


def test_registry_rejects_duplicate_registration() -> None:
    assert get_host_class(HostKind.MEMORY) is InMemoryHost
    with pytest.raises(RuntimeError, match="already registered"):
        register_host(HostKind.MEMORY, ManifestHost)


def test_registering_same_class_again_is_a_no_op() -> None:
    register_host(HostKind.MEMORY, InMemoryHost)
    assert get_host_class(HostKind.MEMORY) is InMemoryHost


def test_duplicate_identifier_conflicts() -> None:
    host = InMemoryHost()
    host.register_content_type("book", {"public": True})

    with pytest.raises(RegistrationConflictError):
        host.register_content_type("book", {"public": False})

    # same identifier under a different kind is fine
    host.register_taxonomy("book", "book", {})
    assert host.content_types["book"] == {"public": True}


def test_override_replaces_in_place() -> None:
    host = InMemoryHost(override=True)
    host.register_content_type("book", {"public": True})
    host.register_content_type("movie", {})
    host.register_content_type("book", {"public": False})

    assert [r.identifier for r in host.registrations] == ["book", "movie"]
    assert host.content_types["book"] == {"public": False}


def test_registered_records_cannot_be_changed_through_properties() -> None:
    host = InMemoryHost()
    host.register_content_type("book", {"supports": ["title"]})
    host.register_taxonomy("genre", ["book"], {"public": True})

    host.content_types["book"]["supports"].append("editor")
    host.content_types["book"]["public"] = False
    host.taxonomies["genre"].content_types.append("movie")
    host.registrations[0].args.clear()

    assert host.content_types["book"] == {"supports": ["title"]}
    assert host.taxonomies["genre"].content_types == ["book"]


def test_taxonomy_registration_keeps_association() -> None:
    host = InMemoryHost()
    host.register_taxonomy("genre", ("book", "magazine"), {"hierarchical": True})

    registration = host.taxonomies["genre"]
    assert registration.content_types == ["book", "magazine"]
    assert registration.args == {"hierarchical": True}


def sanitize_genre(value):
    return value


def test_manifest_host_writes_json(tmp_path: Path) -> None:
    host = ManifestHost()
    host.register_content_type("book", {"slug": "book", "public": True})
    host.register_taxonomy("genre", "book", {"hierarchical": True, "meta_box_sanitize_cb": sanitize_genre})

    path = host.write(tmp_path / "out" / "manifest.json")

    manifest = json.loads(path.read_text(encoding="utf-8"))
    assert manifest["content_types"] == [{"identifier": "book", "args": {"slug": "book", "public": True}}]
    taxonomy = manifest["taxonomies"][0]
    assert taxonomy["identifier"] == "genre"
    assert taxonomy["content_types"] == "book"
    assert taxonomy["args"]["meta_box_sanitize_cb"].endswith("sanitize_genre")
