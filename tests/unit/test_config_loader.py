from pathlib import Path

import pytest
from pydantic import ValidationError

from infrastructure.config import HostKind, load_run_config, parse_run_config
from infrastructure.constants import HOST_ENV_VAR

DECLARATIONS = """
host: manifest
content_types:
  - slug: book
    labels:
      name: Books
      description: Books catalog
    options:
      menu_icon: dashicons-book
    rewrite:
      slug: books
taxonomies:
  - slug: genre
    content_types: [book]
    options:
      hierarchical: true
"""


@pytest.fixture(autouse=True)
def _clear_host_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(HOST_ENV_VAR, raising=False)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "registrations.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_run_config(tmp_path: Path) -> None:
    cfg = load_run_config(_write(tmp_path, DECLARATIONS))

    assert cfg.host is HostKind.MANIFEST
    assert cfg.text_domain == "training-language"
    assert cfg.content_types[0].slug == "book"
    assert cfg.content_types[0].labels.name == "Books"
    assert cfg.content_types[0].options.menu_icon == "dashicons-book"
    assert cfg.content_types[0].rewrite is not None
    assert cfg.content_types[0].rewrite.slug == "books"
    assert cfg.taxonomies[0].content_types == ["book"]
    assert cfg.taxonomies[0].options.hierarchical is True


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_run_config(tmp_path / "nope.yaml")


def test_empty_file_gives_empty_config(tmp_path: Path) -> None:
    cfg = load_run_config(_write(tmp_path, ""))
    assert cfg.host is HostKind.MEMORY
    assert cfg.content_types == []
    assert cfg.taxonomies == []


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Expected YAML dict"):
        load_run_config(_write(tmp_path, "- book\n- genre\n"))


def test_env_overrides_host(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(HOST_ENV_VAR, "Memory")
    assert parse_run_config({"host": "manifest"}).host is HostKind.MEMORY


def test_unknown_host() -> None:
    with pytest.raises(ValueError, match="Invalid host value"):
        parse_run_config({"host": "ftp"})


def test_unknown_option_is_rejected() -> None:
    with pytest.raises(ValidationError):
        parse_run_config({"content_types": [{"slug": "book", "options": {"menu_colour": "red"}}]})


def test_duplicate_slugs_are_rejected() -> None:
    with pytest.raises(ValidationError, match="Duplicate content type slug"):
        parse_run_config({"content_types": [{"slug": "book"}, {"slug": "book"}]})


def test_taxonomy_requires_content_types() -> None:
    with pytest.raises(ValidationError):
        parse_run_config({"taxonomies": [{"slug": "genre", "content_types": []}]})


def test_reserved_slug_is_accepted_by_the_loader() -> None:
    # identifiers are validated by the builders, not the config layer
    cfg = parse_run_config({"content_types": [{"slug": "page"}]})
    assert cfg.content_types[0].slug == "page"
