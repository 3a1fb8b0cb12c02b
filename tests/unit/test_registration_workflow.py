import pytest

from application import build_content_type, build_taxonomy, register_declarations
from domain.exceptions import RegistrationConflictError, ReservedIdentifierError
from infrastructure.config import parse_run_config
from infrastructure.config.models import ContentTypeDeclaration, TaxonomyDeclaration
from infrastructure.hosts import InMemoryHost

DECLARATIONS = {
    "content_types": [
        {
            "slug": "book",
            "labels": {"name": "Books", "singular_name": "Book", "description": "Books catalog"},
            "options": {"supports": ["title", "thumbnail"], "menu_position": 20, "show_in_rest": True},
            "rewrite": {"slug": "books", "with_front": False},
        }
    ],
    "taxonomies": [
        {
            "slug": "genre",
            "content_types": "book",
            "labels": {"name": "Genres", "description": "Genres"},
            "options": {"hierarchical": True, "meta_box_cb": False},
        }
    ],
}


def test_build_content_type_applies_declaration() -> None:
    decl = ContentTypeDeclaration.model_validate(DECLARATIONS["content_types"][0])
    args = build_content_type(decl).get()

    assert args["slug"] == "book"
    assert args["label"] == "Books"
    assert args["description"] == "Books catalog"
    assert args["labels"]["singular_name"] == "Book"
    assert args["labels"]["menu_name"] == "Post Type Name"
    assert args["supports"] == ["title", "thumbnail"]
    assert args["menu_position"] == 20
    assert args["show_in_rest"] is True
    assert args["rewrite"] == {"slug": "books", "with_front": False}
    # untouched defaults survive
    assert args["capability_type"] == "page"
    assert "menu_icon" not in args


def test_build_taxonomy_applies_declaration() -> None:
    decl = TaxonomyDeclaration.model_validate(DECLARATIONS["taxonomies"][0])
    taxonomy = build_taxonomy(decl, text_domain="library")

    assert taxonomy.content_types == "book"
    args = taxonomy.get()
    assert args["hierarchical"] is True
    assert args["meta_box_cb"] is False
    assert args["description"] == "Genres"
    assert args["labels"]["name"] == "Genres"
    assert "rewrite" not in args


def test_register_declarations_into_host() -> None:
    host = InMemoryHost()
    summary = register_declarations(parse_run_config(DECLARATIONS), host)

    assert summary.content_types == ["book"]
    assert summary.taxonomies == ["genre"]
    assert summary.total == 2
    assert [(r.kind, r.identifier) for r in host.registrations] == [("content_type", "book"), ("taxonomy", "genre")]
    assert host.taxonomies["genre"].content_types == "book"


def test_reserved_slug_aborts_run() -> None:
    cfg = parse_run_config({"content_types": [{"slug": "book"}, {"slug": "attachment"}, {"slug": "movie"}]})
    host = InMemoryHost()

    with pytest.raises(ReservedIdentifierError):
        register_declarations(cfg, host)

    assert list(host.content_types) == ["book"]


def test_host_conflict_propagates() -> None:
    host = InMemoryHost()
    host.register_content_type("book", {})

    with pytest.raises(RegistrationConflictError):
        register_declarations(parse_run_config(DECLARATIONS), host)
