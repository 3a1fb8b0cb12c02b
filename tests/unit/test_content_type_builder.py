import warnings

import pytest

from domain.content_type import ContentType
from domain.exceptions import HostNotConfiguredError
from domain.host import get_default_host, reset_default_host, set_default_host
from domain.labels import Labels
from domain.rewrite import Rewrite
from infrastructure.hosts import InMemoryHost


@pytest.fixture(autouse=True)
def _no_default_host():
    reset_default_host()
    yield
    reset_default_host()


def _book_labels() -> Labels:
    return Labels().set_name("Book").set_description("Books catalog")


def test_construction_sets_slug_label_and_description() -> None:
    args = ContentType("book", _book_labels()).get()

    assert args["slug"] == "book"
    assert args["label"] == "Book"
    assert args["description"] == "Books catalog"
    assert args["public"] is True
    assert args["hierarchical"] is False


def test_defaults() -> None:
    args = ContentType("book", Labels()).get()

    assert args["supports"] == ["title", "editor"]
    assert args["taxonomies"] == []
    assert args["labels"] == {}
    assert args["show_ui"] is True
    assert args["show_in_menu"] is True
    assert args["menu_position"] == 5
    assert args["show_in_admin_bar"] is True
    assert args["show_in_nav_menus"] is True
    assert args["can_export"] is True
    assert args["has_archive"] is True
    assert args["exclude_from_search"] is False
    assert args["publicly_queryable"] is True
    assert args["query_var"] is True
    assert args["capability_type"] == "page"
    # unset optionals are left to the host
    for key in ("menu_icon", "capabilities", "map_meta_cap", "show_in_rest", "rest_base", "rewrite"):
        assert key not in args


def test_missing_description_is_empty() -> None:
    assert ContentType("book", Labels()).get()["description"] == ""


def test_setters_chain_and_return_builder() -> None:
    builder = ContentType("book", Labels())
    result = (
        builder.set_supports(["title", "thumbnail"])
        .set_taxonomies(["genre"])
        .set_menu_icon("dashicons-book")
        .set_menu_position(20)
        .set_show_in_rest(True)
        .set_rest_base("books")
        .set_capabilities({"edit_post": "edit_book"})
        .set_map_meta_cap(True)
        .set_has_archive("library")
    )

    assert result is builder
    args = builder.get()
    assert args["supports"] == ["title", "thumbnail"]
    assert args["taxonomies"] == ["genre"]
    assert args["menu_icon"] == "dashicons-book"
    assert args["menu_position"] == 20
    assert args["show_in_rest"] is True
    assert args["rest_base"] == "books"
    assert args["capabilities"] == {"edit_post": "edit_book"}
    assert args["map_meta_cap"] is True
    assert args["has_archive"] == "library"


def test_capability_type_pair_is_stored_as_list() -> None:
    pair = ("book", "books")
    builder = ContentType("book", Labels()).set_capability_type(pair)

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        args = builder.get()

    assert args["capability_type"] == ["book", "books"]


def test_setter_order_does_not_matter_for_distinct_keys() -> None:
    a = ContentType("book", Labels()).set_public(True).set_hierarchical(True)
    b = ContentType("book", Labels()).set_hierarchical(True).set_public(True)
    assert a.get() == b.get()


def test_last_write_wins() -> None:
    builder = ContentType("book", Labels()).set_public(True).set_public(False)
    assert builder.get()["public"] is False


def test_embedded_labels_are_a_copy() -> None:
    labels = Labels().set_name("Book")
    builder = ContentType("book", labels).set_labels(labels)

    labels.set_name("Changed").set_menu_name("Changed")

    args = builder.get()
    assert args["label"] == "Book"
    assert args["labels"]["name"] == "Book"
    assert args["labels"]["menu_name"] == "Post Type Name"


def test_set_labels_replaces_previous_mapping() -> None:
    builder = ContentType("book", Labels()).set_labels(Labels().set_name("First"))
    builder.set_labels(Labels().set_name("Second"))
    assert builder.get()["labels"]["name"] == "Second"


def test_embedded_rewrite_is_a_copy() -> None:
    rewrite = Rewrite().set_slug("books")
    builder = ContentType("book", Labels()).set_rewrite(rewrite)

    rewrite.set_slug("changed").set_feeds(True)

    assert builder.get()["rewrite"] == {"slug": "books"}


def test_get_returns_independent_mapping() -> None:
    builder = ContentType("book", Labels())
    builder.get()["supports"].append("comments")
    assert builder.get()["supports"] == ["title", "editor"]


def test_register_hands_record_to_host() -> None:
    host = InMemoryHost()
    ContentType("book", _book_labels()).set_menu_icon("dashicons-book").register(host)

    assert list(host.content_types) == ["book"]
    assert host.content_types["book"]["menu_icon"] == "dashicons-book"
    assert host.content_types["book"]["label"] == "Book"


def test_register_uses_default_host() -> None:
    host = InMemoryHost()
    set_default_host(host)

    ContentType("book", Labels()).register()

    assert get_default_host() is host
    assert "book" in host.content_types


def test_register_without_any_host_fails() -> None:
    with pytest.raises(HostNotConfiguredError):
        ContentType("book", Labels()).register()


def test_host_errors_propagate_unchanged() -> None:
    class BrokenHost(InMemoryHost):
        def register_content_type(self, identifier, record):
            raise OSError("host unavailable")

    with pytest.raises(OSError, match="host unavailable"):
        ContentType("book", Labels()).register(BrokenHost())
