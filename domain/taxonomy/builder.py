"""Fluent builder for custom taxonomy registration."""

import copy
from collections.abc import Callable, Sequence
from typing import Any

from domain.host import Registrable, RegistrationHost, resolve_host
from domain.identifiers import validate_identifier
from domain.labels import Labels
from domain.rewrite import Rewrite
from domain.schemas import TaxonomyArgs
from domain.taxonomy.reserved import RESERVED_TERMS

TAXONOMY_KIND = "taxonomy"
MAX_TAXONOMY_LENGTH = 32


class Taxonomy(Registrable):
    """
    Define a custom taxonomy.

    Args:
        identifier: Taxonomy key, at most 32 characters and not a reserved term
        content_types: Content type or list of content types the taxonomy is attached to
        labels: Labels for the taxonomy; the description is read from it as well

    Raises:
        ReservedIdentifierError: If identifier is a reserved term
        IdentifierTooLongError: If identifier has more than 32 characters
    """

    def __init__(self, identifier: str, content_types: str | Sequence[str], labels: Labels) -> None:
        self._identifier = validate_identifier(
            identifier,
            reserved=RESERVED_TERMS,
            max_length=MAX_TAXONOMY_LENGTH,
            kind=TAXONOMY_KIND,
        )
        self._content_types: str | list[str] = (
            content_types if isinstance(content_types, str) else list(content_types)
        )
        self._args = TaxonomyArgs(labels=labels.get(), description=labels.get_description())

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def content_types(self) -> str | list[str]:
        """Object type(s) the taxonomy is associated with."""
        if isinstance(self._content_types, str):
            return self._content_types
        return list(self._content_types)

    def set_labels(self, labels: Labels) -> "Taxonomy":
        """
        Replace the embedded labels.

        When no labels are given the host falls back to tag labels for flat
        taxonomies and category labels for hierarchical ones.
        """
        self._args.labels = labels.get()
        return self

    def set_public(self, public: bool) -> "Taxonomy":
        """
        Whether the taxonomy is intended for public use, in the admin or on the front end.

        publicly_queryable, show_ui and show_in_nav_menus inherit from it on the host side.
        """
        self._args.public = public
        return self

    def set_publicly_queryable(self, publicly_queryable: bool) -> "Taxonomy":
        self._args.publicly_queryable = publicly_queryable
        return self

    def set_hierarchical(self, hierarchical: bool) -> "Taxonomy":
        """Hierarchical taxonomies behave like categories, flat ones like tags."""
        self._args.hierarchical = hierarchical
        return self

    def set_show_ui(self, show_ui: bool) -> "Taxonomy":
        self._args.show_ui = show_ui
        return self

    def set_show_in_menu(self, show_in_menu: bool | str) -> "Taxonomy":
        """Show the taxonomy as a submenu of its content type menu. Requires show_ui."""
        self._args.show_in_menu = show_in_menu
        return self

    def set_show_in_nav_menus(self, show_in_nav_menus: bool) -> "Taxonomy":
        self._args.show_in_nav_menus = show_in_nav_menus
        return self

    def set_show_in_rest(self, show_in_rest: bool) -> "Taxonomy":
        """Include the taxonomy in the REST API; needed for the block editor."""
        self._args.show_in_rest = show_in_rest
        return self

    def set_rest_base(self, rest_base: str) -> "Taxonomy":
        self._args.rest_base = rest_base
        return self

    def set_rest_controller_class(self, rest_controller_class: str) -> "Taxonomy":
        self._args.rest_controller_class = rest_controller_class
        return self

    def set_show_tagcloud(self, show_tagcloud: bool) -> "Taxonomy":
        self._args.show_tagcloud = show_tagcloud
        return self

    def set_show_in_quick_edit(self, show_in_quick_edit: bool) -> "Taxonomy":
        self._args.show_in_quick_edit = show_in_quick_edit
        return self

    def set_show_admin_column(self, show_admin_column: bool) -> "Taxonomy":
        """Display a column for the taxonomy on the content type listing screens."""
        self._args.show_admin_column = show_admin_column
        return self

    def set_meta_box_cb(self, meta_box_cb: bool | Callable[..., Any]) -> "Taxonomy":
        """Callback rendering the meta box, or False to hide the meta box entirely."""
        self._args.meta_box_cb = meta_box_cb
        return self

    def set_meta_box_sanitize_cb(self, meta_box_sanitize_cb: Callable[..., Any]) -> "Taxonomy":
        self._args.meta_box_sanitize_cb = meta_box_sanitize_cb
        return self

    def set_capabilities(self, capabilities: dict[str, str]) -> "Taxonomy":
        self._args.capabilities = dict(capabilities)
        return self

    def set_rewrite(self, rewrite: Rewrite) -> "Taxonomy":
        self._args.rewrite = rewrite.get()
        return self

    def set_query_var(self, query_var: bool | str) -> "Taxonomy":
        """
        False disables ?{query_var}={term_slug} lookups; a string replaces the
        default query var (the taxonomy key).
        """
        self._args.query_var = query_var
        return self

    def set_update_count_callback(self, update_count_callback: Callable[..., Any]) -> "Taxonomy":
        """Called by the host whenever the term count is updated."""
        self._args.update_count_callback = update_count_callback
        return self

    def set_default_term(self, default_term: dict[str, str] | str) -> "Taxonomy":
        self._args.default_term = copy.deepcopy(default_term)
        return self

    def get(self) -> dict[str, Any]:
        """Return a copy of the accumulated registration arguments."""
        return self._args.to_dict()

    def register(self, host: RegistrationHost | None = None) -> None:
        resolve_host(host).register_taxonomy(self.identifier, self.content_types, self.get())
