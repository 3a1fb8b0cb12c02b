"""Fluent builder for custom content type registration."""

from typing import Any

from domain.content_type.reserved import RESERVED_CONTENT_TYPES
from domain.host import Registrable, RegistrationHost, resolve_host
from domain.identifiers import validate_identifier
from domain.labels import Labels
from domain.rewrite import Rewrite
from domain.schemas import ContentTypeArgs

CONTENT_TYPE_KIND = "content type"
MAX_CONTENT_TYPE_LENGTH = 20


class ContentType(Registrable):
    """
    Define a custom content type.

    The identifier is validated once, on construction. Every setter overwrites
    exactly one option and returns the builder, so calls can be chained:

        >>> labels = Labels().set_name("Book").set_description("Books catalog")
        >>> book = ContentType("book", labels).set_hierarchical(True).set_menu_icon("dashicons-book")

    Args:
        identifier: Content type key, at most 20 characters and not reserved
        labels: Labels providing the general name and description

    Raises:
        ReservedIdentifierError: If identifier is a reserved content type
        IdentifierTooLongError: If identifier has more than 20 characters
    """

    def __init__(self, identifier: str, labels: Labels) -> None:
        validate_identifier(
            identifier,
            reserved=RESERVED_CONTENT_TYPES,
            max_length=MAX_CONTENT_TYPE_LENGTH,
            kind=CONTENT_TYPE_KIND,
        )
        self._args = ContentTypeArgs(
            slug=identifier,
            label=labels.get_name(),
            description=labels.get_description(),
        )

    @property
    def identifier(self) -> str:
        return self._args.slug

    def set_labels(self, labels: Labels) -> "ContentType":
        self._args.labels = labels.get()
        return self

    def set_supports(self, supports: list[str] | bool) -> "ContentType":
        """Core features the content type supports (title, editor, thumbnail, ...)."""
        self._args.supports = supports if isinstance(supports, bool) else list(supports)
        return self

    def set_taxonomies(self, taxonomies: list[str]) -> "ContentType":
        self._args.taxonomies = list(taxonomies)
        return self

    def set_hierarchical(self, hierarchical: bool) -> "ContentType":
        self._args.hierarchical = hierarchical
        return self

    def set_public(self, public: bool) -> "ContentType":
        self._args.public = public
        return self

    def set_show_ui(self, show_ui: bool) -> "ContentType":
        self._args.show_ui = show_ui
        return self

    def set_show_in_menu(self, show_in_menu: bool | str) -> "ContentType":
        """True for a top-level menu, or the parent menu slug to show it as a submenu."""
        self._args.show_in_menu = show_in_menu
        return self

    def set_menu_position(self, menu_position: int) -> "ContentType":
        self._args.menu_position = menu_position
        return self

    def set_menu_icon(self, menu_icon: str) -> "ContentType":
        self._args.menu_icon = menu_icon
        return self

    def set_query_var(self, query_var: bool | str) -> "ContentType":
        self._args.query_var = query_var
        return self

    def set_show_in_admin_bar(self, show_in_admin_bar: bool) -> "ContentType":
        self._args.show_in_admin_bar = show_in_admin_bar
        return self

    def set_show_in_nav_menus(self, show_in_nav_menus: bool) -> "ContentType":
        self._args.show_in_nav_menus = show_in_nav_menus
        return self

    def set_can_export(self, can_export: bool) -> "ContentType":
        self._args.can_export = can_export
        return self

    def set_has_archive(self, has_archive: bool | str) -> "ContentType":
        self._args.has_archive = has_archive
        return self

    def set_exclude_from_search(self, exclude_from_search: bool) -> "ContentType":
        self._args.exclude_from_search = exclude_from_search
        return self

    def set_publicly_queryable(self, publicly_queryable: bool) -> "ContentType":
        self._args.publicly_queryable = publicly_queryable
        return self

    def set_capability_type(self, capability_type: str | list[str]) -> "ContentType":
        """A single base name, or the (singular, plural) pair used to derive capabilities."""
        self._args.capability_type = capability_type if isinstance(capability_type, str) else list(capability_type)
        return self

    def set_capabilities(self, capabilities: dict[str, str]) -> "ContentType":
        self._args.capabilities = dict(capabilities)
        return self

    def set_map_meta_cap(self, map_meta_cap: bool) -> "ContentType":
        self._args.map_meta_cap = map_meta_cap
        return self

    def set_show_in_rest(self, show_in_rest: bool) -> "ContentType":
        self._args.show_in_rest = show_in_rest
        return self

    def set_rest_base(self, rest_base: str) -> "ContentType":
        self._args.rest_base = rest_base
        return self

    def set_rest_controller_class(self, rest_controller_class: str) -> "ContentType":
        self._args.rest_controller_class = rest_controller_class
        return self

    def set_rewrite(self, rewrite: Rewrite) -> "ContentType":
        self._args.rewrite = rewrite.get()
        return self

    def get(self) -> dict[str, Any]:
        """Return a copy of the accumulated registration arguments."""
        return self._args.to_dict()

    def register(self, host: RegistrationHost | None = None) -> None:
        resolve_host(host).register_content_type(self.identifier, self.get())
