"""Labels declaration shared by content types and taxonomies."""

import copy
from collections.abc import Callable

# translate(text, context, domain) -> display string
Translator = Callable[[str, str | None, str], str]

DEFAULT_TEXT_DOMAIN = "training-language"

LABEL_KEYS: tuple[str, ...] = (
    "name",
    "singular_name",
    "menu_name",
    "parent_item_colon",
    "all_items",
    "view_item",
    "add_new_item",
    "add_new",
    "edit_item",
    "update_item",
    "search_items",
    "not_found",
    "not_found_in_trash",
)

# key -> (text, context)
_DEFAULT_TEXTS: dict[str, tuple[str, str | None]] = {
    "name": ("Post Type Name", "Post Type General Name"),
    "singular_name": ("Post Type Name", "Post Type Singular Name"),
    "menu_name": ("Post Type Name", None),
    "parent_item_colon": ("Parent Item:", None),
    "all_items": ("All Items", None),
    "view_item": ("View Item", None),
    "add_new_item": ("Add New Item", None),
    "add_new": ("Add New", None),
    "edit_item": ("Edit Item", None),
    "update_item": ("Update Item", None),
    "search_items": ("Search Item", None),
    "not_found": ("Not found", None),
    "not_found_in_trash": ("Not found in Trash", None),
}


def identity_translate(text: str, context: str | None, domain: str) -> str:
    """Default translator: return the source text unchanged."""
    return text


class Labels:
    """
    Human-readable strings shown in the host's admin interface.

    All 13 label keys are populated with placeholder text on construction and
    can be overwritten one by one. The description is stored next to the labels
    but is not part of the mapping returned by get().
    """

    def __init__(
        self,
        *,
        translate: Translator | None = None,
        text_domain: str = DEFAULT_TEXT_DOMAIN,
    ) -> None:
        self._translate = translate or identity_translate
        self._text_domain = text_domain
        self._args: dict[str, str] = {}
        self._description: str | None = None
        self._set_defaults()

    def _set_defaults(self) -> "Labels":
        self._args = {
            key: self._translate(text, context, self._text_domain) for key, (text, context) in _DEFAULT_TEXTS.items()
        }
        return self

    def set_name(self, name: str) -> "Labels":
        self._args["name"] = name
        return self

    def get_name(self) -> str:
        return self._args["name"]

    def set_description(self, description: str) -> "Labels":
        self._description = description
        return self

    def get_description(self) -> str:
        """Return the description, or an empty string if none was set."""
        return self._description if self._description is not None else ""

    def set_singular_name(self, singular_name: str) -> "Labels":
        self._args["singular_name"] = singular_name
        return self

    def set_menu_name(self, menu_name: str) -> "Labels":
        self._args["menu_name"] = menu_name
        return self

    def set_parent_item_colon(self, parent_item_colon: str) -> "Labels":
        self._args["parent_item_colon"] = parent_item_colon
        return self

    def set_all_items(self, all_items: str) -> "Labels":
        self._args["all_items"] = all_items
        return self

    def set_view_item(self, view_item: str) -> "Labels":
        self._args["view_item"] = view_item
        return self

    def set_add_new_item(self, add_new_item: str) -> "Labels":
        self._args["add_new_item"] = add_new_item
        return self

    def set_add_new(self, add_new: str) -> "Labels":
        self._args["add_new"] = add_new
        return self

    def set_edit_item(self, edit_item: str) -> "Labels":
        self._args["edit_item"] = edit_item
        return self

    def set_update_item(self, update_item: str) -> "Labels":
        self._args["update_item"] = update_item
        return self

    def set_search_items(self, search_items: str) -> "Labels":
        self._args["search_items"] = search_items
        return self

    def set_not_found(self, not_found: str) -> "Labels":
        self._args["not_found"] = not_found
        return self

    def set_not_found_in_trash(self, not_found_in_trash: str) -> "Labels":
        self._args["not_found_in_trash"] = not_found_in_trash
        return self

    def get(self) -> dict[str, str]:
        """Return a copy of the 13-key label mapping."""
        return copy.deepcopy(self._args)
