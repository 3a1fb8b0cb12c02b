"""Pydantic models for content-type and taxonomy configuration records."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field


class RegistrationArgs(BaseModel):
    """
    Base record handed to the host on registration.

    Builders assign fields directly (no assignment validation), so chained
    setters never raise. Optional fields stay None until set and are left out
    of to_dict(), letting the host apply its own defaults.
    """

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ContentTypeArgs(RegistrationArgs):
    """Arguments for registering a content type."""

    slug: str = "post_type_slug"
    label: str = ""
    description: str = ""
    labels: dict[str, str] = Field(default_factory=dict)
    supports: list[str] | bool = Field(default_factory=lambda: ["title", "editor"])
    taxonomies: list[str] = Field(default_factory=list)
    hierarchical: bool = False
    public: bool = True
    show_ui: bool = True
    show_in_menu: bool | str = True
    menu_position: int | None = 5
    menu_icon: str | None = None
    show_in_admin_bar: bool = True
    show_in_nav_menus: bool = True
    can_export: bool = True
    has_archive: bool | str = True
    exclude_from_search: bool = False
    publicly_queryable: bool = True
    query_var: bool | str = True
    capability_type: str | list[str] = "page"
    capabilities: dict[str, str] | None = None
    map_meta_cap: bool | None = None
    show_in_rest: bool | None = None
    rest_base: str | None = None
    rest_controller_class: str | None = None
    rewrite: dict[str, Any] | bool | None = None


class TaxonomyArgs(RegistrationArgs):
    """
    Arguments for registering a taxonomy.

    Only the defaults that mean something for a taxonomy are seeded; menu and
    archive settings of content types are not carried over.
    """

    labels: dict[str, str] = Field(default_factory=dict)
    description: str = ""
    public: bool = True
    publicly_queryable: bool = True
    hierarchical: bool = False
    show_ui: bool = True
    show_in_menu: bool | str = True
    show_in_nav_menus: bool = True
    show_in_rest: bool | None = None
    rest_base: str | None = None
    rest_controller_class: str | None = None
    show_tagcloud: bool | None = None
    show_in_quick_edit: bool | None = None
    show_admin_column: bool | None = None
    meta_box_cb: bool | Callable[..., Any] | None = None  # False hides the meta box
    meta_box_sanitize_cb: Callable[..., Any] | None = None
    capabilities: dict[str, str] | None = None
    rewrite: dict[str, Any] | bool | None = None
    query_var: bool | str = True
    update_count_callback: Callable[..., Any] | None = None
    default_term: dict[str, str] | str | None = None
