"""Configuration models (Pydantic classes)."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain.labels import DEFAULT_TEXT_DOMAIN


class HostKind(str, Enum):
    """Supported registration hosts."""

    MEMORY = "memory"
    MANIFEST = "manifest"


class _StrictModel(BaseModel):
    # Typos in the declarations file must not be silently ignored
    model_config = ConfigDict(extra="forbid")


class LabelsConfig(_StrictModel):
    """Label overrides; anything left out keeps its placeholder default."""

    name: str | None = None
    singular_name: str | None = None
    menu_name: str | None = None
    parent_item_colon: str | None = None
    all_items: str | None = None
    view_item: str | None = None
    add_new_item: str | None = None
    add_new: str | None = None
    edit_item: str | None = None
    update_item: str | None = None
    search_items: str | None = None
    not_found: str | None = None
    not_found_in_trash: str | None = None
    description: str | None = None


class RewriteConfig(_StrictModel):
    """URL rewrite settings. Only the keys present in the file are passed on."""

    slug: str | None = None
    with_front: bool | None = None
    feeds: bool | None = None
    pages: bool | None = None
    ep_mask: int | str | None = None
    hierarchical: bool | None = None


class ContentTypeOptions(_StrictModel):
    """Optional content type settings, applied through the builder setters."""

    supports: list[str] | bool | None = None
    taxonomies: list[str] | None = None
    hierarchical: bool | None = None
    public: bool | None = None
    show_ui: bool | None = None
    show_in_menu: bool | str | None = None
    menu_position: int | None = None
    menu_icon: str | None = None
    query_var: bool | str | None = None
    show_in_admin_bar: bool | None = None
    show_in_nav_menus: bool | None = None
    can_export: bool | None = None
    has_archive: bool | str | None = None
    exclude_from_search: bool | None = None
    publicly_queryable: bool | None = None
    capability_type: str | list[str] | None = None
    capabilities: dict[str, str] | None = None
    map_meta_cap: bool | None = None
    show_in_rest: bool | None = None
    rest_base: str | None = None
    rest_controller_class: str | None = None


class TaxonomyOptions(_StrictModel):
    """
    Optional taxonomy settings, applied through the builder setters.

    Callback options (meta_box_sanitize_cb, update_count_callback) cannot be
    expressed in a declarations file; only meta_box_cb=false is accepted.
    """

    public: bool | None = None
    publicly_queryable: bool | None = None
    hierarchical: bool | None = None
    show_ui: bool | None = None
    show_in_menu: bool | str | None = None
    show_in_nav_menus: bool | None = None
    show_in_rest: bool | None = None
    rest_base: str | None = None
    rest_controller_class: str | None = None
    show_tagcloud: bool | None = None
    show_in_quick_edit: bool | None = None
    show_admin_column: bool | None = None
    meta_box_cb: bool | None = None
    capabilities: dict[str, str] | None = None
    query_var: bool | str | None = None
    default_term: dict[str, str] | str | None = None


class ContentTypeDeclaration(_StrictModel):
    """One content type entry of the declarations file."""

    slug: str
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    options: ContentTypeOptions = Field(default_factory=ContentTypeOptions)
    rewrite: RewriteConfig | None = None


class TaxonomyDeclaration(_StrictModel):
    """One taxonomy entry of the declarations file."""

    slug: str
    content_types: str | list[str] = Field(..., description="Content type(s) the taxonomy is attached to.")
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    options: TaxonomyOptions = Field(default_factory=TaxonomyOptions)
    rewrite: RewriteConfig | None = None

    @field_validator("content_types")
    @classmethod
    def _require_content_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("content_types must not be empty")
        elif not value:
            raise ValueError("content_types must list at least one content type")
        return value


class RunConfig(BaseModel):
    """
    Runtime configuration.
    - Loaded from registrations.yaml
    - Host kind may be overridden from the environment by the loader
    - Consumed by the host factory and the registration workflow
    """

    host: HostKind = Field(default=HostKind.MEMORY, description="Registration host to hand records to.")
    override: bool = Field(
        default=False,
        description="Allow a declaration to replace an identifier already registered in the host.",
    )
    text_domain: str = Field(
        default=DEFAULT_TEXT_DOMAIN,
        description="Translation domain used for default label texts.",
    )

    content_types: list[ContentTypeDeclaration] = Field(default_factory=list)
    taxonomies: list[TaxonomyDeclaration] = Field(default_factory=list)

    @model_validator(mode="after")
    def _validate(self) -> "RunConfig":
        for what, entries in (("content type", self.content_types), ("taxonomy", self.taxonomies)):
            seen: set[str] = set()
            for entry in entries:
                if entry.slug in seen:
                    raise ValueError(f"Duplicate {what} slug in declarations: {entry.slug!r}")
                seen.add(entry.slug)
        return self
