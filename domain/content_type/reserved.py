"""Content type names reserved by the host platform."""

RESERVED_CONTENT_TYPES: tuple[str, ...] = (
    "post",
    "page",
    "attachment",
    "revision",
    "nav_menu_item",
    "custom_css",
    "customize_changeset",
    "oembed_cache",
    "user_request",
    "wp_block",
)


class ReservedContentTypes:
    """Registry of content type identifiers that cannot be registered."""

    @staticmethod
    def get() -> list[str]:
        return list(RESERVED_CONTENT_TYPES)
