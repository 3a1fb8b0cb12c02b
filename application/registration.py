"""Registration workflow: declarations -> builders -> host."""

import logging

from pydantic import BaseModel, Field

from domain.content_type import ContentType
from domain.host import RegistrationHost
from domain.labels import DEFAULT_TEXT_DOMAIN, Labels, Translator
from domain.rewrite import Rewrite
from domain.taxonomy import Taxonomy
from infrastructure.config.models import (
    ContentTypeDeclaration,
    LabelsConfig,
    RewriteConfig,
    RunConfig,
    TaxonomyDeclaration,
)
from infrastructure.observability.logging import clear_entity_context, set_log_context

logger = logging.getLogger(__name__)


class RegistrationSummary(BaseModel):
    """Identifiers registered during one run, in registration order."""

    content_types: list[str] = Field(default_factory=list)
    taxonomies: list[str] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.content_types) + len(self.taxonomies)


def build_labels(
    cfg: LabelsConfig,
    *,
    translate: Translator | None = None,
    text_domain: str = DEFAULT_TEXT_DOMAIN,
) -> Labels:
    """Start from the placeholder labels and apply every override present in cfg."""
    labels = Labels(translate=translate, text_domain=text_domain)
    for key, value in cfg.model_dump(exclude_none=True).items():
        getattr(labels, f"set_{key}")(value)
    return labels


def build_rewrite(cfg: RewriteConfig) -> Rewrite:
    rewrite = Rewrite()
    for key, value in cfg.model_dump(exclude_none=True).items():
        getattr(rewrite, f"set_{key}")(value)
    return rewrite


def build_content_type(
    decl: ContentTypeDeclaration,
    *,
    translate: Translator | None = None,
    text_domain: str = DEFAULT_TEXT_DOMAIN,
) -> ContentType:
    """
    Turn a declaration into a configured ContentType builder.

    The declared labels provide the general name and description (constructor)
    and are also embedded as the labels mapping.

    Raises:
        ReservedIdentifierError / IdentifierTooLongError: From the builder
    """
    labels = build_labels(decl.labels, translate=translate, text_domain=text_domain)
    content_type = ContentType(decl.slug, labels).set_labels(labels)

    for key, value in decl.options.model_dump(exclude_none=True).items():
        getattr(content_type, f"set_{key}")(value)

    if decl.rewrite is not None:
        content_type.set_rewrite(build_rewrite(decl.rewrite))

    return content_type


def build_taxonomy(
    decl: TaxonomyDeclaration,
    *,
    translate: Translator | None = None,
    text_domain: str = DEFAULT_TEXT_DOMAIN,
) -> Taxonomy:
    """Turn a declaration into a configured Taxonomy builder."""
    labels = build_labels(decl.labels, translate=translate, text_domain=text_domain)
    taxonomy = Taxonomy(decl.slug, decl.content_types, labels)

    for key, value in decl.options.model_dump(exclude_none=True).items():
        getattr(taxonomy, f"set_{key}")(value)

    if decl.rewrite is not None:
        taxonomy.set_rewrite(build_rewrite(decl.rewrite))

    return taxonomy


def register_declarations(
    cfg: RunConfig,
    host: RegistrationHost,
    *,
    translate: Translator | None = None,
) -> RegistrationSummary:
    """
    Build and register every declaration of cfg into host.

    Content types are registered before taxonomies so that taxonomies can be
    attached to content types declared in the same file. The first builder or
    host error aborts the run and propagates to the caller.
    """
    summary = RegistrationSummary()

    try:
        for ct_decl in cfg.content_types:
            set_log_context(entity=f"content_type:{ct_decl.slug}")
            content_type = build_content_type(ct_decl, translate=translate, text_domain=cfg.text_domain)
            logger.debug("Content type args: %s", content_type.get())
            content_type.register(host)
            summary.content_types.append(content_type.identifier)

        for tax_decl in cfg.taxonomies:
            set_log_context(entity=f"taxonomy:{tax_decl.slug}")
            taxonomy = build_taxonomy(tax_decl, translate=translate, text_domain=cfg.text_domain)
            logger.debug("Taxonomy args: %s", taxonomy.get())
            taxonomy.register(host)
            summary.taxonomies.append(taxonomy.identifier)
    finally:
        clear_entity_context()

    logger.info(
        "Registered %d content type(s) and %d taxonomy(ies)",
        len(summary.content_types),
        len(summary.taxonomies),
    )
    return summary
