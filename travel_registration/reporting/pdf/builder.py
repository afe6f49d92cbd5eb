"""
PDF Builder Module.

Orchestrates the construction of a complete registration PDF:

1. Title block (Portuguese, plus active language)
2. Personal information, travel document, travel details, accommodation,
   contact (only when filled)
3. Attachments, if any
4. Footer pass over every page
5. Filename derivation

Returns the bytes and filename together; nothing is written to disk.
"""
import asyncio
from dataclasses import dataclass, field
from datetime import date, datetime
import logging
from typing import Callable, List, Optional, Sequence

from ...domain import AttachmentRecord, FormRecord
from ...i18n import BilingualLabels, get_labels
from .attachments import render_attachments
from .filename import derive_filename
from .flow import LayoutContext, PageRecord, new_layout_context
from .footer import stamp_footers
from .sections import build_sections, render_section
from .styles import PDFConfig, COLORS, FONT_FAMILY_BOLD, FONT_SIZE_TITLE, FONT_SIZE_SUBTITLE


# Setup logger
logger = logging.getLogger("TravelRegistration.PDFBuilder")


@dataclass
class GeneratedDocument:
    """Result of one generation call.

    Attributes:
        content: PDF bytes
        filename: Suggested download filename
        pages: Per-page record of what was drawn
        attachment_results: Success flag per attachment, in input order
    """
    content: bytes
    filename: str
    pages: List[PageRecord] = field(default_factory=list)
    attachment_results: List[bool] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        return len(self.pages)


def render_title(ctx: LayoutContext) -> None:
    """Centered document title, stacked when not in primary mode."""
    cfg = ctx.config
    center_x = cfg.page_width / 2
    primary, secondary = ctx.labels.stacked("pdfTitle")

    ctx.draw_text(primary, center_x, ctx.cursor.vertical_position, font=FONT_FAMILY_BOLD,
                  size=FONT_SIZE_TITLE, color=COLORS["primary"], align="center")
    if secondary is not None:
        ctx.advance(cfg.title_secondary_offset)
        ctx.draw_text(secondary, center_x, ctx.cursor.vertical_position,
                      size=FONT_SIZE_SUBTITLE, color=COLORS["secondary"], align="center")
    ctx.advance(cfg.title_spacing)


async def generate_registration_pdf_async(
    record: FormRecord,
    attachments: Sequence[AttachmentRecord] = (),
    language: str = "pt",
    labels: Optional[BilingualLabels] = None,
    countries: Optional[Callable[[str], str]] = None,
    config: Optional[PDFConfig] = None,
    now: Optional[datetime] = None,
    today: Optional[date] = None,
) -> GeneratedDocument:
    """Build the registration PDF for one record.

    Args:
        record: Field identifier -> value mapping
        attachments: Photographed documents, in display order
        language: Active language code ("pt" prints Portuguese only)
        labels: Label lookups; defaults to the bundled catalog
        countries: Country code -> display name; defaults to the bundled table
        config: Layout configuration
        now: Timestamp printed on the last page
        today: Fallback date for the filename

    Returns:
        GeneratedDocument with bytes, filename and page records
    """
    labels = labels or get_labels(language)
    ctx = new_layout_context(labels, config=config, countries=countries)
    logger.info(
        f"Generating registration PDF (language={labels.language}, "
        f"attachments={len(attachments)})"
    )

    render_title(ctx)
    for section in build_sections(record, labels, ctx.countries):
        render_section(ctx, section.title_key, section.fields)

    attachment_results = await render_attachments(ctx, attachments)

    stamp_footers(ctx, now=now)
    ctx.canvas.save()
    content = ctx.buffer.getvalue()
    ctx.buffer.close()

    filename = derive_filename(record, today=today)
    logger.info(f"Registration PDF ready: {filename} ({ctx.page_count} pages)")

    return GeneratedDocument(
        content=content,
        filename=filename,
        pages=ctx.pages,
        attachment_results=attachment_results,
    )


def build_registration_pdf(*args, **kwargs) -> GeneratedDocument:
    """Synchronous entry point; see generate_registration_pdf_async.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(generate_registration_pdf_async(*args, **kwargs))
