"""
PDF Footer Module.

Final pass over a finished layout: every page gets a source/page-number
line, the last page additionally a "generated at" stamp. Both sit in the
footer band below the content limit, so the page count never changes.
"""
from datetime import datetime
from typing import Optional

from reportlab.lib.units import mm

from .flow import LayoutContext, PagedCanvas
from .styles import COLORS, FONT_FAMILY, FONT_SIZE_FOOTER


def format_timestamp(moment: datetime) -> str:
    """pt-PT style date and time, e.g. ``19/10/2026, 14:05:09``."""
    return moment.strftime("%d/%m/%Y, %H:%M:%S")


def footer_text(ctx: LayoutContext, number: int, total: int) -> str:
    active = ctx.labels.active
    return (
        f"{active('generatedBy')} {ctx.config.source_reference} | "
        f"{active('pdfPage')} {number} {active('pageOf')} {total}"
    )


def generated_text(ctx: LayoutContext, moment: datetime) -> str:
    return f"{ctx.labels.joined('pdfGenerated')}: {format_timestamp(moment)}"


def stamp_footers(ctx: LayoutContext, now: Optional[datetime] = None) -> None:
    """Close the open page, then stamp every page by number."""
    cfg = ctx.config
    generated = generated_text(ctx, now or datetime.now())
    center_x = cfg.page_width / 2 * mm

    ctx.canvas.showPage()
    if ctx.canvas.held_page_count != ctx.page_count:
        raise RuntimeError(
            f"Canvas holds {ctx.canvas.held_page_count} pages, layout produced {ctx.page_count}"
        )

    def stamp(c: PagedCanvas, number: int, total: int) -> None:
        page = ctx.pages[number - 1]
        c.saveState()
        c.setFont(FONT_FAMILY, FONT_SIZE_FOOTER)
        c.setFillColor(COLORS["footer"])

        page.footer = footer_text(ctx, number, total)
        c.drawCentredString(center_x, cfg.footer_offset * mm, page.footer)

        if number == total:
            page.generated_stamp = generated
            c.drawCentredString(center_x, cfg.generated_offset * mm, generated)
        c.restoreState()

    ctx.canvas.stamp_pages(stamp)
