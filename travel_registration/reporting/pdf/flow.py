"""
PDF Page Flow Module.

Owns the write cursor, the page list and the single page-break decision
(``reserve``). A LayoutContext is created fresh for every generation call
and passed explicitly to each renderer; nothing here is shared between
calls.

Coordinates are millimetres from the top-left corner of the page. Text is
drawn with its baseline at the given vertical position.
"""
from dataclasses import dataclass, field
from io import BytesIO
import logging
from typing import Callable, List, Optional

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from ...countries import get_country_name
from ...i18n import BilingualLabels
from .styles import PDFConfig, COLORS, FONT_FAMILY


logger = logging.getLogger("TravelRegistration.PageFlow")


@dataclass
class Cursor:
    """Vertical write position and zero-based index of the current page."""
    vertical_position: float
    current_page_index: int = 0


@dataclass
class PageRecord:
    """What was written on one page, kept alongside the PDF bytes.

    Attributes:
        number: One-based page number
        texts: Every content string drawn, in drawing order
        images: Displayed (width, height) of every embedded image
        footer: Footer line, set by the footer pass
        generated_stamp: "generated at" line, last page only
    """
    number: int
    texts: List[str] = field(default_factory=list)
    images: List[tuple] = field(default_factory=list)
    footer: Optional[str] = None
    generated_stamp: Optional[str] = None


class PagedCanvas(canvas.Canvas):
    """Canvas that holds finished pages back until they are stamped.

    ``showPage`` only stores the page state; ``stamp_pages`` revisits each
    stored page by number, lets the caller draw on it, then emits it.
    """

    def __init__(self, *args, **kwargs):
        canvas.Canvas.__init__(self, *args, **kwargs)
        self._held_pages = []

    def showPage(self):
        self._held_pages.append(dict(self.__dict__))
        self._startPage()

    @property
    def held_page_count(self) -> int:
        return len(self._held_pages)

    def stamp_pages(self, stamp: Callable[["PagedCanvas", int, int], None]) -> None:
        held = self._held_pages
        total = len(held)
        for number, state in enumerate(held, start=1):
            self.__dict__.update(state)
            stamp(self, number, total)
            canvas.Canvas.showPage(self)
        self._held_pages = []


@dataclass
class LayoutContext:
    """Per-call layout state threaded through every renderer."""
    canvas: PagedCanvas
    buffer: BytesIO
    config: PDFConfig
    labels: BilingualLabels
    countries: Callable[[str], str]
    cursor: Cursor
    pages: List[PageRecord]

    @property
    def page(self) -> PageRecord:
        return self.pages[self.cursor.current_page_index]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    # ------------------------------------------------------------------
    # Page flow
    # ------------------------------------------------------------------

    def reserve(self, needed_height: float) -> bool:
        """Start a new page if ``needed_height`` does not fit on this one.

        Returns:
            True if a page break happened (cursor back at the top margin)
        """
        limit = self.config.page_height - self.config.bottom_limit
        if self.cursor.vertical_position + needed_height <= limit:
            return False

        logger.debug(
            f"Page break at y={self.cursor.vertical_position:.1f}mm "
            f"(needed {needed_height:.1f}mm, limit {limit:.1f}mm)"
        )
        self.canvas.showPage()
        self.cursor.vertical_position = self.config.margin
        self.cursor.current_page_index += 1
        self.pages.append(PageRecord(number=len(self.pages) + 1))
        return True

    def advance(self, height: float) -> None:
        self.cursor.vertical_position += height

    # ------------------------------------------------------------------
    # Drawing primitives
    # ------------------------------------------------------------------

    def _pdf_y(self, y: float) -> float:
        return (self.config.page_height - y) * mm

    def draw_text(self, text, x, y, font=FONT_FAMILY, size=10, color=COLORS["text"], align="left"):
        c = self.canvas
        c.saveState()
        c.setFont(font, size)
        c.setFillColor(color)
        if align == "center":
            c.drawCentredString(x * mm, self._pdf_y(y), text)
        else:
            c.drawString(x * mm, self._pdf_y(y), text)
        c.restoreState()
        self.page.texts.append(text)

    def draw_rule(self, y, color=COLORS["primary"], width=0.5):
        c = self.canvas
        c.saveState()
        c.setStrokeColor(color)
        c.setLineWidth(width)
        c.line(
            self.config.margin * mm, self._pdf_y(y),
            (self.config.page_width - self.config.margin) * mm, self._pdf_y(y),
        )
        c.restoreState()

    def draw_image(self, image, x, y, width, height):
        """Draw ``image`` with its top-left corner at (x, y)."""
        self.canvas.drawImage(
            image, x * mm, self._pdf_y(y + height), width=width * mm, height=height * mm,
            mask="auto",
        )
        self.page.images.append((width, height))

    def split_text(self, text, width, font=FONT_FAMILY, size=10) -> List[str]:
        """Word-wrap ``text`` to ``width`` millimetres."""
        return simpleSplit(text, font, size, width * mm)


def new_layout_context(
    labels: BilingualLabels,
    config: Optional[PDFConfig] = None,
    countries: Optional[Callable[[str], str]] = None,
) -> LayoutContext:
    """Create the canvas, first page and cursor for one generation call."""
    config = config or PDFConfig()
    buffer = BytesIO()
    pdf_canvas = PagedCanvas(buffer, pagesize=config.page_size)
    pdf_canvas.setTitle(labels.primary("pdfTitle"))
    pdf_canvas.setAuthor(config.author)

    return LayoutContext(
        canvas=pdf_canvas,
        buffer=buffer,
        config=config,
        labels=labels,
        countries=countries or get_country_name,
        cursor=Cursor(vertical_position=config.margin),
        pages=[PageRecord(number=1)],
    )
