"""
PDF Styles Module.

Defines page geometry, typography and colors for the registration PDF.
All layout distances are millimetres measured from the top-left corner;
conversion to PDF points happens only when drawing.
"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.colors import HexColor, black
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
import logging
import os
from dataclasses import dataclass
from typing import Tuple

from ...config import Config


logger = logging.getLogger("TravelRegistration.PDFStyles")


# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

PAGE_SIZE = A4
PAGE_WIDTH_MM = PAGE_SIZE[0] / mm
PAGE_HEIGHT_MM = PAGE_SIZE[1] / mm
MARGIN = 20  # mm


# ============================================================================
# COLOR PALETTE
# ============================================================================

COLORS = {
    "primary": HexColor("#1565C0"),
    "secondary": HexColor("#646464"),
    "footer": HexColor("#808080"),
    "error": HexColor("#C80000"),
    "text": black,
}


# ============================================================================
# TYPOGRAPHY (UTF-8 Support)
# ============================================================================

# NOTE: The standard Helvetica font only covers Latin-1. DejaVuSans is used
# when available so Cyrillic, Greek, etc. labels render.

def _font_dir() -> str:
    if Config.PDF_FONT_DIR:
        return Config.PDF_FONT_DIR
    import matplotlib
    return os.path.join(matplotlib.get_data_path(), "fonts", "ttf")


def register_fonts() -> Tuple[str, str]:
    """Register TrueType fonts for PDF generation."""
    try:
        font_dir = _font_dir()
        pdfmetrics.registerFont(TTFont("DejaVuSans", os.path.join(font_dir, "DejaVuSans.ttf")))
        pdfmetrics.registerFont(TTFont("DejaVuSans-Bold", os.path.join(font_dir, "DejaVuSans-Bold.ttf")))
        return "DejaVuSans", "DejaVuSans-Bold"
    except Exception as e:
        # Fallback to standard fonts if registration fails
        logger.warning(f"DejaVuSans unavailable ({e}), falling back to Helvetica")
        return "Helvetica", "Helvetica-Bold"

FONT_FAMILY, FONT_FAMILY_BOLD = register_fonts()

FONT_SIZE_TITLE = 16
FONT_SIZE_SUBTITLE = 12
FONT_SIZE_SECTION = 12
FONT_SIZE_SECTION_SECONDARY = 10
FONT_SIZE_FIELD = 9
FONT_SIZE_ATTACHMENT = 10
FONT_SIZE_FOOTER = 8


@dataclass
class PDFConfig:
    """Layout constants for the registration PDF (millimetres)."""
    page_size: tuple = PAGE_SIZE
    margin: float = MARGIN
    bottom_limit: float = 25  # footer band kept free of content
    author: str = Config.PDF_AUTHOR
    source_reference: str = Config.SITE_URL

    # Title block
    title_secondary_offset: float = 6
    title_spacing: float = 10

    # Sections
    section_reserve: float = 30
    section_title_offset: float = 5
    rule_offset: float = 2
    after_rule_spacing: float = 6
    label_col_width: float = 55
    col_gap: float = 5
    row_height_primary: float = 8
    row_height_bilingual: float = 12
    second_label_offset: float = 4
    line_height: float = 4
    row_spacing: float = 5
    section_spacing: float = 3

    # Attachments
    attachments_gap: float = 10
    attachments_heading_reserve: float = 40
    attachments_after_rule_spacing: float = 8
    attachment_reserve: float = 120
    attachment_label_advance: float = 5
    image_max_height: float = Config.IMAGE_MAX_HEIGHT_MM
    image_spacing: float = 10
    error_marker_advance: float = 10

    # Footer (distance from the bottom edge)
    footer_offset: float = 10
    generated_offset: float = 15

    @property
    def page_width(self) -> float:
        return self.page_size[0] / mm

    @property
    def page_height(self) -> float:
        return self.page_size[1] / mm

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def value_col_x(self) -> float:
        return self.margin + self.label_col_width + self.col_gap

    @property
    def value_col_width(self) -> float:
        return self.content_width - self.label_col_width - self.col_gap
