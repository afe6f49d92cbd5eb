"""
PDF Generator Module for Travel Registrations.

Turns a filled registration record plus photographed documents into one
paginated bilingual PDF. Uses ReportLab for drawing and Pillow for image
decoding. No form handling, no storage.

Module Structure:
- styles.py: Page geometry, typography, colors
- flow.py: Cursor, page list and page-break decision
- sections.py: Record sections and field rows
- attachments.py: Image fitting and embedding
- footer.py: Per-page footer and generation stamp
- filename.py: Download filename derivation
- builder.py: Document orchestration and assembly

Usage:
    from travel_registration.reporting.pdf import build_registration_pdf

    document = build_registration_pdf(record, attachments, language="en")
    document.content, document.filename
"""
from .styles import PDFConfig, COLORS, PAGE_SIZE, MARGIN
from .flow import Cursor, LayoutContext, PageRecord, new_layout_context
from .attachments import AttachmentDecodeError, fit_image
from .filename import canonicalize, derive_filename
from .builder import (
    GeneratedDocument,
    build_registration_pdf,
    generate_registration_pdf_async,
)


__all__ = [
    # Main API
    "build_registration_pdf",
    "generate_registration_pdf_async",
    "GeneratedDocument",
    "derive_filename",
    # Configuration
    "PDFConfig",
    # Layout (for advanced usage)
    "Cursor",
    "LayoutContext",
    "PageRecord",
    "new_layout_context",
    "fit_image",
    "canonicalize",
    "AttachmentDecodeError",
    "COLORS",
    "PAGE_SIZE",
    "MARGIN",
]
