"""
Reporting Module.

Contains document generation for travel registrations.
"""
from .pdf import (
    build_registration_pdf,
    generate_registration_pdf_async,
    GeneratedDocument,
    derive_filename,
    PDFConfig,
)

__all__ = [
    # PDF
    "build_registration_pdf",
    "generate_registration_pdf_async",
    "GeneratedDocument",
    "derive_filename",
    "PDFConfig",
]
