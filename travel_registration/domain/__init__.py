"""
Domain Module.

Contains the registration input records and the closed choice enums.
"""
from .choices import (
    Sex,
    DocumentType,
    PurposeOfStay,
    AttachmentType,
    LABEL_KEYS,
    label_key_for,
)
from .records import (
    FORM_FIELDS,
    FormRecord,
    AttachmentRecord,
    make_form_record,
)

__all__ = [
    "Sex",
    "DocumentType",
    "PurposeOfStay",
    "AttachmentType",
    "LABEL_KEYS",
    "label_key_for",
    "FORM_FIELDS",
    "FormRecord",
    "AttachmentRecord",
    "make_form_record",
]
