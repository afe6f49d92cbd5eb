"""
Registration Record Objects.

Input structures handed to the document generator by the form and
capture collaborators. Both are read-only for the duration of a
generation call.
"""
import base64
import binascii
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from .choices import AttachmentType


# Field identifiers the form collaborator supplies
FORM_FIELDS = (
    # Personal information
    "firstName", "lastName", "sex", "dateOfBirth", "placeOfBirth",
    "countryOfBirth", "nationality",
    # Travel document
    "documentType", "documentNumber", "issuingCountry", "issueDate", "expiryDate",
    # Travel details
    "dateOfEntry", "countryOfOrigin", "purposeOfStay", "intendedDestination",
    # Accommodation
    "accommodationName", "address", "postalCode", "city", "checkinDate", "checkoutDate",
    # Contact
    "phone", "email",
)

FormRecord = Mapping[str, str]


def make_form_record(data: Optional[Mapping[str, Any]] = None, **fields: Any) -> FormRecord:
    """Build a read-only FormRecord.

    Every known field is present; ``None`` becomes ``""`` and other values
    are converted with ``str``. Unknown keys are kept as given.
    """
    merged = dict(data or {})
    merged.update(fields)

    record = {name: "" for name in FORM_FIELDS}
    for key, value in merged.items():
        record[key] = "" if value is None else str(value)
    return MappingProxyType(record)


@dataclass(frozen=True)
class AttachmentRecord:
    """One photographed document.

    Attributes:
        image_data: Encoded image payload (JPEG, PNG, ...)
        document_type: Tag describing the photo; legacy strings are allowed
    """
    image_data: bytes
    document_type: Union[AttachmentType, str] = AttachmentType.OTHER_DOCUMENT

    @classmethod
    def from_data_url(
        cls,
        data_url: str,
        document_type: Union[AttachmentType, str] = AttachmentType.OTHER_DOCUMENT,
    ) -> "AttachmentRecord":
        """Create a record from a ``data:image/...;base64,...`` URL.

        A payload that is not valid base64 yields empty image data, which
        the attachment renderer reports as an unreadable image.
        """
        _, _, payload = data_url.partition(",")
        try:
            image_data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError):
            image_data = b""
        return cls(image_data=image_data, document_type=document_type)
