"""
Choice Domain Module.

Closed enumerations for every multiple-choice value stored in a
registration record, plus the exhaustive mapping from each member to the
label key used for bilingual lookup.

Stored values that are not members (legacy or hand-edited records) are
passed through unchanged as their own label key.
"""
from enum import Enum
import logging
from typing import Dict, Type, Union


logger = logging.getLogger("TravelRegistration.Choices")


class Sex(str, Enum):
    """Sex as recorded on the travel document."""
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class DocumentType(str, Enum):
    """Kind of travel document presented."""
    PASSPORT = "passport"
    ID_CARD = "idCard"
    OTHER = "other"


class PurposeOfStay(str, Enum):
    """Declared purpose of the stay."""
    TOURISM = "tourism"
    BUSINESS = "business"
    TRANSIT = "transit"
    OTHER = "other"


class AttachmentType(str, Enum):
    """Tag describing what an attached photograph shows."""
    ID_FRONT = "idFront"
    ID_BACK = "idBack"
    PASSPORT_PAGE = "passportPage"
    VISA = "visa"
    OTHER_DOCUMENT = "otherDocument"


# ============================================================================
# LABEL KEYS
# ============================================================================

LABEL_KEYS: Dict[Type[Enum], Dict[Enum, str]] = {
    Sex: {
        Sex.MALE: "male",
        Sex.FEMALE: "female",
        Sex.OTHER: "other",
    },
    DocumentType: {
        DocumentType.PASSPORT: "passport",
        DocumentType.ID_CARD: "idCard",
        DocumentType.OTHER: "otherDoc",
    },
    PurposeOfStay: {
        PurposeOfStay.TOURISM: "tourism",
        PurposeOfStay.BUSINESS: "business",
        PurposeOfStay.TRANSIT: "transit",
        PurposeOfStay.OTHER: "otherPurpose",
    },
    AttachmentType: {
        AttachmentType.ID_FRONT: "idFront",
        AttachmentType.ID_BACK: "idBack",
        AttachmentType.PASSPORT_PAGE: "passportPage",
        AttachmentType.VISA: "visa",
        AttachmentType.OTHER_DOCUMENT: "otherDocument",
    },
}


def _check_label_keys() -> None:
    """Fail at import time if any enum member has no label key."""
    for enum_cls, mapping in LABEL_KEYS.items():
        missing = [member.name for member in enum_cls if member not in mapping]
        if missing:
            raise RuntimeError(
                f"{enum_cls.__name__} members without label key: {', '.join(missing)}"
            )


_check_label_keys()


def label_key_for(enum_cls: Type[Enum], raw: Union[str, Enum]) -> str:
    """Resolve a stored choice value to its label key.

    Args:
        enum_cls: One of the choice enums above
        raw: Member or raw stored string

    Returns:
        Label key for known values, the raw value itself otherwise
    """
    try:
        member = enum_cls(raw)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} value {raw!r}, using it as label key")
        return str(raw)
    return LABEL_KEYS[enum_cls][member]
