# Tests configuration for travel_registration
import pytest
import sys
from datetime import date, datetime
from io import BytesIO
from pathlib import Path

from PIL import Image

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from travel_registration.domain import make_form_record
from travel_registration.i18n import get_labels
from travel_registration.reporting.pdf import PDFConfig, new_layout_context


def _image_bytes(size, fmt="JPEG", mode="RGB", color=(21, 101, 192)):
    buffer = BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def sample_record():
    """Fully filled registration record."""
    return make_form_record({
        "firstName": "Ana",
        "lastName": "Conceição",
        "sex": "female",
        "dateOfBirth": "1990-05-17",
        "placeOfBirth": "Porto",
        "countryOfBirth": "PT",
        "nationality": "PT",
        "documentType": "passport",
        "documentNumber": "CB123456",
        "issuingCountry": "PT",
        "issueDate": "2020-01-10",
        "expiryDate": "2030-01-09",
        "dateOfEntry": "2026-07-01",
        "countryOfOrigin": "ES",
        "purposeOfStay": "tourism",
        "intendedDestination": "Lisboa",
        "accommodationName": "Casa do Mar",
        "address": "Rua das Flores 12",
        "postalCode": "1200-195",
        "city": "Lisboa",
        "checkinDate": "2026-07-01",
        "checkoutDate": "2026-07-08",
        "phone": "+351 912 345 678",
        "email": "ana@example.org",
    })


@pytest.fixture
def empty_record():
    """Record with every known field empty."""
    return make_form_record()


@pytest.fixture
def jpeg_bytes():
    """Landscape JPEG, 2000x1000 px."""
    return _image_bytes((2000, 1000))


@pytest.fixture
def portrait_jpeg_bytes():
    """Portrait JPEG, 600x1200 px."""
    return _image_bytes((600, 1200))


@pytest.fixture
def rgba_png_bytes():
    """Semi-transparent PNG, 300x300 px."""
    return _image_bytes((300, 300), fmt="PNG", mode="RGBA", color=(200, 0, 0, 128))


@pytest.fixture
def corrupt_image_bytes():
    """Bytes that start like a JPEG but are not decodable."""
    return b"\xff\xd8\xff\xe0" + b"not really a jpeg" * 10


@pytest.fixture
def fixed_now():
    """Generation timestamp."""
    return datetime(2026, 10, 19, 14, 5, 9)


@pytest.fixture
def fixed_today():
    """Fallback filename date."""
    return date(2026, 10, 19)


@pytest.fixture
def pdf_config():
    """Default layout configuration with a known source reference."""
    return PDFConfig(source_reference="https://example.org/registo")


@pytest.fixture
def make_context(pdf_config):
    """Factory for a fresh layout context in a given language."""
    def _make(language="pt", countries=None):
        return new_layout_context(get_labels(language), config=pdf_config, countries=countries)
    return _make
