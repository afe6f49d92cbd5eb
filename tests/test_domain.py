"""Tests for choice enums, input records, label catalog and country names."""
import base64

import pytest

from travel_registration.countries import get_country_name
from travel_registration.domain import (
    AttachmentRecord,
    AttachmentType,
    DocumentType,
    FORM_FIELDS,
    LABEL_KEYS,
    PurposeOfStay,
    Sex,
    label_key_for,
    make_form_record,
)
from travel_registration.i18n import LABELS, LabelTable, get_labels


# =========================================================================
# Choices
# =========================================================================

class TestChoices:
    @pytest.mark.parametrize("enum_cls", [Sex, DocumentType, PurposeOfStay, AttachmentType])
    def test_every_member_has_label_key(self, enum_cls):
        assert set(LABEL_KEYS[enum_cls]) == set(enum_cls)

    def test_every_label_key_is_translated(self):
        keys = {key for mapping in LABEL_KEYS.values() for key in mapping.values()}
        for language, table in LABELS.items():
            assert keys <= set(table), language

    @pytest.mark.parametrize("enum_cls,raw,expected", [
        (Sex, "male", "male"),
        (DocumentType, "idCard", "idCard"),
        (DocumentType, "other", "otherDoc"),
        (PurposeOfStay, "other", "otherPurpose"),
        (AttachmentType, "passportPage", "passportPage"),
        (AttachmentType, AttachmentType.VISA, "visa"),
    ])
    def test_label_key_for(self, enum_cls, raw, expected):
        assert label_key_for(enum_cls, raw) == expected

    def test_unknown_value_passes_through(self):
        assert label_key_for(DocumentType, "residencePermit") == "residencePermit"


# =========================================================================
# Records
# =========================================================================

class TestMakeFormRecord:
    def test_all_known_fields_present(self):
        record = make_form_record()
        assert set(FORM_FIELDS) <= set(record)
        assert all(record[name] == "" for name in FORM_FIELDS)

    def test_none_and_non_strings(self):
        record = make_form_record({"firstName": None, "postalCode": 1200})
        assert record["firstName"] == ""
        assert record["postalCode"] == "1200"

    def test_keyword_overrides(self):
        record = make_form_record({"city": "Porto"}, city="Faro")
        assert record["city"] == "Faro"

    def test_read_only(self):
        record = make_form_record()
        with pytest.raises(TypeError):
            record["city"] = "Faro"


class TestAttachmentRecord:
    def test_default_type(self):
        assert AttachmentRecord(b"x").document_type is AttachmentType.OTHER_DOCUMENT

    def test_from_data_url(self, jpeg_bytes):
        url = "data:image/jpeg;base64," + base64.b64encode(jpeg_bytes).decode("ascii")
        record = AttachmentRecord.from_data_url(url, AttachmentType.ID_BACK)
        assert record.image_data == jpeg_bytes
        assert record.document_type is AttachmentType.ID_BACK

    def test_invalid_data_url_gives_empty_payload(self):
        assert AttachmentRecord.from_data_url("data:image/png;base64,@@@").image_data == b""


# =========================================================================
# Labels
# =========================================================================

class TestLabels:
    def test_tables_share_keys(self):
        primary_keys = set(LABELS["pt"])
        for language, table in LABELS.items():
            assert set(table) == primary_keys, language

    def test_missing_key_returns_key(self):
        assert LabelTable("en")("noSuchKey") == "noSuchKey"

    def test_primary_mode(self):
        labels = get_labels("pt")
        assert labels.is_primary
        assert labels.stacked("sex") == ("Sexo", None)
        assert labels.joined("sex") == "Sexo"

    def test_secondary_mode(self):
        labels = get_labels("EN")
        assert not labels.is_primary
        assert labels.stacked("sex") == ("Sexo", "Sex")
        assert labels.joined("male") == "Masculino / Male"

    def test_unknown_language_falls_back(self):
        labels = get_labels("de")
        assert labels.language == "de"
        assert labels.active("city") == "City"

    def test_empty_language_is_primary(self):
        assert get_labels("").is_primary


# =========================================================================
# Countries
# =========================================================================

class TestCountries:
    @pytest.mark.parametrize("code,expected", [
        ("PT", "Portugal"),
        ("gb", "Reino Unido"),
        (" br ", "Brasil"),
        ("", ""),
        ("XK", "XK"),
    ])
    def test_get_country_name(self, code, expected):
        assert get_country_name(code) == expected
