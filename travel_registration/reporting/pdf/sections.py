"""
PDF Sections Module.

Defines the five fixed record sections and renders each one as a
bilingual two-column block: stacked labels on the left, word-wrapped
value on the right.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Tuple, Type
from enum import Enum

from ...domain import (
    DocumentType,
    FormRecord,
    PurposeOfStay,
    Sex,
    label_key_for,
)
from ...i18n import BilingualLabels
from .flow import LayoutContext
from .styles import (
    COLORS,
    FONT_FAMILY,
    FONT_FAMILY_BOLD,
    FONT_SIZE_FIELD,
    FONT_SIZE_SECTION,
    FONT_SIZE_SECTION_SECONDARY,
)


@dataclass
class Section:
    """One labeled group of (label key, display value) rows."""
    title_key: str
    fields: List[Tuple[str, str]]


# ============================================================================
# VALUE FORMATTING
# ============================================================================

def format_date(value: str) -> str:
    """ISO date (or date-time) to DD/MM/YYYY; anything unparseable to ''."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return ""
    return parsed.strftime("%d/%m/%Y")


def format_choice(enum_cls: Type[Enum], raw: str, labels: BilingualLabels) -> str:
    """Choice value shown as "<pt label> / <active label>"."""
    if not raw:
        return ""
    return labels.joined(label_key_for(enum_cls, raw))


def build_sections(
    record: FormRecord,
    labels: BilingualLabels,
    countries: Callable[[str], str],
) -> List[Section]:
    """Map a FormRecord onto the fixed section layout.

    The contact section is included only when phone or e-mail is filled.
    """
    def get(key: str) -> str:
        value = record.get(key)
        return value.strip() if isinstance(value, str) else ""

    def country(key: str) -> str:
        return countries(get(key)) if get(key) else ""

    sections = [
        Section("personalInfo", [
            ("firstName", get("firstName")),
            ("lastName", get("lastName")),
            ("sex", format_choice(Sex, get("sex"), labels)),
            ("dateOfBirth", format_date(get("dateOfBirth"))),
            ("placeOfBirth", get("placeOfBirth")),
            ("countryOfBirth", country("countryOfBirth")),
            ("nationality", country("nationality")),
        ]),
        Section("travelDocument", [
            ("documentType", format_choice(DocumentType, get("documentType"), labels)),
            ("documentNumber", get("documentNumber")),
            ("issuingCountry", country("issuingCountry")),
            ("issueDate", format_date(get("issueDate"))),
            ("expiryDate", format_date(get("expiryDate"))),
        ]),
        Section("travelDetails", [
            ("dateOfEntry", format_date(get("dateOfEntry"))),
            ("countryOfOrigin", country("countryOfOrigin")),
            ("purposeOfStay", format_choice(PurposeOfStay, get("purposeOfStay"), labels)),
            ("intendedDestination", get("intendedDestination")),
        ]),
        Section("accommodation", [
            ("accommodationName", get("accommodationName")),
            ("address", get("address")),
            ("postalCode", get("postalCode")),
            ("city", get("city")),
            ("checkinDate", format_date(get("checkinDate"))),
            ("checkoutDate", format_date(get("checkoutDate"))),
        ]),
    ]

    if get("phone") or get("email"):
        sections.append(Section("contactInfo", [
            ("phone", get("phone")),
            ("email", get("email")),
        ]))

    return sections


# ============================================================================
# RENDERING
# ============================================================================

def render_heading(ctx: LayoutContext, title_key: str, reserve: float, after_rule: float) -> None:
    """Stacked section title followed by a full-width rule."""
    cfg = ctx.config
    ctx.reserve(reserve)

    primary, secondary = ctx.labels.stacked(title_key)
    ctx.draw_text(primary, cfg.margin, ctx.cursor.vertical_position,
                  font=FONT_FAMILY_BOLD, size=FONT_SIZE_SECTION, color=COLORS["primary"])
    if secondary is not None:
        ctx.advance(cfg.section_title_offset)
        ctx.draw_text(secondary, cfg.margin, ctx.cursor.vertical_position,
                      size=FONT_SIZE_SECTION_SECONDARY, color=COLORS["secondary"])

    ctx.advance(cfg.rule_offset)
    ctx.draw_rule(ctx.cursor.vertical_position)
    ctx.advance(after_rule)


def render_field(ctx: LayoutContext, label_key: str, value: str) -> None:
    """One row: stacked label left, wrapped value right."""
    cfg = ctx.config
    lines = ctx.split_text(value, cfg.value_col_width, size=FONT_SIZE_FIELD)

    row_height = cfg.row_height_primary if ctx.labels.is_primary else cfg.row_height_bilingual
    # Long values reserve their whole wrapped block; a block taller than a
    # page continues line by line on the following pages
    value_height = max(len(lines) - 1, 0) * cfg.line_height + cfg.row_spacing
    usable_height = cfg.page_height - cfg.bottom_limit - cfg.margin
    continues = value_height > usable_height
    ctx.reserve(row_height if continues else max(row_height, value_height))

    start_y = ctx.cursor.vertical_position
    primary, secondary = ctx.labels.stacked(label_key)
    ctx.draw_text(primary, cfg.margin, start_y,
                  font=FONT_FAMILY_BOLD, size=FONT_SIZE_FIELD, color=COLORS["primary"])
    label_bottom = start_y
    if secondary is not None:
        label_bottom += cfg.second_label_offset
        ctx.draw_text(secondary, cfg.margin, label_bottom,
                      size=FONT_SIZE_FIELD, color=COLORS["secondary"])

    value_y = start_y
    for index, line in enumerate(lines):
        if continues and index:
            ctx.cursor.vertical_position = value_y
            if ctx.reserve(max(cfg.line_height, cfg.row_spacing)):
                value_y = label_bottom = ctx.cursor.vertical_position
        ctx.draw_text(line, cfg.value_col_x, value_y, size=FONT_SIZE_FIELD)
        value_y += cfg.line_height

    ctx.cursor.vertical_position = max(label_bottom, value_y - cfg.line_height) + cfg.row_spacing


def render_section(ctx: LayoutContext, title_key: str, fields: List[Tuple[str, str]]) -> None:
    """Render a title block and every non-empty field row."""
    render_heading(ctx, title_key, ctx.config.section_reserve, ctx.config.after_rule_spacing)

    for label_key, value in fields:
        if not value:
            continue
        render_field(ctx, label_key, value)

    ctx.advance(ctx.config.section_spacing)
