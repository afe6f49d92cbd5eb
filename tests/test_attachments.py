"""Tests for attachment decoding, fitting and rendering."""
import asyncio

import pytest

from travel_registration.domain import AttachmentRecord, AttachmentType
from travel_registration.reporting.pdf.attachments import (
    AttachmentDecodeError,
    decode_image,
    fit_image,
    render_attachment,
    render_attachments,
)


# =========================================================================
# fit_image
# =========================================================================

class TestFitImage:
    def test_wide_image_is_width_bound(self):
        width, height = fit_image(2000, 1000, 170, 100)
        assert width == 170
        assert height == pytest.approx(85)

    def test_tall_image_is_height_bound(self):
        width, height = fit_image(1000, 2000, 170, 100)
        assert height == 100
        assert width == pytest.approx(50)

    def test_square_image_is_height_bound(self):
        assert fit_image(500, 500, 170, 100) == (100, 100)

    def test_equal_ratios_use_height(self):
        width, height = fit_image(1700, 1000, 170, 100)
        assert (width, height) == (pytest.approx(170), 100)

    def test_small_image_is_scaled_up(self):
        width, height = fit_image(34, 10, 170, 100)
        assert width == 170
        assert height == pytest.approx(50)

    def test_aspect_ratio_preserved(self):
        width, height = fit_image(1234, 987, 170, 100)
        assert width / height == pytest.approx(1234 / 987)
        assert width <= 170 and height <= 100


# =========================================================================
# decode_image
# =========================================================================

class TestDecodeImage:
    def test_jpeg_size(self, jpeg_bytes):
        image = decode_image(jpeg_bytes)
        assert image.size == (2000, 1000)

    def test_rgba_converted_to_rgb(self, rgba_png_bytes):
        image = decode_image(rgba_png_bytes)
        assert image.mode == "RGB"
        assert image.size == (300, 300)

    def test_corrupt_payload_raises(self, corrupt_image_bytes):
        with pytest.raises(AttachmentDecodeError):
            decode_image(corrupt_image_bytes)

    def test_empty_payload_raises(self):
        with pytest.raises(AttachmentDecodeError):
            decode_image(b"")


# =========================================================================
# render_attachment
# =========================================================================

class TestRenderAttachment:
    def test_success_draws_label_and_image(self, make_context, jpeg_bytes):
        ctx = make_context("pt")
        start = ctx.cursor.vertical_position
        record = AttachmentRecord(jpeg_bytes, AttachmentType.PASSPORT_PAGE)

        assert asyncio.run(render_attachment(ctx, record)) is True

        page = ctx.pages[0]
        assert page.texts == ["Página do Passaporte:"]
        assert len(page.images) == 1
        width, height = page.images[0]
        assert width == pytest.approx(170)
        assert height == pytest.approx(85)
        cfg = ctx.config
        assert ctx.cursor.vertical_position == pytest.approx(
            start + cfg.attachment_label_advance + height + cfg.image_spacing
        )

    def test_bilingual_label(self, make_context, portrait_jpeg_bytes):
        ctx = make_context("en")
        record = AttachmentRecord(portrait_jpeg_bytes, AttachmentType.ID_FRONT)
        asyncio.run(render_attachment(ctx, record))
        assert ctx.pages[0].texts[0] == "Documento de Identificação (Frente) / ID Document (Front):"
        assert ctx.pages[0].images[0] == (pytest.approx(50), 100)

    def test_legacy_tag_used_as_label(self, make_context, jpeg_bytes):
        ctx = make_context("pt")
        asyncio.run(render_attachment(ctx, AttachmentRecord(jpeg_bytes, "selfie")))
        assert ctx.pages[0].texts[0] == "selfie:"

    def test_decode_failure_draws_marker(self, make_context, corrupt_image_bytes):
        ctx = make_context("en")
        start = ctx.cursor.vertical_position
        record = AttachmentRecord(corrupt_image_bytes, AttachmentType.VISA)

        assert asyncio.run(render_attachment(ctx, record)) is False

        page = ctx.pages[0]
        assert page.texts == ["Visto / Visa:", "Error loading image"]
        assert page.images == []
        cfg = ctx.config
        assert ctx.cursor.vertical_position == pytest.approx(
            start + cfg.attachment_label_advance + cfg.error_marker_advance
        )

    def test_reserve_breaks_page_before_label(self, make_context, jpeg_bytes):
        ctx = make_context("pt")
        ctx.cursor.vertical_position = 200
        asyncio.run(render_attachment(ctx, AttachmentRecord(jpeg_bytes)))
        assert ctx.page_count == 2
        assert ctx.pages[0].texts == []
        assert ctx.pages[1].texts == ["Outro Documento:"]


# =========================================================================
# render_attachments
# =========================================================================

class TestRenderAttachments:
    def test_no_attachments_draws_nothing(self, make_context):
        ctx = make_context("pt")
        start = ctx.cursor.vertical_position
        assert asyncio.run(render_attachments(ctx, [])) == []
        assert ctx.pages[0].texts == []
        assert ctx.cursor.vertical_position == start

    def test_failure_does_not_stop_the_rest(self, make_context, jpeg_bytes, corrupt_image_bytes):
        ctx = make_context("pt")
        records = [
            AttachmentRecord(jpeg_bytes, AttachmentType.ID_FRONT),
            AttachmentRecord(corrupt_image_bytes, AttachmentType.ID_BACK),
            AttachmentRecord(jpeg_bytes, AttachmentType.VISA),
        ]
        assert asyncio.run(render_attachments(ctx, records)) == [True, False, True]

    def test_heading_then_labels_in_order(self, make_context, jpeg_bytes):
        ctx = make_context("pt")
        records = [
            AttachmentRecord(jpeg_bytes, AttachmentType.VISA),
            AttachmentRecord(jpeg_bytes, AttachmentType.ID_FRONT),
            AttachmentRecord(jpeg_bytes, AttachmentType.ID_BACK),
        ]
        asyncio.run(render_attachments(ctx, records))

        texts = [t for page in ctx.pages for t in page.texts]
        assert texts == [
            "Anexos",
            "Visto:",
            "Documento de Identificação (Frente):",
            "Documento de Identificação (Verso):",
        ]

    def test_large_images_spread_over_pages(self, make_context, portrait_jpeg_bytes):
        ctx = make_context("pt")
        records = [AttachmentRecord(portrait_jpeg_bytes) for _ in range(4)]
        asyncio.run(render_attachments(ctx, records))
        assert ctx.page_count >= 2
        assert sum(len(page.images) for page in ctx.pages) == 4
        assert all(len(page.images) <= 2 for page in ctx.pages)
