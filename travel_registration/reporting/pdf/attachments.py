"""
PDF Attachments Module.

Places photographed documents below the record sections, one after the
other, each scaled to fit the content width and a maximum height.

Image decoding runs in a worker thread and is awaited before layout. The
attachments are processed strictly in order: attachment k+1 is not
decoded until attachment k has been drawn and the cursor advanced, since
its label position depends on the previous image height.
"""
import asyncio
from io import BytesIO
import logging
from typing import List, Sequence, Tuple

from PIL import Image, UnidentifiedImageError
from reportlab.lib.utils import ImageReader

from ...domain import AttachmentRecord, AttachmentType, label_key_for
from .flow import LayoutContext
from .sections import render_heading
from .styles import COLORS, FONT_FAMILY, FONT_SIZE_ATTACHMENT


logger = logging.getLogger("TravelRegistration.Attachments")


class AttachmentDecodeError(Exception):
    """Attachment payload could not be decoded as an image."""


def fit_image(
    natural_width: float,
    natural_height: float,
    max_width: float,
    max_height: float,
) -> Tuple[float, float]:
    """Scale to fit within max_width x max_height, keeping aspect ratio.

    The dimension with the larger natural/max ratio is the binding one.

    Examples:
        >>> fit_image(2000, 1000, 170, 100)
        (170, 85.0)
        >>> fit_image(1000, 2000, 170, 100)
        (50.0, 100)
    """
    aspect_ratio = natural_width / natural_height
    if natural_width / max_width > natural_height / max_height:
        return max_width, max_width / aspect_ratio
    return max_height * aspect_ratio, max_height


def decode_image(data: bytes) -> Image.Image:
    """Fully decode ``data`` with Pillow.

    Raises:
        AttachmentDecodeError: payload is empty, truncated or not an image
    """
    if not data:
        raise AttachmentDecodeError("empty image payload")
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as e:
        raise AttachmentDecodeError(str(e)) from e

    if image.width <= 0 or image.height <= 0:
        raise AttachmentDecodeError(f"invalid image size {image.size}")
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    return image


async def decode_image_async(data: bytes) -> Image.Image:
    """Decode in the default thread pool executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, decode_image, data)


def attachment_label(ctx: LayoutContext, record: AttachmentRecord) -> str:
    key = label_key_for(AttachmentType, record.document_type)
    return f"{ctx.labels.joined(key)}:"


async def render_attachment(ctx: LayoutContext, record: AttachmentRecord) -> bool:
    """Draw one attachment label and image.

    Returns:
        False if the image could not be decoded (an error marker is drawn
        in its place), True otherwise
    """
    cfg = ctx.config
    ctx.reserve(cfg.attachment_reserve)

    ctx.draw_text(attachment_label(ctx, record), cfg.margin, ctx.cursor.vertical_position,
                  size=FONT_SIZE_ATTACHMENT)
    ctx.advance(cfg.attachment_label_advance)

    try:
        image = await decode_image_async(record.image_data)
    except AttachmentDecodeError as e:
        logger.warning(f"Attachment {record.document_type!s} could not be decoded: {e}")
        ctx.draw_text(ctx.labels.active("imageLoadError"), cfg.margin,
                      ctx.cursor.vertical_position, font=FONT_FAMILY,
                      size=FONT_SIZE_ATTACHMENT, color=COLORS["error"])
        ctx.advance(cfg.error_marker_advance)
        return False

    width, height = fit_image(image.width, image.height, cfg.content_width, cfg.image_max_height)
    ctx.draw_image(ImageReader(image), cfg.margin, ctx.cursor.vertical_position, width, height)
    ctx.advance(height + cfg.image_spacing)
    return True


async def render_attachments(ctx: LayoutContext, attachments: Sequence[AttachmentRecord]) -> List[bool]:
    """Heading plus every attachment, in list order.

    Returns:
        Per-attachment success flags
    """
    if not attachments:
        return []

    cfg = ctx.config
    ctx.advance(cfg.attachments_gap)
    render_heading(ctx, "attachments", cfg.attachments_heading_reserve,
                   cfg.attachments_after_rule_spacing)

    results = []
    for record in attachments:
        # attachment k+1 starts only after attachment k moved the cursor
        results.append(await render_attachment(ctx, record))
    return results
