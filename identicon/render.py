import io

from PIL import Image, ImageDraw

from .models import MappedImage
from .pixels import CANVAS_SIZE


BACKGROUND_COLOR = (255, 255, 255)
IMAGE_FORMAT = "PNG"


def render_canvas(image: MappedImage) -> Image.Image:
    """
    Paint every rectangle of the pixel map onto a blank square canvas.

    Pillow fills rectangles with both corners inclusive; the outer edge of
    the last row/column is clipped by the canvas itself.
    """
    canvas = Image.new("RGB", (CANVAS_SIZE, CANVAS_SIZE), color=BACKGROUND_COLOR)
    draw = ImageDraw.Draw(canvas)

    for top_left, bottom_right in image.pixel_map:
        draw.rectangle([top_left, bottom_right], fill=image.color)

    return canvas


def draw_image(image: MappedImage) -> bytes:
    """
    Render the identicon and return it encoded as PNG bytes.
    """
    buffer = io.BytesIO()
    render_canvas(image).save(buffer, format=IMAGE_FORMAT)
    return buffer.getvalue()
