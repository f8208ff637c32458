from .models import ColoredImage, HashedImage, InsufficientDataError


def pick_color(image: HashedImage) -> ColoredImage:
    """
    Use the first three hash bytes as the (red, green, blue) fill color.
    """
    if len(image.hex) < 3:
        raise InsufficientDataError(
            f"Picking a color needs at least 3 hash bytes, got {len(image.hex)}."
        )

    red, green, blue = image.hex[0], image.hex[1], image.hex[2]
    return ColoredImage(hex=image.hex, color=(red, green, blue))
