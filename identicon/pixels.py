from .models import GriddedImage, MappedImage


CELL_SIZE = 50
GRID_WIDTH = 5
CANVAS_SIZE = CELL_SIZE * GRID_WIDTH


def build_pixel_map(image: GriddedImage) -> MappedImage:
    """
    Turn each remaining grid cell into the (top_left, bottom_right) corners
    of the square it covers on the canvas.
    """
    pixel_map = []
    for _value, index in image.grid:
        horizontal = (index % GRID_WIDTH) * CELL_SIZE
        vertical = (index // GRID_WIDTH) * CELL_SIZE
        top_left = (horizontal, vertical)
        bottom_right = (horizontal + CELL_SIZE, vertical + CELL_SIZE)
        pixel_map.append((top_left, bottom_right))

    return MappedImage(
        hex=image.hex,
        color=image.color,
        grid=image.grid,
        pixel_map=tuple(pixel_map),
    )
