import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .color import pick_color
from .grid import build_grid, filter_odd_squares
from .hasher import hash_input
from .models import MappedImage
from .pixels import build_pixel_map
from .render import draw_image
from .storage import save_image


@dataclass(frozen=True)
class SaveResult:
    """
    Outcome of a full pipeline run.

    `error` carries the original OSError when persisting failed.
    """

    ok: bool
    path: Optional[Path] = None
    error: Optional[OSError] = None


class IdenticonPipeline:
    """
    Orchestrates the identicon pipeline:
    - hash the input
    - pick the color and build the mirrored grid
    - drop odd cells and map the rest to pixel rectangles
    - draw the PNG and save it under {output_dir}/{name}.png
    """

    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        hash_factory: Callable = hashlib.md5,
    ) -> None:
        self.output_dir = Path(output_dir)
        self.hash_factory = hash_factory

    def build(self, input: Union[str, bytes]) -> MappedImage:
        """
        Run every pure stage and return the fully derived image record.
        """
        hashed = hash_input(input, hash_factory=self.hash_factory)
        colored = pick_color(hashed)
        gridded = filter_odd_squares(build_grid(colored))
        return build_pixel_map(gridded)

    def render(self, input: Union[str, bytes]) -> bytes:
        return draw_image(self.build(input))

    def run(self, input: Union[str, bytes], name: Optional[str] = None) -> Path:
        """
        Build, draw and persist the identicon for `input`.

        The file is named after `name`, or after the input itself when no
        name is given. Bytes that are not valid UTF-8 show up as U+FFFD in
        the derived name. Filesystem errors propagate.
        """
        if name is None:
            if isinstance(input, bytes):
                name = input.decode("utf-8", errors="replace")
            else:
                name = input

        image = self.build(input)
        print(f"🎨 Drawing identicon for '{name}' ({len(image.pixel_map)} filled cells)")
        data = draw_image(image)

        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = save_image(data, name, self.output_dir)
        print(f"💾 Saved identicon to: {path}")
        return path


def create_identicon(
    input: Union[str, bytes],
    name: Optional[str] = None,
    output_dir: Optional[Union[str, Path]] = None,
) -> SaveResult:
    """
    Generate the identicon for `input` and save it as a PNG.

    `output_dir` defaults to the current directory. Persistence failures
    come back as a failed SaveResult holding the original exception;
    nothing is retried.
    """
    if output_dir is None:
        output_dir = "."

    pipeline = IdenticonPipeline(output_dir=output_dir)
    try:
        path = pipeline.run(input, name=name)
    except OSError as e:
        print(f"⚠️  Could not save identicon: {e}")
        return SaveResult(ok=False, error=e)
    return SaveResult(ok=True, path=path)
