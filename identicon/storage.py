from pathlib import Path
from typing import Union

IMAGE_EXTENSION = "png"


def save_image(data: bytes, name: str, output_dir: Union[str, Path] = ".") -> Path:
    """
    Write the encoded identicon to `<output_dir>/<name>.png`.

    An existing file with the same name is overwritten. `name` is joined to
    `output_dir` as is, so separators or `..` in it point the file elsewhere.
    Names the filesystem cannot represent (e.g. an embedded NUL) are reported
    as OSError, like any other filesystem failure, and left for the caller.
    """
    path = Path(output_dir) / f"{name}.{IMAGE_EXTENSION}"
    try:
        f = path.open("wb")
    except ValueError as e:
        raise OSError(f"Invalid file name for identicon: {path!r}") from e
    with f:
        f.write(data)
    return path
