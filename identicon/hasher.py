import hashlib
from typing import Callable, Union

from .models import HashedImage


def hash_input(
    input: Union[str, bytes],
    hash_factory: Callable = hashlib.md5,
) -> HashedImage:
    """
    Hash the raw input into a list of byte values.

    Strings are hashed by their UTF-8 bytes. `hash_factory` must return an
    object with a `digest()` method (anything from `hashlib` works); MD5
    yields the 16 bytes the rest of the pipeline is laid out for.
    """
    data = input.encode("utf-8") if isinstance(input, str) else bytes(input)
    digest = hash_factory(data).digest()
    return HashedImage(hex=tuple(digest))
