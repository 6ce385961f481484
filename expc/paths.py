"""Text helpers used when deriving output file names."""

from __future__ import annotations


def erase(text: str, offset: int, length: int) -> str:
    """Return ``text`` without the ``length`` characters starting at ``offset``."""
    if offset < 0 or length < 0:
        raise ValueError("offset and length must not be negative")
    if offset > len(text) or offset + length > len(text):
        raise ValueError(
            f"cannot erase {length} characters at {offset} from text of length {len(text)}"
        )
    return text[:offset] + text[offset + length :]


def replace_extension(path: str, extension: str) -> str:
    """Replace the final extension of the file name in ``path``.

    A leading '.' of the file name does not start an extension. An empty
    ``extension`` removes the existing one; an extension given without a
    leading '.' gets one.
    """
    start = path.rfind("/") + 1
    if path.startswith(".", start):
        start += 1

    dot = path.rfind(".", start)
    stem_end = dot if dot != -1 else len(path)
    stem = path[:stem_end]

    if not extension:
        return stem
    if extension.startswith("."):
        return stem + extension
    return stem + "." + extension