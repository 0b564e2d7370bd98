"""Reading and writing the directory manifest.

The manifest is a flat text file with one directory name per line. It is
read whole before a session starts and rewritten whole, sorted and
deduplicated, when the session ends.
"""

import os
from pathlib import Path
from typing import Iterable

_BLANKS = " \t"
_SEPARATORS = "/" + ("\\" if os.sep == "\\" else "")


def strip_name(line: str) -> str:
    """Trim surrounding spaces/tabs and trailing path separators."""
    return line.lstrip(_BLANKS).rstrip(_BLANKS + _SEPARATORS)


def parse_manifest(text: str) -> list[str]:
    """Parse manifest text into a sorted list of unique names.

    Blank lines (and lines holding only separators) are dropped.
    """
    names = {strip_name(line) for line in text.splitlines()}
    names.discard("")
    return sorted(names)


def read_manifest(path: Path) -> list[str]:
    """Load the manifest at `path`.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    return parse_manifest(Path(path).read_text(encoding="utf-8"))


def format_manifest(names: Iterable[str]) -> str:
    return "".join(f"{name}\n" for name in sorted(set(names)))


def write_manifest(path: Path, names: Iterable[str]) -> None:
    """Atomically replace the manifest at `path` with `names`.

    The content goes to `<path>.tmp` first and is renamed over the target
    only once fully written, so a failed write leaves the old file intact.

    Raises:
        OSError: If the temporary file cannot be written or renamed.
    """
    path = Path(path)
    tmp_path = path.with_name(path.name + ".tmp")
    content = format_manifest(names)
    try:
        with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
