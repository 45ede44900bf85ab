from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from litpage.assemble import assemble
from litpage.segmenter import Segment, segment_lines


def _package_version() -> str:
    try:
        return version("litpage")
    except PackageNotFoundError:
        # Running from a source checkout, or otherwise not installed.
        return "0.0.0"


__version__ = _package_version()

__all__ = ["Segment", "__version__", "assemble", "segment_lines"]
