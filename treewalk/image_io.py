"""
Animation and frame output with timestamped filenames.

Saves inject a timestamp by default so repeated runs never overwrite each
other.
"""
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np

from .animation import Frame, encode_gif
from .canvas import Palette, raster_to_image


def _get_timestamp() -> str:
    """Get current timestamp string for filenames."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _inject_timestamp(path: Path) -> Path:
    """Inject timestamp into filename: dfs.gif -> dfs_20260204_041500.gif"""
    ts = _get_timestamp()
    return path.parent / f"{path.stem}_{ts}{path.suffix}"


def _prepare(path: Union[str, Path], timestamp: bool) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if timestamp:
        path = _inject_timestamp(path)
    return path


def save_animation(
    frames: Sequence[Frame],
    path: Union[str, Path],
    palette: Optional[Palette] = None,
    timestamp: bool = True
) -> Path:
    """
    Save frames as an animated GIF.

    Args:
        frames: Frames in display order
        path: Output path (timestamp will be injected before extension)
        palette: Colors for the three palette indices (default palette if None)
        timestamp: If True (default), inject timestamp. Only False for explicit overwrites.

    Returns:
        Actual path where file was saved (with timestamp if enabled)
    """
    path = _prepare(path, timestamp)
    encode_gif(frames, palette or Palette(), path)
    print(f"Saved: {path}")
    return path


def save_frame(
    raster: np.ndarray,
    path: Union[str, Path],
    palette: Optional[Palette] = None,
    timestamp: bool = True
) -> Path:
    """Save a single (H, W) index raster as a palette PNG."""
    path = _prepare(path, timestamp)
    raster_to_image(raster, palette or Palette()).save(path)
    print(f"Saved: {path}")
    return path
