"""
Frames and the append-only sink that collects them for encoding.
"""

from typing import List, Tuple, Optional, Callable, Any, Iterator, Sequence, Union, BinaryIO
from dataclasses import dataclass
from pathlib import Path
import logging

import numpy as np

from .canvas import Palette, raster_to_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Frame:
    """
    One rendered raster plus its display delay.

    raster is a read-only (H, W) uint8 array of palette indices; visited
    lists the (source, target) edges that were visited when it was drawn.
    """

    raster: np.ndarray
    delay: int
    visited: Tuple[Tuple[int, int], ...] = ()

    @classmethod
    def from_raster(
        cls,
        raster: np.ndarray,
        delay: int,
        visited: Sequence[Tuple[int, int]] = (),
    ) -> "Frame":
        frozen = np.array(raster, dtype=np.uint8, copy=True)
        frozen.setflags(write=False)
        return cls(frozen, delay, tuple(visited))

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height)"""
        return self.raster.shape[1], self.raster.shape[0]


class AnimationSink:
    """Ordered, append-only frame collection. No dedup, no length cap."""

    def __init__(self):
        self._frames: List[Frame] = []

    def append(self, frame: Frame) -> None:
        self._frames.append(frame)

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def delays(self) -> List[int]:
        return [f.delay for f in self._frames]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __getitem__(self, index: int) -> Frame:
        return self._frames[index]

    def finalize(self, encoder: Optional[Callable[[List[Frame]], Any]] = None) -> Any:
        """
        Hand the frames, in emission order, to encoder.

        Returns:
            Whatever encoder returns, or the frame list when no encoder is given

        Raises:
            ValueError: if no frames were appended
        """
        if not self._frames:
            raise ValueError("Cannot finalize an empty animation")
        logger.debug("Finalizing animation with %d frames", len(self._frames))
        frames = self.frames
        if encoder is None:
            return frames
        return encoder(frames)


def encode_gif(
    frames: Sequence[Frame],
    palette: Palette,
    target: Union[str, Path, BinaryIO],
) -> None:
    """
    Write frames as a looping animated GIF.

    Frame delays are GIF hundredths of a second; Pillow takes milliseconds.
    Pillow merges consecutive identical frames into one, summing their
    durations, so total play time is kept.
    """
    if not frames:
        raise ValueError("No frames to encode")

    images = [raster_to_image(f.raster, palette) for f in frames]
    images[0].save(
        target,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=[f.delay * 10 for f in frames],
        loop=0,
        optimize=False,
    )
