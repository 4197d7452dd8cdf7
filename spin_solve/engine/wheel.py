"""
Spin & Solve - Reward Wheel

Models the prize wheel: a spin draws a random end angle, and the angle is
mapped to a segment. The animation itself belongs to the host; the wheel
only needs to know when it finished (resolve) or was interrupted
(stop_early).

Segment mapping:
    The pointer sits half a segment past segment 0 and segment indices
    increase counter-clockwise, so an angle maps to

        (n - 1) - floor(((angle + width / 2) mod 360) / width)
"""

import logging
import random
from typing import ClassVar, Sequence

from spin_solve.engine.base import (
    InvalidStateError,
    SpinInFlightError,
    SpinResult,
    WheelSegment,
)

logger = logging.getLogger(__name__)


DEFAULT_SEGMENT_LABELS: tuple[str, ...] = (
    "2 gems",
    "-5 seconds",
    "3 gems",
    "Free Hint",
    "1 gem",
    "-10 seconds",
    "2 gems",
    "4 gems",
)


def segment_index(angle: float, num_segments: int) -> int:
    """Map a wheel rotation in degrees to the segment under the pointer."""
    if num_segments <= 0:
        raise ValueError(f"Wheel needs at least one segment, got {num_segments}.")

    width = 360.0 / num_segments
    adjusted = (angle + width / 2.0) % 360.0
    index = int(adjusted // width)
    # Guard against float rounding landing exactly on 360.
    index = min(index, num_segments - 1)
    return (num_segments - 1) - index


class Wheel:
    """
    Spinning prize wheel with at most one spin in flight.

    Attributes:
        segments: Ordered segments, equal angular width each
        current_angle: Resting rotation in [0, 360)
    """

    FULL_ROTATIONS: ClassVar[int] = 6

    def __init__(
        self,
        segments: Sequence[WheelSegment] | None = None,
        *,
        full_rotations: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if segments is None:
            segments = [WheelSegment.from_label(label) for label in DEFAULT_SEGMENT_LABELS]
        if not segments:
            raise ValueError("Wheel needs at least one segment.")

        self.segments: tuple[WheelSegment, ...] = tuple(segments)
        self.full_rotations = self.FULL_ROTATIONS if full_rotations is None else full_rotations
        self.current_angle: float = 0.0
        self._rng = rng or random.Random()
        self._end_angle: float | None = None

    @classmethod
    def from_labels(cls, labels: Sequence[str], **kwargs) -> "Wheel":
        """Build a wheel from configuration labels such as "3 gems"."""
        return cls([WheelSegment.from_label(label) for label in labels], **kwargs)

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    @property
    def segment_width(self) -> float:
        return 360.0 / len(self.segments)

    @property
    def is_spinning(self) -> bool:
        return self._end_angle is not None

    @property
    def end_angle(self) -> float | None:
        """Target rotation of the spin in flight, for the host animation."""
        return self._end_angle

    def segment_at(self, angle: float) -> SpinResult:
        """Resolve an arbitrary rotation without touching wheel state."""
        index = segment_index(angle, len(self.segments))
        return SpinResult(
            segment_index=index,
            segment=self.segments[index],
            angle=angle % 360.0,
        )

    def spin(self) -> float:
        """Start a spin.

        Returns:
            The end angle the host should animate towards

        Raises:
            SpinInFlightError: If a spin has not been resolved yet
        """
        if self.is_spinning:
            raise SpinInFlightError("The wheel is already spinning.")

        offset = self._rng.randrange(360)
        self._end_angle = self.current_angle + 360 * self.full_rotations + offset
        logger.debug("Wheel spin started towards %.1f degrees", self._end_angle)
        return self._end_angle

    def resolve(self) -> SpinResult:
        """Finish the spin in flight at its drawn end angle.

        Raises:
            InvalidStateError: If no spin is in flight
        """
        if self._end_angle is None:
            raise InvalidStateError("There is no spin to resolve.")

        return self._land(self._end_angle)

    def stop_early(self, angle: float | None = None) -> SpinResult | None:
        """Interrupt the spin in flight.

        Args:
            angle: Rotation the animation had reached. Defaults to the
                angle the spin started from.

        Returns:
            The landed result, or None when nothing was spinning
        """
        if self._end_angle is None:
            return None

        if angle is None:
            angle = self.current_angle
        return self._land(angle)

    def _land(self, angle: float) -> SpinResult:
        result = self.segment_at(angle)
        self.current_angle = result.angle
        self._end_angle = None
        logger.debug(
            "Wheel landed on segment %d (%s) at %.1f degrees",
            result.segment_index, result.segment, result.angle,
        )
        return result
