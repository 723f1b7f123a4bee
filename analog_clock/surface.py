"""
Drawable Surface

Capability a host needs from anything it draws: react to size changes,
produce a frame on request, save/restore state and report a preferred size.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .primitives import Primitive


class MeasureMode(Enum):
    EXACTLY = "exactly"          # Host dictates the size
    AT_MOST = "at_most"          # Host allows up to the size
    UNSPECIFIED = "unspecified"  # Host has no constraint


@dataclass(frozen=True)
class MeasureSpec:
    mode: MeasureMode = MeasureMode.UNSPECIFIED
    size: int = 0


def resolve_size(default: int, spec: Optional[MeasureSpec]) -> int:
    """Reconcile a preferred size with the host's constraint"""
    if spec is None or spec.mode is MeasureMode.UNSPECIFIED:
        return default
    if spec.mode is MeasureMode.AT_MOST:
        return min(default, spec.size)
    return spec.size


class DrawableSurface(ABC):
    """
    Base class for surfaces driven by a host.

    The host calls `on_size_changed` whenever the surface dimensions change
    and `on_frame_requested` whenever it is ready to paint.
    """

    @abstractmethod
    def on_size_changed(self, width: int, height: int) -> None:
        pass

    @abstractmethod
    def on_frame_requested(self) -> List[Primitive]:
        """Return the primitives to paint, in draw order"""
        pass

    @abstractmethod
    def save_state(self, view_state: Any = None) -> Dict[str, Any]:
        pass

    @abstractmethod
    def restore_state(self, state: Any) -> Any:
        """Restore from `save_state` output; returns the host's view state"""
        pass

    def preferred_size(self) -> Tuple[int, int]:
        """Size hint used when the host does not constrain the surface"""
        return 0, 0

    def measure(self, width_spec: Optional[MeasureSpec] = None,
                height_spec: Optional[MeasureSpec] = None) -> Tuple[int, int]:
        default_width, default_height = self.preferred_size()
        return (
            resolve_size(default_width, width_spec),
            resolve_size(default_height, height_spec),
        )
