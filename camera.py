"""Camera scroll state used when placing tile layers in world space."""

from dataclasses import dataclass, field


@dataclass
class CameraView:
    scroll_x: float = 0.0
    scroll_y: float = 0.0

    def parallax_offset(self, scroll_factor_x: float, scroll_factor_y: float) -> tuple[float, float]:
        """Portion of the scroll a layer with the given scroll factors keeps up with.

        A factor of 1 tracks the camera fully (no offset), 0 pins the layer to the
        viewport (offset equals the whole scroll).
        """
        offset_x = self.scroll_x * (1 - scroll_factor_x)
        offset_y = self.scroll_y * (1 - scroll_factor_y)
        return offset_x, offset_y


@dataclass
class SceneCameras:
    """Cameras owned by a scene; `main` is the fallback for layer transforms."""

    main: CameraView = field(default_factory=CameraView)
