"""Free-moving camera driven by keyboard, mouse and scroll input."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from .mat4 import Mat4
from .projection import look_at
from .scalar import radians
from .vector import Vec3

YAW = -90.0
PITCH = 0.0
CAMERA_SPEED = 10.0
SENSITIVITY = 0.1
ZOOM = 45.0

MAX_PITCH = 89.0
MIN_ZOOM = 1.0
MAX_ZOOM = 45.0


class CameraMovement(Enum):
    """Directions the keyboard can move the camera in."""

    FORWARD = "forward"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Camera:
    """Camera described by a position and Euler angles in degrees."""

    position: Vec3 = field(default_factory=Vec3)
    world_up: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    yaw: float = YAW
    pitch: float = PITCH
    movement_speed: float = CAMERA_SPEED
    mouse_sensitivity: float = SENSITIVITY
    zoom: float = ZOOM
    show_debug_axis: bool = True
    front: Vec3 = field(init=False)
    right: Vec3 = field(init=False)
    up: Vec3 = field(init=False)

    def __post_init__(self) -> None:
        self.position = Vec3(*self.position)
        self.world_up = Vec3(*self.world_up)
        self._update_vectors()

    def view_matrix(self) -> Mat4:
        """The view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def process_keyboard(self, direction: CameraMovement, delta_time: float) -> None:
        """Move the camera for ``delta_time`` seconds in ``direction``."""
        velocity = self.movement_speed * delta_time
        if direction is CameraMovement.FORWARD:
            self.position = self.position - self.front * velocity
        elif direction is CameraMovement.BACK:
            self.position = self.position + self.front * velocity
        elif direction is CameraMovement.LEFT:
            self.position = self.position - self.right * velocity
        elif direction is CameraMovement.RIGHT:
            self.position = self.position + self.right * velocity
        else:
            raise ValueError(f"unknown camera movement {direction!r}")

    def process_mouse_movement(
        self, x_offset: float, y_offset: float, constrain_pitch: bool = True
    ) -> None:
        """Turn the camera by a mouse offset."""
        self.yaw += x_offset * self.mouse_sensitivity
        self.pitch += y_offset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = max(-MAX_PITCH, min(MAX_PITCH, self.pitch))
        self._update_vectors()

    def process_mouse_scroll(self, y_offset: float) -> None:
        """Zoom by a scroll offset, kept within the allowed field of view."""
        self.zoom = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom - y_offset))

    def _update_vectors(self) -> None:
        yaw = radians(self.yaw)
        pitch = radians(self.pitch)
        self.front = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ).normalize()
        self.right = self.front.cross(self.world_up).normalize()
        self.up = self.right.cross(self.front).normalize()