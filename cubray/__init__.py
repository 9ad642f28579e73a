"""Grid raycaster: .cub scene loading, ray casting, pixel images and XPM reading."""

__version__ = "0.1.0"