"""Errors raised by the Docker-facing side of the stats pipeline."""


class VolumeStatsError(Exception):
    """Base class for request-level failures."""
    pass


class BackendConnectionError(VolumeStatsError):
    """Raised when the Docker daemon cannot be reached."""
    pass


class EnumerationError(VolumeStatsError):
    """Raised when containers cannot be listed or inspected."""
    pass


class ContainerNotFoundError(VolumeStatsError):
    """Raised when a requested container does not exist."""

    def __init__(self, container_id: str):
        self.container_id = container_id
        super().__init__(f"No such container: {container_id}")


class MissingContainerIdError(VolumeStatsError):
    """Raised when a single-container request names no container."""

    def __init__(self):
        super().__init__("Container ID required")
