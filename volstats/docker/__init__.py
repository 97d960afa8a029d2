"""Docker integration for the volume stats service."""

from .errors import (
    VolumeStatsError,
    BackendConnectionError,
    EnumerationError,
    ContainerNotFoundError,
    MissingContainerIdError,
)
from .client_factory import create_docker_client
from .container_enumerator import ContainerEnumerator
from .volume_probe import VolumeSizeProbe, HelperContainerProbe, FilesystemProbe, create_probe

__all__ = [
    'VolumeStatsError',
    'BackendConnectionError',
    'EnumerationError',
    'ContainerNotFoundError',
    'MissingContainerIdError',
    'create_docker_client',
    'ContainerEnumerator',
    'VolumeSizeProbe',
    'HelperContainerProbe',
    'FilesystemProbe',
    'create_probe',
]
