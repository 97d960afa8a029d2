"""
Container Enumerator

Discovers running containers and the named volumes they mount.
"""

import logging
from typing import Any, Dict, List, Optional

import docker
import requests

from volstats.config.config_manager import StatsConfig
from volstats.models.volume_usage import ContainerVolumes, VolumeMount
from .errors import BackendConnectionError, ContainerNotFoundError, EnumerationError

logger = logging.getLogger(__name__)

VOLUME_MOUNT_TYPE = 'volume'


def volume_mounts(attrs: Dict[str, Any]) -> List[VolumeMount]:
    """Return the named-volume mounts from container inspect data, in mount order."""
    mounts = []
    for mount in attrs.get('Mounts') or []:
        # bind and tmpfs mounts are not measured
        if mount.get('Type') != VOLUME_MOUNT_TYPE:
            continue
        mounts.append(VolumeMount(
            name=mount.get('Name', ''),
            destination=mount.get('Destination', ''),
        ))
    return mounts


def first_published_port(attrs: Dict[str, Any]) -> Optional[str]:
    """
    Return the host port of the first published port binding.

    Bindings are scanned in the order the daemon returns them. A binding
    with no host entries (exposed but not published) is skipped.
    """
    ports = (attrs.get('NetworkSettings') or {}).get('Ports') or {}
    for bindings in ports.values():
        if bindings:
            return bindings[0].get('HostPort') or None
    return None


def display_name(name: str) -> str:
    """Strip the leading separator Docker puts on container names."""
    return name[1:] if name.startswith('/') else name


class ContainerEnumerator:
    """Lists running containers through the Docker API and extracts their volumes."""

    def __init__(self, docker_client, config: Optional[StatsConfig] = None):
        """Initialize ContainerEnumerator with a Docker client."""
        self.docker_client = docker_client
        self.config = config or StatsConfig()

    def short_id(self, container_id: str) -> str:
        return container_id[:self.config.short_id_length]

    def list_running(self) -> List[ContainerVolumes]:
        """
        Enumerate all running containers with their volume mounts.

        Containers that vanish or fail inspection between listing and
        inspection are skipped with a warning.

        Raises:
            BackendConnectionError: If the daemon cannot be reached
            EnumerationError: If the container list cannot be retrieved
        """
        try:
            containers = self.docker_client.containers.list(sparse=True)
        except requests.exceptions.ConnectionError as e:
            raise BackendConnectionError(str(e)) from e
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            raise EnumerationError(f"Failed to list containers: {e}") from e

        results = []
        for summary in containers:
            container_id = summary.id
            try:
                inspected = self.docker_client.containers.get(container_id)
            except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
                logger.warning(f"Failed to inspect container {container_id}: {e}")
                continue

            names = summary.attrs.get('Names') or []
            name = names[0] if names else inspected.attrs.get('Name', '')
            results.append(self._build(name, inspected.attrs))

        logger.debug(f"Enumerated {len(results)} running containers")
        return results

    def get_container(self, container_id: str) -> ContainerVolumes:
        """
        Inspect a single container by id or name.

        Raises:
            ContainerNotFoundError: If no such container exists
            BackendConnectionError: If the daemon cannot be reached
            EnumerationError: If inspection fails for another reason
        """
        try:
            inspected = self.docker_client.containers.get(container_id)
        except docker.errors.NotFound as e:
            raise ContainerNotFoundError(container_id) from e
        except requests.exceptions.ConnectionError as e:
            raise BackendConnectionError(str(e)) from e
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            raise EnumerationError(f"Failed to inspect container {container_id}: {e}") from e

        return self._build(inspected.attrs.get('Name', ''), inspected.attrs)

    def _build(self, name: str, attrs: Dict[str, Any]) -> ContainerVolumes:
        return ContainerVolumes(
            name=display_name(name),
            id=self.short_id(attrs.get('Id', '')),
            volumes=volume_mounts(attrs),
            port=first_published_port(attrs),
        )
