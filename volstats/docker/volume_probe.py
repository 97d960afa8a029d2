"""
Volume Size Probes

Measure the on-disk size of a Docker named volume in bytes. Measurement is
best-effort: every probe logs its failures and reports zero bytes instead of
raising.
"""

import logging
import os
from typing import Protocol

import docker
import requests

from volstats.config.config_manager import StatsConfig

logger = logging.getLogger(__name__)


class VolumeSizeProbe(Protocol):
    """Protocol for volume size measurement."""

    def measure(self, volume_name: str) -> int: ...


def parse_du_output(output: bytes) -> int:
    """
    Parse the byte count from `du -sb` output such as b"123456\t/mnt".

    Raises:
        ValueError: If the output is empty or does not start with an integer
    """
    fields = output.decode('utf-8', errors='replace').split()
    if not fields:
        raise ValueError("empty du output")
    return int(fields[0], 10)


class HelperContainerProbe:
    """
    Measures a volume by running `du -sb` in a disposable helper container.

    The helper mounts the volume at the configured path. It is force-removed
    once the measurement ends, whether `du` finished, failed or timed out.
    One container is created per measurement.
    """

    def __init__(self, docker_client, config: StatsConfig = None):
        self.docker_client = docker_client
        self.config = config or StatsConfig()

    def measure(self, volume_name: str) -> int:
        try:
            container = self._create_helper(volume_name)
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            logger.error(f"Error measuring volume {volume_name}: {e}")
            return 0

        try:
            container.start()
            result = container.wait(timeout=self.config.docker_timeout)
            output = container.logs(stdout=True, stderr=True)
            exit_status = result.get('StatusCode')
            if exit_status != 0:
                logger.error(f"Error measuring volume {volume_name}: helper exited with status {exit_status}")
                return 0
            size = parse_du_output(output or b'')
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            logger.error(f"Error measuring volume {volume_name}: {e}")
            return 0
        except ValueError as e:
            logger.error(f"Error measuring volume {volume_name}: unparsable output ({e})")
            return 0
        finally:
            self._remove_helper(container)

        logger.debug(f"Volume {volume_name} uses {size} bytes")
        return size

    def _create_helper(self, volume_name: str):
        mount_path = self.config.mount_path
        create_kwargs = {
            'command': ['du', '-sb', mount_path],
            'volumes': {volume_name: {'bind': mount_path, 'mode': 'rw'}},
        }
        try:
            return self.docker_client.containers.create(self.config.helper_image, **create_kwargs)
        except docker.errors.ImageNotFound:
            logger.info(f"Pulling helper image {self.config.helper_image}")
            self.docker_client.images.pull(self.config.helper_image)
            return self.docker_client.containers.create(self.config.helper_image, **create_kwargs)

    def _remove_helper(self, container):
        try:
            container.remove(force=True)
        except docker.errors.NotFound:
            pass
        except (docker.errors.DockerException, requests.exceptions.RequestException) as e:
            logger.warning(f"Failed to remove helper container {container.id}: {e}")


class FilesystemProbe:
    """
    Measures a volume by walking its mountpoint on the Docker host.

    Sums the apparent size of every entry below the mountpoint, directories
    included, which matches `du -sb`. Requires the service to run on the
    Docker host with read access to the volume directories.
    """

    def __init__(self, docker_client):
        self.docker_client = docker_client

    def measure(self, volume_name: str) -> int:
        try:
            volume = self.docker_client.volumes.get(volume_name)
            mountpoint = volume.attrs['Mountpoint']
        except (docker.errors.DockerException, requests.exceptions.RequestException, KeyError) as e:
            logger.error(f"Error resolving mountpoint of volume {volume_name}: {e}")
            return 0

        try:
            size = tree_size(mountpoint)
        except OSError as e:
            logger.error(f"Error measuring volume {volume_name} at {mountpoint}: {e}")
            return 0

        logger.debug(f"Volume {volume_name} uses {size} bytes")
        return size


def tree_size(root: str) -> int:
    """Return the apparent size in bytes of root and everything below it."""
    total = os.lstat(root).st_size

    def on_error(error: OSError):
        raise error

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        for entry in dirnames + filenames:
            total += os.lstat(os.path.join(dirpath, entry)).st_size
    return total


def create_probe(docker_client, config: StatsConfig) -> VolumeSizeProbe:
    """Create the probe selected by the configuration."""
    if config.probe == 'filesystem':
        return FilesystemProbe(docker_client)
    return HelperContainerProbe(docker_client, config)
