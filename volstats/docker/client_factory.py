"""
Docker Client Factory

Creates per-request Docker clients pinned to the configured API version.
"""

import logging

import docker

from volstats.config.config_manager import StatsConfig
from .errors import BackendConnectionError

logger = logging.getLogger(__name__)


def create_docker_client(config: StatsConfig) -> docker.DockerClient:
    """
    Create a Docker client from the standard DOCKER_* environment.

    Raises:
        BackendConnectionError: If the client cannot be configured
    """
    try:
        client = docker.from_env(
            version=config.docker_api_version,
            timeout=config.docker_timeout,
        )
    except docker.errors.DockerException as e:
        logger.error(f"Failed to create Docker client: {e}")
        raise BackendConnectionError(str(e)) from e

    logger.debug(f"Docker client created (api_version={config.docker_api_version})")
    return client
