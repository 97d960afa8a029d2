"""
Dependency injection for the stats API.

Every request gets its own Docker client, closed once the response is sent,
and a fresh measurement pipeline built on it.
"""

import logging
from typing import Iterator

import docker
from fastapi import Depends, Request

from volstats.config.config_manager import StatsConfig
from volstats.docker.client_factory import create_docker_client
from volstats.docker.container_enumerator import ContainerEnumerator
from volstats.docker.volume_probe import create_probe
from volstats.services.volume_stats_service import VolumeStatsService

logger = logging.getLogger(__name__)


def get_config(request: Request) -> StatsConfig:
    """Get the configuration the application was started with."""
    return request.app.state.config


def get_docker_client(config: StatsConfig = Depends(get_config)) -> Iterator[docker.DockerClient]:
    """Open a Docker client for the duration of one request."""
    client = create_docker_client(config)
    try:
        yield client
    finally:
        client.close()


def get_stats_service(
    config: StatsConfig = Depends(get_config),
    docker_client: docker.DockerClient = Depends(get_docker_client),
) -> VolumeStatsService:
    """Build the measurement pipeline for one request."""
    return VolumeStatsService(
        enumerator=ContainerEnumerator(docker_client, config),
        probe=create_probe(docker_client, config),
    )
