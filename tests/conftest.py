"""
Shared test fixtures for the volume stats service.

Provides mocked Docker clients shaped like the docker SDK's high-level API,
a fake volume size probe, and a FastAPI TestClient wired to them.
"""

import logging
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import docker
import pytest
from fastapi.testclient import TestClient

from volstats.config.config_manager import StatsConfig

logging.basicConfig(level=logging.INFO)


def make_container_attrs(
    container_id: str,
    name: str,
    mounts: Optional[List[Dict[str, Any]]] = None,
    ports: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build `docker inspect` style attributes for a container."""
    return {
        'Id': container_id,
        'Name': f'/{name}',
        'Mounts': mounts or [],
        'NetworkSettings': {'Ports': ports or {}},
    }


def volume_mount(name: str, destination: str = '/data') -> Dict[str, Any]:
    return {'Type': 'volume', 'Name': name, 'Destination': destination}


def bind_mount(source: str, destination: str = '/host') -> Dict[str, Any]:
    return {'Type': 'bind', 'Source': source, 'Destination': destination}


class FakeDockerClient:
    """
    Minimal stand-in for docker.DockerClient.

    `containers.list` returns sparse summaries in registration order and
    `containers.get` returns inspected containers; ids registered in
    `failing_inspect` raise NotFound on get, mimicking a container that
    disappears between listing and inspection.
    """

    def __init__(self):
        self._containers: Dict[str, Dict[str, Any]] = {}
        self.failing_inspect = set()
        self.containers = Mock()
        self.containers.list.side_effect = self._list
        self.containers.get.side_effect = self._get
        self.closed = False

    def add(self, attrs: Dict[str, Any]):
        self._containers[attrs['Id']] = attrs
        return self

    def _list(self, **kwargs):
        summaries = []
        for container_id, attrs in self._containers.items():
            summary = Mock()
            summary.id = container_id
            summary.attrs = {'Id': container_id, 'Names': [attrs['Name']]}
            summaries.append(summary)
        return summaries

    def _get(self, container_id):
        if container_id in self.failing_inspect:
            raise docker.errors.NotFound(f"No such container: {container_id}")
        for full_id, attrs in self._containers.items():
            if full_id.startswith(container_id) or attrs['Name'] == f'/{container_id}':
                inspected = Mock()
                inspected.id = full_id
                inspected.attrs = attrs
                return inspected
        raise docker.errors.NotFound(f"No such container: {container_id}")

    def close(self):
        self.closed = True


class FakeProbe:
    """Volume size probe returning canned sizes; unknown volumes measure 0."""

    def __init__(self, sizes: Optional[Dict[str, int]] = None):
        self.sizes = sizes or {}
        self.measured: List[str] = []

    def measure(self, volume_name: str) -> int:
        self.measured.append(volume_name)
        return self.sizes.get(volume_name, 0)


@pytest.fixture
def stats_config():
    """Configuration with environment-independent values."""
    return StatsConfig(docker_timeout=30, probe='container', log_level='INFO')


@pytest.fixture
def fake_docker_client():
    return FakeDockerClient()


@pytest.fixture
def fake_probe():
    return FakeProbe()


@pytest.fixture
def api_client(stats_config, fake_docker_client, fake_probe):
    """TestClient whose requests run against the fake Docker client and probe."""
    from statsapi.main import create_app
    from statsapi.dependencies import get_stats_service
    from volstats.docker.container_enumerator import ContainerEnumerator
    from volstats.services.volume_stats_service import VolumeStatsService

    app = create_app(stats_config)

    def override_stats_service():
        return VolumeStatsService(
            enumerator=ContainerEnumerator(fake_docker_client, stats_config),
            probe=fake_probe,
        )

    app.dependency_overrides[get_stats_service] = override_stats_service

    with TestClient(app) as client:
        yield client
