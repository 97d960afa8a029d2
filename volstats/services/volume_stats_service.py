"""
Volume Stats Service

Builds volume usage reports for running containers: enumerate containers,
measure each named volume, assemble one report entry per volume.
"""

import logging
import time
from typing import List

from volstats.docker.container_enumerator import ContainerEnumerator
from volstats.docker.volume_probe import VolumeSizeProbe
from volstats.models.volume_usage import ContainerVolumes, VolumeUsageReport
from .usage_formatter import human_size, usage_mb

logger = logging.getLogger(__name__)


class VolumeStatsService:
    """
    Sequential measurement pipeline for one request.

    Containers are processed one at a time in enumeration order and volumes
    in mount order. Nothing is cached between calls.
    """

    def __init__(self, enumerator: ContainerEnumerator, probe: VolumeSizeProbe):
        self.enumerator = enumerator
        self.probe = probe

    def collect_all(self) -> List[VolumeUsageReport]:
        """Report the volumes of every running container."""
        start = time.monotonic()
        reports = []
        for container in self.enumerator.list_running():
            reports.extend(self._measure_container(container))

        logger.info(
            "Measured %d volumes across running containers in %.2fs",
            len(reports),
            time.monotonic() - start,
        )
        return reports

    def collect_container(self, container_id: str) -> List[VolumeUsageReport]:
        """
        Report the volumes of one container.

        Raises:
            ContainerNotFoundError: If the container does not exist
        """
        container = self.enumerator.get_container(container_id)
        reports = self._measure_container(container)
        logger.info("Measured %d volumes of container %s", len(reports), container.name)
        return reports

    def _measure_container(self, container: ContainerVolumes) -> List[VolumeUsageReport]:
        reports = []
        for volume in container.volumes:
            size = self.probe.measure(volume.name)
            reports.append(build_report(container, volume.name, size))
        return reports


def build_report(container: ContainerVolumes, volume_name: str, size_bytes: int) -> VolumeUsageReport:
    """Assemble the report entry for one measured volume."""
    # every volume of a container carries the container's first published port
    return VolumeUsageReport(
        container_name=container.name,
        container_id=container.id,
        volume_name=volume_name,
        usage=human_size(size_bytes),
        usage_mb=usage_mb(size_bytes) or None,
        port=container.port or None,
    )
