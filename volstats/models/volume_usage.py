"""
Volume usage report models.

`VolumeUsageReport` is the JSON shape served by the API; `ContainerVolumes`
and `VolumeMount` carry enumeration results between pipeline stages.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel


class VolumeUsageReport(BaseModel):
    """Disk usage of one named volume mounted by one running container."""

    container_name: str
    container_id: str
    volume_name: str
    usage: str
    usage_mb: Optional[str] = None
    port: Optional[str] = None


@dataclass
class VolumeMount:
    """A named-volume mount of a container."""

    name: str
    destination: str = ''


@dataclass
class ContainerVolumes:
    """A running container together with its named-volume mounts."""

    name: str
    id: str
    volumes: List[VolumeMount] = field(default_factory=list)
    port: Optional[str] = None
