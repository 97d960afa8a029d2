"""
Configuration for the volume stats service.

Holds the fixed service constants (listener port, Docker API version, helper
image) alongside the few settings that may be tuned from the environment.
"""

import os
from typing import Optional


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class StatsConfig:
    """
    Configuration passed into the measurement pipeline at startup.

    The listener port, API version and helper image are constants of the
    service. They are constructor arguments only so tests can substitute them.
    """

    DEFAULT_LISTEN_HOST = '0.0.0.0'
    DEFAULT_LISTEN_PORT = 6969
    DOCKER_API_VERSION = '1.43'
    HELPER_IMAGE = 'busybox'
    MOUNT_PATH = '/mnt'
    SHORT_ID_LENGTH = 12

    VALID_PROBES = ['container', 'filesystem']
    VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    def __init__(
        self,
        listen_host: str = DEFAULT_LISTEN_HOST,
        listen_port: int = DEFAULT_LISTEN_PORT,
        docker_api_version: str = DOCKER_API_VERSION,
        helper_image: str = HELPER_IMAGE,
        mount_path: str = MOUNT_PATH,
        short_id_length: int = SHORT_ID_LENGTH,
        docker_timeout: Optional[int] = None,
        probe: Optional[str] = None,
        log_level: Optional[str] = None,
    ):
        """
        Initialize configuration.

        Args:
            listen_host: Interface the HTTP listener binds to
            listen_port: HTTP listener port
            docker_api_version: Pinned Docker Engine API version
            helper_image: Image used for the disposable measuring container
            mount_path: Path the measured volume is mounted at in the helper
            short_id_length: Length container ids are truncated to
            docker_timeout: Seconds before a Docker API call is abandoned
                (VOLSTATS_DOCKER_TIMEOUT, default 120)
            probe: Measuring strategy, 'container' or 'filesystem'
                (VOLSTATS_PROBE, default 'container')
            log_level: Root log level (VOLSTATS_LOG_LEVEL, default INFO)
        """
        self.listen_host = listen_host
        self.listen_port = listen_port
        self.docker_api_version = docker_api_version
        self.helper_image = helper_image
        self.mount_path = mount_path
        self.short_id_length = short_id_length

        if docker_timeout is None:
            timeout_str = os.getenv('VOLSTATS_DOCKER_TIMEOUT', '120')
            try:
                docker_timeout = int(timeout_str)
            except ValueError:
                raise ConfigValidationError(
                    f"Invalid VOLSTATS_DOCKER_TIMEOUT value: '{timeout_str}' - must be a number of seconds"
                )
        self.docker_timeout = docker_timeout

        self.probe = (probe or os.getenv('VOLSTATS_PROBE', 'container')).lower()
        self.log_level = (log_level or os.getenv('VOLSTATS_LOG_LEVEL', 'INFO')).upper()

    def validate(self) -> 'StatsConfig':
        """Validate the configuration, returning it for chaining."""
        if not (1 <= self.listen_port <= 65535):
            raise ConfigValidationError(
                f"Invalid listen port: {self.listen_port} - must be between 1 and 65535"
            )

        if self.docker_timeout <= 0:
            raise ConfigValidationError(
                f"Docker timeout must be positive: {self.docker_timeout}"
            )

        if self.probe not in self.VALID_PROBES:
            raise ConfigValidationError(
                f"Invalid probe: '{self.probe}' - expected one of {', '.join(self.VALID_PROBES)}"
            )

        if self.log_level not in self.VALID_LOG_LEVELS:
            raise ConfigValidationError(f"Invalid log level: '{self.log_level}'")

        if self.short_id_length <= 0:
            raise ConfigValidationError(
                f"Short id length must be positive: {self.short_id_length}"
            )

        return self
