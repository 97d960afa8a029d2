"""
Volume Stats API
FastAPI service reporting disk usage of Docker volumes attached to running containers
"""
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from volstats.config.config_manager import StatsConfig
from volstats.docker.errors import ContainerNotFoundError, MissingContainerIdError, VolumeStatsError
from statsapi.endpoints.stats import router as stats_router

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: StatsConfig):
    """Apply the configured log level and format to the root logger."""
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(config.log_level)


def create_app(config: Optional[StatsConfig] = None) -> FastAPI:
    """Create the FastAPI application bound to a configuration."""
    config = (config or StatsConfig()).validate()
    configure_logging(config)

    app = FastAPI(title="Volume Stats")
    app.state.config = config
    app.include_router(stats_router)

    @app.exception_handler(MissingContainerIdError)
    async def missing_container_id_handler(request: Request, exc: MissingContainerIdError):
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(ContainerNotFoundError)
    async def container_not_found_handler(request: Request, exc: ContainerNotFoundError):
        logger.info(f"Container not found: {exc.container_id}")
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(VolumeStatsError)
    async def backend_error_handler(request: Request, exc: VolumeStatsError):
        logger.error(f"Request {request.url.path} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "volstats"}

    return app


app = create_app()


def main():
    import uvicorn
    config = app.state.config
    logger.info(f"Listening on :{config.listen_port}...")
    uvicorn.run(app, host=config.listen_host, port=config.listen_port)


if __name__ == "__main__":
    main()
