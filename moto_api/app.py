"""FastAPI application factory."""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moto_data import DataLayer, DataLayerConfig, HealthAggregator
from moto_api.config import WebAppConfig
from moto_api.security import SecurityHeadersMiddleware


def create_app(
    webapp_config: WebAppConfig | None = None,
    data_layer_config: DataLayerConfig | None = None,
    health_aggregator: HealthAggregator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``health_aggregator`` takes precedence over the probes of the data layer.
    Without a started data layer, the database and Redis probes are still
    registered and report down.
    """

    webapp_config = webapp_config or WebAppConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: connect data layer
        if data_layer_config:
            data_layer = DataLayer(data_layer_config)
            await data_layer.start()
            app.state.data_layer = data_layer
            if health_aggregator is None:
                app.state.health_aggregator = data_layer.aggregator
        yield
        # Shutdown: disconnect data layer
        if hasattr(app.state, "data_layer"):
            await app.state.data_layer.stop()

    app = FastAPI(
        title=webapp_config.title,
        lifespan=lifespan,
        debug=webapp_config.debug,
        docs_url=webapp_config.docs_url,
    )

    app.add_middleware(SecurityHeadersMiddleware)
    if webapp_config.cors_origins is None:
        # Echo any origin back; a literal "*" is rejected alongside credentials
        app.add_middleware(
            CORSMiddleware,
            allow_origin_regex=".*",
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=webapp_config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.state.webapp_config = webapp_config
    # Until a data layer is started, its probes report "not connected"
    app.state.health_aggregator = health_aggregator or DataLayer(
        data_layer_config or DataLayerConfig()
    ).aggregator

    # Register routes
    from moto_api.health.routes import router as health_router

    app.include_router(health_router)

    return app
