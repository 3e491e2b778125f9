from __future__ import annotations

from fastapi import FastAPI

from league_scraper import __version__


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    from league_scraper.config import load_env_files
    from league_scraper.scraping.logging_utils import configure_logging

    load_env_files()
    configure_logging()

    application = FastAPI(
        title="League Scraper API",
        version=__version__,
    )

    from league_scraper.api.routers import league_scraping_router

    application.include_router(league_scraping_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return application


app = create_app()
