"""
league_scraper/api/routers/league_scraping.py

League seasons and fixtures scraping endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from league_scraper.schemas.league_scraping import (
    CompetitionResponse,
    FixturesReportResponse,
    ScrapeFixturesRequest,
    ScrapeSeasonsRequest,
    SeasonsReportResponse,
)
from league_scraper.scraping.errors import FatalConfigError, ScrapingError
from league_scraper.services.league_scraping_service import (
    LeagueScrapingService,
    get_league_scraping_service,
)

router = APIRouter(tags=["league-scraping"])


@router.get("/competitions", response_model=list[CompetitionResponse])
def list_competitions(
    scraping_service: LeagueScrapingService = Depends(get_league_scraping_service),
) -> list[CompetitionResponse]:
    try:
        competitions = scraping_service.list_competitions()
    except FatalConfigError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return [
        CompetitionResponse(
            key=competition.key,
            competition_id=competition.competition_id,
            name=competition.name,
            slug=competition.slug,
            country=competition.country,
            gender=competition.gender,
            history_url=competition.history_url,
        )
        for competition in competitions
    ]


@router.post("/scrape/seasons", response_model=SeasonsReportResponse)
def scrape_seasons(
    request: ScrapeSeasonsRequest,
    scraping_service: LeagueScrapingService = Depends(get_league_scraping_service),
) -> SeasonsReportResponse:
    """
    Scrape the season history table of one competition.
    """

    try:
        run = scraping_service.scrape_seasons(
            competition=request.competition,
            save_to_file=request.save_to_file,
        )
    except (FatalConfigError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ScrapingError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc

    return run.report


@router.post("/scrape/fixtures", response_model=FixturesReportResponse)
def scrape_fixtures(
    request: ScrapeFixturesRequest,
    scraping_service: LeagueScrapingService = Depends(get_league_scraping_service),
) -> FixturesReportResponse:
    """
    Scrape fixtures for every selected season of a seasons catalogue.
    """

    try:
        run = scraping_service.scrape_fixtures(
            competition=request.competition,
            max_concurrent=request.max_concurrent,
            only_seasons=request.only_seasons,
            start_from_season=request.start_from_season,
            save_to_file=request.save_to_file,
            catalogue_path=request.catalogue_path,
        )
    except (FatalConfigError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return run.report
