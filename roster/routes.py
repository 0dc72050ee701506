"""
HTTP routes for the roster API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path

from roster.db import TeamStore
from roster.dependencies import get_team_store
from roster.errors import TeamNotFoundError
from roster.schemas import (
    ErrorResponse,
    HealthResponse,
    PlayerCreate,
    TeamCreate,
    TeamResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Teams"])
health_router = APIRouter()

SERVER_EXCEPTION = {"model": ErrorResponse, "description": "Server Exception"}
MONGODB_EXCEPTION = {"model": ErrorResponse, "description": "MongoDB Exception"}
NOT_FOUND = {"model": ErrorResponse, "description": "No team with the given id"}
INVALID_BODY = {"model": ErrorResponse, "description": "Invalid request body"}

TEAM_ID = Path(..., description="Team ID")


@router.get(
    "/teams",
    response_model=list[TeamResponse],
    summary="Returns an array of Teams in JSON format.",
    responses={500: SERVER_EXCEPTION, 501: MONGODB_EXCEPTION},
)
def find_all_teams(store: TeamStore = Depends(get_team_store)):
    """API for returning an array of all Teams."""
    teams = store.list_teams()
    return [TeamResponse.from_record(team) for team in teams]


@router.get(
    "/teams/{id}/players",
    response_model=TeamResponse,
    summary="Looks up all players by TeamId",
    responses={404: NOT_FOUND, 500: SERVER_EXCEPTION, 501: MONGODB_EXCEPTION},
)
def find_all_players_by_team_id(
    id: str = TEAM_ID, store: TeamStore = Depends(get_team_store)
):
    """
    API for finding all players by TeamId.

    Returns the whole team document, players included.
    """
    team = store.get_team(id)
    if not team:
        raise TeamNotFoundError(id)
    return TeamResponse.from_record(team)


@router.post(
    "/teams/{id}/players",
    response_model=TeamResponse,
    summary="Assigns a player to a team by teamID",
    responses={
        400: INVALID_BODY,
        404: NOT_FOUND,
        500: SERVER_EXCEPTION,
        501: MONGODB_EXCEPTION,
    },
)
def assign_player_to_team(
    payload: PlayerCreate,
    id: str = TEAM_ID,
    store: TeamStore = Depends(get_team_store),
):
    """API for assigning a player to a team by teamID."""
    team = store.add_player(id, payload.to_record())
    if not team:
        raise TeamNotFoundError(id)
    logger.info(
        "Assigned player %s %s to team %s", payload.firstName, payload.lastName, id
    )
    return TeamResponse.from_record(team)


@router.delete(
    "/teams/{id}",
    response_model=TeamResponse,
    summary="Removes a Team document from MongoDB.",
    responses={404: NOT_FOUND, 500: SERVER_EXCEPTION, 501: MONGODB_EXCEPTION},
)
def delete_team_by_id(id: str = TEAM_ID, store: TeamStore = Depends(get_team_store)):
    """API for deleting a Team document from MongoDB."""
    team = store.delete_team(id)
    if not team:
        raise TeamNotFoundError(id)
    logger.info("Deleted team %s", id)
    return TeamResponse.from_record(team)


@router.post(
    "/teams",
    response_model=TeamResponse,
    summary="Creates a new Team with no players.",
    responses={400: INVALID_BODY, 500: SERVER_EXCEPTION, 501: MONGODB_EXCEPTION},
)
def create_team(payload: TeamCreate, store: TeamStore = Depends(get_team_store)):
    """API for creating a Team document in MongoDB."""
    team = store.create_team(payload.name, payload.mascot)
    logger.info("Created team %s (%s)", team.team_id, team.name)
    return TeamResponse.from_record(team)


@health_router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", service="roster")
