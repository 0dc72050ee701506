"""
Team storage for MongoDB and an in-memory test implementation.

Teams are stored one document per team, with players embedded in the
``players`` array in insertion order.
"""

from __future__ import annotations

import copy
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Protocol

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import MongoClient, ReturnDocument
from pymongo.errors import PyMongoError

from roster.errors import StorageError

logger = logging.getLogger(__name__)


class TeamStore(Protocol):
    """Interface for team persistence."""

    def open(self) -> None:
        ...

    def close(self) -> None:
        ...

    def list_teams(self) -> list["TeamRecord"]:
        ...

    def get_team(self, team_id: str) -> Optional["TeamRecord"]:
        ...

    def create_team(self, name: str, mascot: str) -> "TeamRecord":
        ...

    def add_player(
        self, team_id: str, player: "PlayerRecord"
    ) -> Optional["TeamRecord"]:
        ...

    def delete_team(self, team_id: str) -> Optional["TeamRecord"]:
        ...


@dataclass
class PlayerRecord:
    first_name: str
    last_name: str
    salary: int | float

    def as_document(self) -> dict:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "salary": self.salary,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "PlayerRecord":
        return cls(
            first_name=doc.get("firstName"),
            last_name=doc.get("lastName"),
            salary=doc.get("salary"),
        )


@dataclass
class TeamRecord:
    team_id: str
    name: str
    mascot: str
    players: list[PlayerRecord] = field(default_factory=list)

    def as_dict(self) -> dict:
        return {
            "_id": self.team_id,
            "name": self.name,
            "mascot": self.mascot,
            "players": [player.as_document() for player in self.players],
        }

    @classmethod
    def from_document(cls, doc: dict) -> "TeamRecord":
        return cls(
            team_id=str(doc["_id"]),
            name=doc.get("name"),
            mascot=doc.get("mascot"),
            players=[PlayerRecord.from_document(p) for p in doc.get("players") or []],
        )


def parse_team_id(team_id: str) -> ObjectId:
    """
    Convert a path identifier to an ObjectId, failing the way the driver does.
    """
    try:
        return ObjectId(team_id)
    except (InvalidId, TypeError) as exc:
        raise StorageError(
            f'Cast to ObjectId failed for value "{team_id}": {exc}'
        ) from exc


class InMemoryTeamStore:
    """Simple in-memory team store for development and tests."""

    def __init__(self):
        self.teams: Dict[str, dict] = {}
        self._lock = threading.Lock()

    def open(self) -> None:
        logger.info("Using in-memory team store")

    def close(self) -> None:
        pass

    def reset(self) -> None:
        """Clear all stored teams (useful in tests)."""
        with self._lock:
            self.teams.clear()

    def list_teams(self) -> list[TeamRecord]:
        with self._lock:
            return [TeamRecord.from_document(doc) for doc in self.teams.values()]

    def get_team(self, team_id: str) -> Optional[TeamRecord]:
        key = str(parse_team_id(team_id))
        with self._lock:
            doc = self.teams.get(key)
            return TeamRecord.from_document(doc) if doc else None

    def create_team(self, name: str, mascot: str) -> TeamRecord:
        doc = {"_id": ObjectId(), "name": name, "mascot": mascot, "players": []}
        with self._lock:
            self.teams[str(doc["_id"])] = doc
        return TeamRecord.from_document(doc)

    def add_player(self, team_id: str, player: PlayerRecord) -> Optional[TeamRecord]:
        key = str(parse_team_id(team_id))
        with self._lock:
            doc = self.teams.get(key)
            if not doc:
                return None
            doc["players"].append(copy.deepcopy(player.as_document()))
            return TeamRecord.from_document(doc)

    def delete_team(self, team_id: str) -> Optional[TeamRecord]:
        key = str(parse_team_id(team_id))
        with self._lock:
            doc = self.teams.pop(key, None)
            return TeamRecord.from_document(doc) if doc else None


class MongoTeamStore:
    """
    pymongo-backed implementation. One client per process; pymongo pools
    connections internally.
    """

    def __init__(
        self,
        mongodb_url: str | None = None,
        database: str = "roster",
        collection: str = "teams",
        timeout_ms: int = 5000,
        client: MongoClient | None = None,
    ):
        if client is None:
            if not mongodb_url:
                raise ValueError("MONGODB_URL is required for MongoTeamStore")
            client = MongoClient(mongodb_url, serverSelectionTimeoutMS=timeout_ms)
        self.client = client
        self.database = database
        self.collection = client[database][collection]

    @contextmanager
    def _driver_errors(self) -> Iterator[None]:
        try:
            yield
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc

    def open(self) -> None:
        try:
            self.client.admin.command("ping")
        except PyMongoError as exc:
            # Requests will still report the failure as a storage error.
            logger.warning("Connection to %s on MongoDB failed: %s", self.database, exc)
            return
        logger.info("Connection to %s on MongoDB successful", self.database)

    def close(self) -> None:
        self.client.close()
        logger.info("Closed MongoDB connection to %s", self.database)

    def list_teams(self) -> list[TeamRecord]:
        with self._driver_errors():
            return [TeamRecord.from_document(doc) for doc in self.collection.find({})]

    def get_team(self, team_id: str) -> Optional[TeamRecord]:
        oid = parse_team_id(team_id)
        with self._driver_errors():
            doc = self.collection.find_one({"_id": oid})
        return TeamRecord.from_document(doc) if doc else None

    def create_team(self, name: str, mascot: str) -> TeamRecord:
        doc = {"name": name, "mascot": mascot, "players": []}
        with self._driver_errors():
            result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return TeamRecord.from_document(doc)

    def add_player(self, team_id: str, player: PlayerRecord) -> Optional[TeamRecord]:
        oid = parse_team_id(team_id)
        with self._driver_errors():
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$push": {"players": player.as_document()}},
                return_document=ReturnDocument.AFTER,
            )
        return TeamRecord.from_document(doc) if doc else None

    def delete_team(self, team_id: str) -> Optional[TeamRecord]:
        oid = parse_team_id(team_id)
        with self._driver_errors():
            doc = self.collection.find_one_and_delete({"_id": oid})
        return TeamRecord.from_document(doc) if doc else None
