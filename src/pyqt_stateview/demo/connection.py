"""In-memory stand-in for a game server connection."""

import dataclasses
import logging
import threading
import time
from typing import Dict, List, Optional

from pyqt_stateview.protocols import Response, SessionContext, UserDescriptor

from .schema import (
    GameStatus, GameView, PlayerAndVote, PlayerState, ProposeQuestRequest, QuestAttempt, QuestStatus,
    StartGameRequest, VoteForProposalRequest, VoteInQuestRequest,
)

logger = logging.getLogger(__name__)

# Simulated round trip
LATENCY_S = 0.15

DEMO_USERS: Dict[str, UserDescriptor] = {
    "u1": UserDescriptor("u1", "human", "Alice"),
    "u2": UserDescriptor("u2", "human", "Bob"),
    "u3": UserDescriptor("u3", "bot"),
}


def lookup_user(user_id: str) -> Optional[UserDescriptor]:
    """Slow lookup against the demo user table."""
    time.sleep(LATENCY_S)
    return DEMO_USERS.get(user_id)


class InMemoryConnection:
    """
    Applies requests to a local PlayerState and publishes each new snapshot
    to the session. Submit methods block, so they are run off the main thread.
    """

    def __init__(self, session: SessionContext, user_id: str = "u1"):
        self.session = session
        self.user_id = user_id
        self._lock = threading.Lock()
        self._state = PlayerState()

    @property
    def state(self) -> PlayerState:
        return self._state

    def _publish(self, state: PlayerState) -> Response:
        self._state = state
        self.session.update_snapshot(GameView(summary=state, state=state))
        return Response.success()

    def create_game(self, request) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            return self._publish(PlayerState(creator=self.user_id, players=[self.user_id]))

    def join_game(self, request) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            if self.user_id in self._state.players:
                return Response.failure("already joined")
            return self._publish(dataclasses.replace(self._state, players=[*self._state.players, self.user_id]))

    def start_game(self, request: StartGameRequest) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            if self._state.status != GameStatus.Lobby:
                return Response.failure("game already started")
            players = list(request.playerOrder) or list(self._state.players)
            leader = request.leader or (players[0] if players else "")
            quest = QuestAttempt(id=1, leader=leader)
            return self._publish(dataclasses.replace(
                self._state, status=GameStatus.Proposing, players=players, quests=[quest],
            ))

    def propose_quest(self, request: ProposeQuestRequest) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            quest = self._find_quest(request.questId)
            if quest is None:
                return Response.failure(f"no quest {request.questId}")
            updated = dataclasses.replace(quest, members=list(request.proposedMembers), status=QuestStatus.Voting)
            return self._publish(self._replace_quest(updated, GameStatus.Voting))

    def vote_for_proposal(self, request: VoteForProposalRequest) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            quest = self._find_quest(request.questId)
            if quest is None:
                return Response.failure(f"no quest {request.questId}")
            if any(v.player == self.user_id for v in quest.proposalVotes):
                return Response.failure("already voted")
            votes = [*quest.proposalVotes, PlayerAndVote(self.user_id, request.vote)]
            return self._publish(self._replace_quest(dataclasses.replace(quest, proposalVotes=votes)))

    def vote_in_quest(self, request: VoteInQuestRequest) -> Response:
        time.sleep(LATENCY_S)
        with self._lock:
            quest = self._find_quest(request.questId)
            if quest is None:
                return Response.failure(f"no quest {request.questId}")
            if any(v.player == self.user_id for v in quest.results):
                return Response.failure("already voted")
            results = [*quest.results, PlayerAndVote(self.user_id, request.vote)]
            return self._publish(self._replace_quest(dataclasses.replace(quest, results=results)))

    def _find_quest(self, quest_id: int) -> Optional[QuestAttempt]:
        return next((q for q in self._state.quests if q.id == quest_id), None)

    def _replace_quest(self, quest: QuestAttempt, status: Optional[GameStatus] = None) -> PlayerState:
        quests: List[QuestAttempt] = [quest if q.id == quest.id else q for q in self._state.quests]
        changes = {"quests": quests}
        if status is not None:
            changes["status"] = status
        return dataclasses.replace(self._state, **changes)
