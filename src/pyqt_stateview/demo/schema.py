"""
Example schema: a social-deduction card game.

Plain dataclasses and IntEnums; shapes are resolved from them once with
shape_from_type().
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Annotated, List, Optional

from pyqt_stateview.shapes import Plugin, Reference, shape_from_type

UserId = Annotated[str, Reference("user")]


class Role(IntEnum):
    Merlin = 0
    Percival = 1
    Loyal = 2
    Morgana = 3
    Mordred = 4
    Oberon = 5
    Assassin = 6
    Minion = 7


class Vote(IntEnum):
    Approve = 0
    Reject = 1


class QuestStatus(IntEnum):
    Proposing = 0
    Voting = 1
    Questing = 2
    Pass = 3
    Fail = 4


class GameStatus(IntEnum):
    Lobby = 0
    Proposing = 1
    Voting = 2
    Questing = 3
    Assassinating = 4
    Finished = 5


@dataclass
class RoleInfo:
    role: Role = Role.Merlin
    knownRoles: List[Role] = field(default_factory=list)
    quantity: int = 0


@dataclass
class PlayerAndVote:
    player: UserId = ""
    vote: Optional[Vote] = None


@dataclass
class QuestAttempt:
    id: int = 0
    status: QuestStatus = QuestStatus.Proposing
    roundNumber: int = 0
    attemptNumber: int = 0
    leader: UserId = ""
    members: List[UserId] = field(default_factory=list)
    proposalVotes: List[PlayerAndVote] = field(default_factory=list)
    results: List[PlayerAndVote] = field(default_factory=list)
    numFailures: int = 0


@dataclass
class PlayerState:
    status: GameStatus = GameStatus.Lobby
    rolesInfo: List[RoleInfo] = field(default_factory=list)
    creator: UserId = ""
    players: List[UserId] = field(default_factory=list)
    role: Optional[Role] = None
    knownPlayers: List[UserId] = field(default_factory=list)
    playersPerQuest: List[int] = field(default_factory=list)
    quests: List[QuestAttempt] = field(default_factory=list)


# Requests


@dataclass
class CreateGameRequest:
    pass


@dataclass
class JoinGameRequest:
    pass


@dataclass
class StartGameRequest:
    roleList: List[Role] = field(default_factory=list)
    playerOrder: List[UserId] = field(default_factory=list)
    leader: Optional[UserId] = None


@dataclass
class ProposeQuestRequest:
    questId: int = 0
    proposedMembers: List[UserId] = field(default_factory=list)


@dataclass
class VoteForProposalRequest:
    questId: int = 0
    vote: Vote = Vote.Approve


@dataclass
class VoteInQuestRequest:
    questId: int = 0
    vote: Vote = Vote.Approve


@dataclass
class GameView:
    """Root of the state view: the raw state shown through the summary plugin, then the tree."""
    summary: Annotated[PlayerState, Plugin("player-state-plugin", collapsible=True)]
    state: PlayerState


PLAYER_STATE_SHAPE = shape_from_type(PlayerState)
GAME_VIEW_SHAPE = shape_from_type(GameView)
