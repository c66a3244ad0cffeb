"""Demo window wiring the example schema to an in-memory connection."""

import logging
import sys

from PyQt6.QtWidgets import QApplication, QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from pyqt_stateview.core.log_utils import configure_logging
from pyqt_stateview.forms.shape_dispatcher import ShapeDispatcher
from pyqt_stateview.protocols import (
    MethodSpec, SessionContext, register_plugin_element, register_user_lookup,
)
from pyqt_stateview.shapes import shape_from_type
from pyqt_stateview.widgets.methods_panel import MethodsPanel
from pyqt_stateview.widgets.state_view import StateView
from pyqt_stateview.widgets.toast_widget import ToastWidget

from .connection import DEMO_USERS, InMemoryConnection, lookup_user
from .plugins import PlayerStatePlugin
from .schema import (
    GAME_VIEW_SHAPE, CreateGameRequest, GameView, JoinGameRequest, PlayerState, ProposeQuestRequest,
    StartGameRequest, VoteForProposalRequest, VoteInQuestRequest,
)

logger = logging.getLogger(__name__)


def build_methods(connection: InMemoryConnection):
    """One MethodSpec per request kind the connection accepts."""
    return [
        MethodSpec("joinGame", shape_from_type(JoinGameRequest), connection.join_game, JoinGameRequest),
        MethodSpec("startGame", shape_from_type(StartGameRequest), connection.start_game, StartGameRequest),
        MethodSpec("proposeQuest", shape_from_type(ProposeQuestRequest), connection.propose_quest,
                   ProposeQuestRequest),
        MethodSpec("voteForProposal", shape_from_type(VoteForProposalRequest), connection.vote_for_proposal,
                   VoteForProposalRequest),
        MethodSpec("voteInQuest", shape_from_type(VoteInQuestRequest), connection.vote_in_quest,
                   VoteInQuestRequest),
    ]


class DemoWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("pyqt-stateview demo")
        self.resize(1100, 760)

        initial = PlayerState()
        self.session = SessionContext(user=DEMO_USERS["u1"], state=GameView(summary=initial, state=initial))
        self.connection = InMemoryConnection(self.session)
        self.dispatcher = ShapeDispatcher(session=self.session)

        central = QWidget()
        layout = QVBoxLayout(central)

        toolbar = QHBoxLayout()
        self.methods_button = QPushButton("Methods")
        toolbar.addWidget(self.methods_button)
        toolbar.addStretch()
        layout.addLayout(toolbar)

        self.state_view = StateView(self.session, GAME_VIEW_SHAPE, dispatcher=self.dispatcher)
        layout.addWidget(self.state_view, 1)

        self.toasts = ToastWidget(style=self.dispatcher.style)
        layout.addWidget(self.toasts)

        create = MethodSpec("createGame", shape_from_type(CreateGameRequest), self.connection.create_game,
                            CreateGameRequest, submit_label="Create")
        self.panel = MethodsPanel([create, *build_methods(self.connection)],
                                  dispatcher=self.dispatcher, parent=self)
        self.methods_button.clicked.connect(lambda: self.panel.set_open(not self.panel.is_open))

        self.setCentralWidget(central)


def main(argv=None) -> int:
    configure_logging(logging.INFO)
    register_user_lookup(lookup_user)
    register_plugin_element("player-state-plugin", PlayerStatePlugin)

    app = QApplication(sys.argv if argv is None else argv)
    window = DemoWindow()
    window.show()
    logger.info("Demo window shown")
    return app.exec()
