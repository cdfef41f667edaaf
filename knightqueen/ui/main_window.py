import logging

from ..session import GameSession
from ..ui.board_widget import BoardWidget
from . import labels

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Tic Tac Toe"
STATUS_STYLES = {
    "blue": "color: #8acaff; font-weight: bold;",
    "amber": "color: #ffc46b; font-weight: bold;",
    "muted": "color: #aaa; font-weight: bold;",
}


class TicTacToeWindow(QMainWindow):
    """
    main window UI; every repaint is driven by session.state_changed
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession(parent=self)
        self.board_widget = BoardWidget(parent=self)
        self._setup_ui()
        self.session.state_changed.connect(self._on_state_changed)
        self._on_state_changed(self.session.state)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 14px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_status_bar()          # status line + turn pill
        self.main_layout.addWidget(self.status_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.session.play)

        self._create_bottom_controls()     # restart/new game
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        restart_action = QAction("Restart", self)
        restart_action.triggered.connect(self.session.restart)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.session.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (restart_action, new_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_status_bar(self):
        self.status_widget = QWidget()
        hl = QHBoxLayout(self.status_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.turn_pill = QLabel("")
        self.turn_pill.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        hl.addWidget(self.message_label); hl.addWidget(self.turn_pill)

    def _create_bottom_controls(self):
        # restart/new game buttons + game over marker
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.restart_button = QPushButton("Restart")
        self.restart_button.setAccessibleName("Restart current round")
        self.restart_button.clicked.connect(self.session.restart)
        self.new_game_button = QPushButton("New Game")
        self.new_game_button.setAccessibleName("New game with random first player")
        self.new_game_button.clicked.connect(self.session.new_game)
        self.game_over_label = QLabel("Game over")
        self.game_over_label.setStyleSheet("color: #aaa; font-weight: 600;")
        for w in (None, self.restart_button, self.new_game_button,
                  self.game_over_label, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _update_message(self, text, role):
        # set message text + style
        self.message_label.setStyleSheet(STATUS_STYLES[role])
        self.message_label.setText(text)

    @Slot(object)
    def _on_state_changed(self, state):
        '''re-read everything derived from the new state'''
        self.board_widget.set_state(state)
        self.board_widget.set_accept_clicks(not state.is_terminal)
        self._update_message(state.status_text, labels.status_color_role(state))
        # screen readers pick this up as the status line's name
        spoken = labels.announcement(state) or state.status_text
        self.message_label.setAccessibleName(spoken)
        self.turn_pill.setText(labels.current_player_label(state))
        self.turn_pill.setVisible(not state.is_terminal)
        self.game_over_label.setVisible(state.is_terminal)
        logger.debug("ui refreshed: %s", state.status_text)
