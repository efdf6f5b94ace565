import logging

from ..game_logic import IllegalMove, RoundStatus
from .board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont, QKeySequence
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

STONE_RULE_HINT = "(max 3 stones, your oldest one is removed when needed)"


class TicTacToeWindow(QMainWindow):
    """
    main window: renders the game logic, owns no rules
    """
    def __init__(self, game_logic, stone_rule=False):
        """
        init ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic
        self.stone_rule = stone_rule
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.game_logic.title)
        self.setMinimumSize(380, 480 if self.stone_rule else 460)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_actions()
        self._create_menu_bar()            # top menu
        self._create_info_labels()         # status + score
        self.main_layout.addWidget(self.info_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_actions(self):
        '''shared by menu and buttons, shortcuts work window-wide'''
        self.new_action = QAction("New", self)
        self.new_action.setShortcut(QKeySequence(Qt.Key_N))
        self.new_action.triggered.connect(self.new_round)
        self.reset_action = QAction("Reset scores", self)
        self.reset_action.setShortcut(QKeySequence(Qt.Key_R))
        self.reset_action.triggered.connect(self.reset_scores)
        self.quit_action = QAction("Quit", self)
        self.quit_action.setShortcut(QKeySequence(Qt.Key_Escape))
        self.quit_action.triggered.connect(self.close)
        for act in (self.new_action, self.reset_action, self.quit_action):
            self.addAction(act)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        for act in (self.new_action, self.reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(self.quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_info_labels(self):
        self.info_widget = QWidget()
        vl = QVBoxLayout(self.info_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); f.setBold(True); self.message_label.setFont(f)
        self.message_label.setWordWrap(True)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.score_label = QLabel("")
        self.score_label.setStyleSheet("color: #eee;")
        vl.addWidget(self.message_label); vl.addWidget(self.score_label)

    def _create_bottom_controls(self):
        # new / reset / quit buttons, right aligned
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.new_button = QPushButton("New (N)"); self.new_button.clicked.connect(self.new_round)
        self.reset_button = QPushButton("Reset scores (R)"); self.reset_button.clicked.connect(self.reset_scores)
        self.quit_button = QPushButton("Quit (Esc)"); self.quit_button.clicked.connect(self.close)
        hl.addStretch(1)
        for w in (self.new_button, self.reset_button, self.quit_button):
            hl.addWidget(w)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success:   style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # redraw everything from the game logic queries
        state = self.game_logic.state
        if state.status is RoundStatus.WON:
            self._update_message(f"player {state.winner.value} wins! press N for a new round", is_success=True)
        elif state.status is RoundStatus.DRAWN:
            self._update_message("it's a draw! press N for a new round", is_success=True)
        else:
            text = f"player {self.game_logic.current_player.value}'s turn"
            if self.stone_rule:
                text += f"  {STONE_RULE_HINT}"
            self._update_message(text, is_turn=True)
        s = self.game_logic.scores
        self.score_label.setText(f"X: {s.x_wins}   O: {s.o_wins}   Draws: {s.draws}")
        self.board_widget.set_accept_clicks(not state.is_over)
        self.board_widget.update()

    @Slot(int, int)
    def _on_cell_clicked(self, r, c):
        try:
            self.game_logic.attempt_move(r, c)
        except IllegalMove as e:
            # nothing changed, just ignore the click
            logger.debug("ignored click: %s", e)
            return
        self._refresh()

    @Slot()
    def new_round(self):
        self.game_logic.new_round()
        self._refresh()

    @Slot()
    def reset_scores(self):
        self.game_logic.reset_scores()
        self._refresh()
