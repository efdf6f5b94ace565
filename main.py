import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.game_logic import GameLogic
from tictactoe.stone_logic import StoneGameLogic
from tictactoe.ui.main_window import TicTacToeWindow

logger = logging.getLogger("tictactoe")

# -----------------------------------------------------------------------------
# GAME VARIANTS
# -----------------------------------------------------------------------------

VARIANTS = {
    "classic": GameLogic,
    "stones": StoneGameLogic,   # max 3 stones per player
}

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
BASE_COLOR = QColor(35, 35, 35)
BUTTON_COLOR = QColor(66, 66, 66)
LIGHT_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Dark theme for the board window.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    for role in (QPalette.WindowText, QPalette.Text, QPalette.ButtonText,
                 QPalette.HighlightedText):
        palette.setColor(role, LIGHT_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    # greyed out menu entries / buttons
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Two-player Tic-Tac-Toe")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default="classic",
                        help="classic rules or the three-stone rule")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("starting %s variant", args.variant)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    game_logic = VARIANTS[args.variant]()
    window = TicTacToeWindow(game_logic, stone_rule=args.variant == "stones")
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
