from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..board import BOARD_SIZE, Cell

X_COLOR = QColor("#8acaff")
O_COLOR = QColor("#ff8a8a")
WIN_FILL_COLOR = QColor(180, 230, 180, 90)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int, int)  # emits row, col on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # read-only use, never mutated here
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square board centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w-side)/2, (h-side)/2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, winning line and the stone due to be lifted
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), QColor("#333"))
            cell_size = side / BOARD_SIZE

            state = self.game_logic.state
            if state.winning_line:
                for r, c in state.winning_line:
                    painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                            cell_size, cell_size), WIN_FILL_COLOR)

            # grid lines
            painter.setPen(QPen(QColor("#555"), 2))
            for i in range(1, BOARD_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))

            fading = None
            next_eviction = getattr(self.game_logic, "next_eviction", None)
            if next_eviction and not state.is_over:
                fading = next_eviction(self.game_logic.current_player)

            board = self.game_logic.board
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    sym = board[r][c]
                    if sym is Cell.EMPTY:
                        continue
                    cx = offset_x + c*cell_size + cell_size/2
                    cy = offset_y + r*cell_size + cell_size/2
                    rad = cell_size/2 * 0.7
                    color = QColor(X_COLOR if sym is Cell.X else O_COLOR)
                    if (r, c) == fading:
                        color.setAlpha(90)
                    painter.setPen(QPen(color, 4))
                    if sym is Cell.X:
                        # two crossing lines
                        painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                        painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                    else:
                        painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / BOARD_SIZE
        if cell <= 0:
            return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE-1)); col = max(0, min(col, BOARD_SIZE-1))
        self.cell_clicked.emit(row, col)  # notify main window
