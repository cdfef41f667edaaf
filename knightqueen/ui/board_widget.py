from PySide6.QtWidgets import QWidget, QSizePolicy, QToolTip
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF, QEvent
from PySide6.QtGui import QPainter, QColor, QPen, QFont

from ..game_logic import BOARD_SIZE, Cell, GameState, winning_line
from . import labels

KNIGHT_GLYPH = "♞"   # black chess knight
QUEEN_GLYPH = "♛"    # black chess queen

KNIGHT_COLOR = QColor("#8acaff")
QUEEN_COLOR = QColor("#ff8a8a")
GRID_COLOR = QColor("#555")
BACKGROUND_COLOR = QColor("#333")
DISABLED_OVERLAY = QColor(0, 0, 0, 70)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the 3x3 board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8

    def __init__(self, parent=None):
        super().__init__(parent)
        self.state = GameState.reset()  # last state we were handed
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self.setMouseTracking(True)
        self.setAccessibleName("Tic Tac Toe Board")
        self._accept_clicks = True      # toggle click handling
        self._sync_accessibility()

    def set_state(self, state):
        # called on every replacement, then repaint
        self.state = state
        self._sync_accessibility()
        self.update()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def _sync_accessibility(self):
        self.setAccessibleDescription(labels.board_description(self.state))

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None if outside the grid
        """
        ox, oy, side = self._geometry()
        if not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        if cell <= 0:
            return None
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # float edges can land one past the last cell
        row = min(row, BOARD_SIZE - 1); col = min(col, BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def _cell_center(self, index, ox, oy, cell_size):
        row, col = divmod(index, BOARD_SIZE)
        return QPointF(ox + col * cell_size + cell_size / 2,
                       oy + row * cell_size + cell_size / 2)

    def paintEvent(self, event):
        """
        draw grid, knight/queen marks, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            ox, oy, side = self._geometry()
            painter.fillRect(self.rect(), BACKGROUND_COLOR)
            cell_size = side / BOARD_SIZE
            # grid lines
            painter.setPen(QPen(GRID_COLOR, 2))
            for i in range(1, BOARD_SIZE):
                x = ox + i * cell_size
                painter.drawLine(int(x), int(oy), int(x), int(oy + side))
                y = oy + i * cell_size
                painter.drawLine(int(ox), int(y), int(ox + side), int(y))
            # marks
            font = QFont("DejaVu Sans", max(1, int(cell_size * 0.45)))
            painter.setFont(font)
            for index, mark in enumerate(self.state.board):
                if mark is Cell.EMPTY:
                    continue
                center = self._cell_center(index, ox, oy, cell_size)
                rect = QRectF(center.x() - cell_size / 2, center.y() - cell_size / 2,
                              cell_size, cell_size)
                if mark is Cell.MARK_A:
                    painter.setPen(QPen(KNIGHT_COLOR, 4))
                    painter.drawText(rect, Qt.AlignCenter, KNIGHT_GLYPH)
                else:
                    painter.setPen(QPen(QUEEN_COLOR, 4))
                    painter.drawText(rect, Qt.AlignCenter, QUEEN_GLYPH)
            if self.state.is_terminal:
                line = winning_line(self.state.board)
                if line is not None:
                    color = KNIGHT_COLOR if self.state.board[line[0]] is Cell.MARK_A \
                        else QUEEN_COLOR
                    painter.setPen(QPen(color, 8, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                    painter.drawLine(self._cell_center(line[0], ox, oy, cell_size),
                                     self._cell_center(line[2], ox, oy, cell_size))
                # dim the board once the round is over
                painter.fillRect(QRectF(ox, oy, side, side), DISABLED_OVERLAY)
        finally:
            painter.end()

    def event(self, event):
        # per-cell tooltip doubles as the cell's spoken label
        if event.type() == QEvent.ToolTip:
            pos = event.pos()
            index = self.index_at(pos.x(), pos.y())
            if index is None:
                QToolTip.hideText()
            else:
                QToolTip.showText(event.globalPos(),
                                  labels.cell_label(index, self.state.board[index]), self)
            return True
        return super().event(event)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.state.is_terminal:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is None or not labels.is_cell_enabled(self.state, index):
            return
        self.cell_clicked.emit(index)  # notify main window
