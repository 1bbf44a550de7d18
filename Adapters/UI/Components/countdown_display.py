from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt6.QtCore import Qt

from Core.Services.time_derivation import derive_display
from Infrastructure.variables import CARD_BG_COLOR, PRIMARY_COLOR, TEXT_COLOR


class CountdownDisplay(QWidget):
    """Five cells: two minute digits, separator, two second digits."""
    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        self.cells = []
        for index in range(5):
            cell = QLabel()
            cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
            if index == 2:
                cell.setStyleSheet(f"color: {PRIMARY_COLOR}; background: transparent; font-size: 80pt; font-weight: bold;")
                cell.setFixedWidth(64)
            else:
                cell.setStyleSheet(f"""
                    color: {TEXT_COLOR};
                    background-color: {CARD_BG_COLOR};
                    border-radius: 8px;
                    padding: 16px 8px;
                    font-family: "Roboto Mono";
                    font-size: 96pt;
                    font-weight: normal;
                """)
            layout.addWidget(cell)
            self.cells.append(cell)

        self.show_display(derive_display(None, 0))

    def show_display(self, display):
        for cell, text in zip(self.cells, display):
            cell.setText(text)

    def text(self):
        return "".join(cell.text() for cell in self.cells)
