from PyQt6.QtWidgets import QDialog, QVBoxLayout, QLabel, QPushButton, QHBoxLayout, QFrame
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

from Infrastructure.variables import PRIMARY_COLOR, PRIMARY_HOVER_COLOR, BG_COLOR, MUTED_TEXT_COLOR


class CycleEndPopup(QDialog):
    def __init__(self, cycle, parent=None):
        super().__init__(parent)
        self.setWindowFlags(Qt.WindowType.FramelessWindowHint | Qt.WindowType.WindowStaysOnTopHint | Qt.WindowType.Tool)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.setStyleSheet(f"""
            QFrame#card {{
                background-color: {BG_COLOR};
                border: 2px solid {PRIMARY_COLOR};
                border-radius: 15px;
            }}
            QLabel {{
                color: #ffffff;
                font-family: 'Roboto';
                background: transparent;
            }}
            QPushButton {{
                background-color: {PRIMARY_COLOR};
                color: white;
                border: none;
                padding: 10px 24px;
                border-radius: 8px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {PRIMARY_HOVER_COLOR};
            }}
        """)

        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(0, 0, 0, 0)

        self.card = QFrame()
        self.card.setObjectName("card")
        card_layout = QVBoxLayout(self.card)
        card_layout.setContentsMargins(30, 30, 30, 30)
        card_layout.setSpacing(15)

        title = QLabel("Cycle Finished!")
        title.setFont(QFont("Roboto", 18, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addWidget(title)

        self.lbl_task = QLabel(f"{cycle.task} · {cycle.minutes_amount} min")
        self.lbl_task.setFont(QFont("Roboto", 11))
        self.lbl_task.setStyleSheet(f"color: {MUTED_TEXT_COLOR};")
        self.lbl_task.setAlignment(Qt.AlignmentFlag.AlignCenter)
        card_layout.addWidget(self.lbl_task)

        btn_row = QHBoxLayout()
        btn_row.addStretch()
        self.btn_ok = QPushButton("OK")
        self.btn_ok.clicked.connect(self.accept)
        btn_row.addWidget(self.btn_ok)
        btn_row.addStretch()
        card_layout.addLayout(btn_row)

        root_layout.addWidget(self.card)
        self.setFixedSize(400, 200)

    def show_on_top(self):
        """Force the window to the front and stay on top."""
        self.show()
        self.raise_()
        self.activateWindow()
