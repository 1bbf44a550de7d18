from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QSpinBox, QPushButton, QCompleter
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont

from Adapters.UI.Components.countdown_display import CountdownDisplay
from Infrastructure.variables import (
    TASK_SUGGESTIONS, TASK_PLACEHOLDER, MAX_CYCLE_MINUTES, CYCLE_MINUTES_STEP,
    BG_COLOR, TEXT_COLOR, MUTED_TEXT_COLOR, PRIMARY_COLOR, PRIMARY_HOVER_COLOR, DANGER_COLOR, BORDER_COLOR,
)


class HomeView(QWidget):
    """
    New-cycle form plus the countdown. Pure rendering: it never touches
    the store, it only emits what the user typed and draws what it's given.
    """
    new_cycle_requested = pyqtSignal(str, int) # task, minutes

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setObjectName("HomeView")
        self.setStyleSheet(f"""
            QWidget#HomeView {{
                background-color: {BG_COLOR};
            }}
            QLabel {{
                color: {TEXT_COLOR};
                font-size: 14pt;
                font-weight: bold;
            }}
            QLineEdit, QSpinBox {{
                background: transparent;
                border: none;
                border-bottom: 2px solid {BORDER_COLOR};
                color: {TEXT_COLOR};
                font-size: 14pt;
                font-weight: bold;
                padding: 0 8px;
            }}
            QLineEdit:focus, QSpinBox:focus {{
                border-bottom: 2px solid {PRIMARY_COLOR};
            }}
            QPushButton#start {{
                background-color: {PRIMARY_COLOR};
                color: {TEXT_COLOR};
                border: none;
                border-radius: 8px;
                padding: 16px;
                font-weight: bold;
            }}
            QPushButton#start:hover {{
                background-color: {PRIMARY_HOVER_COLOR};
            }}
            QPushButton#start:disabled {{
                background-color: {PRIMARY_COLOR};
                color: {MUTED_TEXT_COLOR};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.setSpacing(32)

        # --- Form ---
        form_row = QHBoxLayout()
        form_row.setSpacing(8)

        form_row.addWidget(QLabel("I will work on"))

        self.task_input = QLineEdit()
        self.task_input.setPlaceholderText(TASK_PLACEHOLDER)
        completer = QCompleter(TASK_SUGGESTIONS, self.task_input)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        self.task_input.setCompleter(completer)
        self.task_input.textChanged.connect(self.update_submit_state)
        self.task_input.returnPressed.connect(self.submit)
        form_row.addWidget(self.task_input, 1)

        form_row.addWidget(QLabel("for"))

        # 0 is reachable; the validator rejects it
        self.minutes_input = QSpinBox()
        self.minutes_input.setRange(0, MAX_CYCLE_MINUTES)
        self.minutes_input.setSingleStep(CYCLE_MINUTES_STEP)
        self.minutes_input.setSpecialValueText("00")
        self.minutes_input.setFixedWidth(80)
        form_row.addWidget(self.minutes_input)

        form_row.addWidget(QLabel("minutes."))
        layout.addLayout(form_row)

        self.lbl_error = QLabel()
        self.lbl_error.setFont(QFont("Roboto", 10))
        self.lbl_error.setStyleSheet(f"color: {DANGER_COLOR}; font-size: 10pt; font-weight: normal;")
        self.lbl_error.hide()
        layout.addWidget(self.lbl_error)

        # --- Countdown ---
        self.countdown = CountdownDisplay()
        layout.addWidget(self.countdown, 0, Qt.AlignmentFlag.AlignCenter)

        # --- Start ---
        self.btn_start = QPushButton("▶  Start")
        self.btn_start.setObjectName("start")
        self.btn_start.clicked.connect(self.submit)
        layout.addWidget(self.btn_start)

        layout.addStretch()
        self.update_submit_state()

    def can_submit(self):
        return bool(self.task_input.text())

    def update_submit_state(self):
        self.btn_start.setEnabled(self.can_submit())

    def submit(self):
        if not self.can_submit():
            return
        self.clear_errors()
        self.new_cycle_requested.emit(self.task_input.text(), self.minutes_input.value())

    def reset_form(self):
        self.task_input.clear()
        self.minutes_input.setValue(0)
        self.clear_errors()

    def show_errors(self, issues):
        # One line per field, first issue wins
        messages = {}
        for issue in issues:
            messages.setdefault(issue.field, issue.message)
        self.lbl_error.setText("\n".join(messages.values()))
        self.lbl_error.show()

    def clear_errors(self):
        self.lbl_error.clear()
        self.lbl_error.hide()

    def render_display(self, display):
        self.countdown.show_display(display)
