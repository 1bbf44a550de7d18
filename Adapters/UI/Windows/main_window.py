from PyQt6.QtWidgets import QMainWindow

from Application.app_initializer import AppInitializer
from Adapters.UI.Windows.home_view import HomeView
from Adapters.UI.Popups.cycle_end_popup import CycleEndPopup
from Infrastructure.variables import APP_NAME, WINDOW_WIDTH, WINDOW_HEIGHT, BG_COLOR, TEXT_COLOR


class MainWindow(QMainWindow):
    def __init__(self, initializer=None):
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setStyleSheet(f"""
            QMainWindow {{
                background-color: {BG_COLOR};
                color: {TEXT_COLOR};
                font-family: 'Roboto', 'Segoe UI', sans-serif;
            }}
        """)
        self.cycle_end_popup = None

        # 1. Session (Core + Application)
        self.bootstrapper = initializer if initializer else AppInitializer()
        self.orchestrator = self.bootstrapper.initialize(parent=self)

        # 2. UI
        self.home_view = HomeView(self)
        self.setCentralWidget(self.home_view)

        # 3. Wiring
        self.home_view.new_cycle_requested.connect(self.orchestrator.submit_new_cycle)
        self.orchestrator.validation_failed.connect(self.home_view.show_errors)
        self.orchestrator.cycle_started.connect(lambda _cycle: self.home_view.reset_form())
        self.orchestrator.display_changed.connect(self.on_display_changed)
        self.orchestrator.cycle_finished.connect(self.show_cycle_end)

        self.on_display_changed(self.orchestrator.current_display())

    def on_display_changed(self, display):
        self.home_view.render_display(display)
        if self.orchestrator.store.get_active_cycle() is not None:
            self.setWindowTitle(f"{display.text} - {APP_NAME}")
        else:
            self.setWindowTitle(APP_NAME)

    def show_cycle_end(self, cycle):
        self._force_to_top()
        if self.cycle_end_popup is not None:
            self.cycle_end_popup.close()
            self.cycle_end_popup.deleteLater()
        self.cycle_end_popup = CycleEndPopup(cycle, self)
        geom = self.geometry()
        x = geom.x() + (geom.width() - self.cycle_end_popup.width()) // 2
        y = geom.y() + (geom.height() - self.cycle_end_popup.height()) // 2
        self.cycle_end_popup.move(x, y)
        self.cycle_end_popup.show_on_top()

    def _force_to_top(self):
        if self.isMinimized():
            self.showNormal()
        self.raise_()
        self.activateWindow()

    def closeEvent(self, event):
        self.bootstrapper.shutdown()
        super().closeEvent(event)
