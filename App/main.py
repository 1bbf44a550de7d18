from PyQt6.QtWidgets import QApplication
import logging
import sys
import os

# Add the project root to sys.path to allow absolute imports like 'Core.Entities'
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from Infrastructure.variables import APP_NAME, LOG_LEVEL
from Adapters.UI.Windows.main_window import MainWindow

def main():
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s"
    )
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
