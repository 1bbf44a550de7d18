import os

# --- Application ---
APP_NAME = "Ignite Timer"
WINDOW_WIDTH = 720
WINDOW_HEIGHT = 520
LOG_LEVEL = os.environ.get("IGNITE_LOG_LEVEL", "INFO")

# --- Cycle Validation ---
MIN_TASK_LENGTH = 2
MIN_CYCLE_MINUTES = 5
MAX_CYCLE_MINUTES = 60
CYCLE_MINUTES_STEP = 5 # Spin box step, not a validation rule

# --- Countdown ---
TICK_INTERVAL_MS = 1000
COUNTDOWN_SEPARATOR = ":"

# --- Form ---
TASK_SUGGESTIONS = ["Project 1", "Project 2", "Project 3", "Banana"]
TASK_PLACEHOLDER = "Give your project a name"

# --- UI Styling ---
PRIMARY_COLOR = "#00875F"   # Green
PRIMARY_HOVER_COLOR = "#015F43"
DANGER_COLOR = "#AB222E"    # Red
BG_COLOR = "#121214"
CARD_BG_COLOR = "#29292E"   # Countdown cells
TEXT_COLOR = "#E1E1E6"
MUTED_TEXT_COLOR = "#7C7C8A"
BORDER_COLOR = "#323238"

# --- Remote Notifications (ntfy) ---
NTFY_TOPIC = os.environ.get("IGNITE_NTFY_TOPIC", "")
NTFY_ENABLED = bool(NTFY_TOPIC)
NTFY_SERVER = os.environ.get("IGNITE_NTFY_SERVER", "https://ntfy.sh")
NTFY_PRIORITY_DEFAULT = 3
NTFY_PRIORITY_URGENT = 5
NTFY_TIMEOUT_SECONDS = 5
