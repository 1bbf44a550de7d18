import logging
import threading
import urllib.request

from Infrastructure.variables import NTFY_ENABLED, NTFY_TOPIC, NTFY_SERVER, NTFY_PRIORITY_DEFAULT, NTFY_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)


def _header_safe(s):
    # HTTP headers are latin-1; drop anything (emoji) that isn't
    if not s:
        return ""
    return s.encode("latin-1", "ignore").decode("latin-1")


class NtfyNotifier:
    """
    Adapter for remote notifications via ntfy.sh.
    Disabled unless a topic is configured.
    """
    @staticmethod
    def send(title, message, tags=None, priority=None):
        if not NTFY_ENABLED or not NTFY_TOPIC:
            return False

        # Fire and forget so the countdown never waits on the network
        thread = threading.Thread(
            target=NtfyNotifier._do_send,
            args=(title, message, tags, priority),
            daemon=True
        )
        thread.start()
        return True

    @staticmethod
    def build_request(title, message, tags=None, priority=None):
        url = f"{NTFY_SERVER.rstrip('/')}/{NTFY_TOPIC}"
        body = f"{title}\n\n{message}".encode("utf-8")

        req = urllib.request.Request(url, data=body, method="POST")
        req.add_header("Title", _header_safe(title))
        req.add_header("Priority", str(priority if priority is not None else NTFY_PRIORITY_DEFAULT))
        if tags:
            req.add_header("Tags", _header_safe(tags))
        return req

    @staticmethod
    def _do_send(title, message, tags, priority):
        try:
            req = NtfyNotifier.build_request(title, message, tags, priority)
            with urllib.request.urlopen(req, timeout=NTFY_TIMEOUT_SECONDS):
                pass
        except Exception as e:
            logger.warning(f"NtfyNotifier: Failed to send notification: {e}")
