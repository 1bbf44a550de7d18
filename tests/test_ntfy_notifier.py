import logging
from unittest.mock import patch

from Adapters.External.ntfy_notifier import NtfyNotifier

MODULE = "Adapters.External.ntfy_notifier"


def test_disabled_without_topic():
    with patch(f"{MODULE}.NTFY_ENABLED", False), patch(f"{MODULE}.threading.Thread") as mock_thread:
        assert NtfyNotifier.send("Title", "Body") is False
    mock_thread.assert_not_called()


def test_enabled_sends_on_background_thread():
    with patch(f"{MODULE}.NTFY_ENABLED", True), \
            patch(f"{MODULE}.NTFY_TOPIC", "my-topic"), \
            patch(f"{MODULE}.threading.Thread") as mock_thread:
        assert NtfyNotifier.send("Title", "Body", tags="alarm_clock", priority=5) is True

    kwargs = mock_thread.call_args.kwargs
    assert kwargs["daemon"] is True
    assert kwargs["args"] == ("Title", "Body", "alarm_clock", 5)
    mock_thread.return_value.start.assert_called_once()


def test_build_request_headers():
    with patch(f"{MODULE}.NTFY_TOPIC", "my-topic"), patch(f"{MODULE}.NTFY_SERVER", "https://ntfy.example/"):
        req = NtfyNotifier.build_request("Cycle Complete! ⏱️", "Done", tags="alarm_clock")

    assert req.full_url == "https://ntfy.example/my-topic"
    assert req.get_method() == "POST"
    assert req.data == "Cycle Complete! ⏱️\n\nDone".encode("utf-8")
    assert req.get_header("Title") == "Cycle Complete! "
    assert req.get_header("Priority") == "3"
    assert req.get_header("Tags") == "alarm_clock"


def test_network_failure_is_logged(caplog):
    with patch(f"{MODULE}.NTFY_TOPIC", "my-topic"), \
            patch(f"{MODULE}.urllib.request.urlopen", side_effect=OSError("offline")), \
            caplog.at_level(logging.WARNING, logger=MODULE):
        NtfyNotifier._do_send("Title", "Body", None, None)

    assert "offline" in caplog.text


def test_malformed_server_is_logged(caplog):
    with patch(f"{MODULE}.NTFY_TOPIC", "my-topic"), \
            patch(f"{MODULE}.NTFY_SERVER", "ntfy.example"), \
            caplog.at_level(logging.WARNING, logger=MODULE):
        NtfyNotifier._do_send("Title", "Body", None, None)

    assert "unknown url type" in caplog.text
