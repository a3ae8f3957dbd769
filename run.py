"""Launcher: starts the SpecTree Streamlit page and opens the browser."""

import sys
import threading
import time
import webbrowser
from pathlib import Path

import requests


PORT = 8501
URL = f"http://localhost:{PORT}"


def _wait_for_server(url: str = URL, attempts: int = 30, delay: float = 1.0) -> bool:
    """Poll *url* until it answers 200. Returns False after *attempts* tries."""
    for attempt in range(1, attempts + 1):
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                return True
        except requests.RequestException:
            pass
        if attempt < attempts:
            time.sleep(delay)
    return False


def _open_browser_when_ready() -> None:
    if _wait_for_server():
        webbrowser.open(URL)


def main() -> None:
    src_dir = Path(__file__).resolve().parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    from streamlit.web import bootstrap

    app_path = str(src_dir / "SpecTree" / "app.py")

    threading.Thread(target=_open_browser_when_ready, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
