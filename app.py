import logging
import os
import socket

from openspace_admin.logging_config import configure_logging
from openspace_admin.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("openspace_admin.app")

app = create_dash_app(os.getenv("OPENSPACE_ADMIN_CONFIG_ROOT", "config"))
server = app.server

PORT_SEARCH_RANGE = 100


def find_free_port(start_port: int, host: str = "0.0.0.0") -> int:
    """First port in [start_port, start_port + PORT_SEARCH_RANGE) that can be bound."""
    for port in range(start_port, start_port + PORT_SEARCH_RANGE):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
            except OSError:
                continue
            return port
    return start_port


def main() -> None:
    preferred_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(preferred_port)
    if port != preferred_port:
        logger.warning("Preferred port taken", extra={"preferred_port": preferred_port, "port": port})

    debug = os.getenv("DEBUG", "0") == "1"
    logger.info("Starting console", extra={"port": port, "debug": debug})

    # one request thread: callbacks for a session never interleave
    app.run(host="0.0.0.0", port=port, debug=debug, threaded=False)


if __name__ == "__main__":
    main()
