"""
Application Initialization
==========================
This module wires up logging, the Qt application and the gallery window, and
starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging for the 'climatechart' namespace.
2. Resolves the data file (command line argument, environment, bundled CSV).
3. Instantiates the Gallery Window (View) with that data file.
"""
import logging
import sys
from typing import Optional

from climatechart.app.application import create_app
from climatechart.config import resolve_data_path
from climatechart.logging_config import setup_logging
from climatechart.view.gallery import GalleryWindow


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv if argv is None else argv

    # 1. Setup Logging (Console + Optional File)
    # Use logging.DEBUG to see per-frame diagnostics
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Gallery Window with the data file
    data_path = resolve_data_path(argv)
    window = GalleryWindow(data_path=data_path)
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
