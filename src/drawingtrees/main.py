"""
Application Initialization
==========================
This module wires the Store (model side) and the Main Window (view side)
together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the global Store owning the tree.
3. Instantiates the Main Window and passes the Store into it.
"""
import logging
import sys

from drawingtrees.app.application import create_app
from drawingtrees.app.state import Store
from drawingtrees.app.ui.main_window import MainWindow
from drawingtrees.logging_config import TRACE_RENDER_FLAG, setup_logging


def main() -> None:
    # 1. Setup Logging (pass --trace-render to log every render pass)
    setup_logging(level=logging.INFO, trace_render=TRACE_RENDER_FLAG in sys.argv)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    store = Store()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(store)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
