import logging
import tkinter as tk

from core.config.config_service import config_service
from core.logging.logic.log_setup import configure_logging
from clockwork import create_feature_view, get_feature_name

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    def __init__(self):
        super().__init__()

        general = config_service.general
        self.title(get_feature_name())
        self.geometry(f"{general.width}x{general.height}")

        # Display area
        self.active_view = create_feature_view(self)
        self.active_view.pack(fill="both", expand=True)
        self.active_view.focus_set()


def main():
    configure_logging(config_service.logging)
    logger.info(f"Starting {config_service.general.title}")
    app = MainWindow()
    app.mainloop()


if __name__ == "__main__":
    main()
