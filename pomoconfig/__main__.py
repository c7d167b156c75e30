"""Allow running PomoConfig as a module: python -m pomoconfig."""

import sys

from PyQt6.QtWidgets import QApplication

from .app import build_service
from .log import setup_logging
from .settings import APP_SUPPORT_DIR, load_settings
from .ui import ConfigDialog


def main() -> None:
    settings = load_settings()
    log_file = APP_SUPPORT_DIR / "logs" / "pomoconfig.log" if settings.log_to_file else None
    logger = setup_logging(settings.log_level, log_file)

    service = build_service(settings)
    logger.info("PomoConfig ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("PomoConfig")
    app.setOrganizationName("PomoConfig")

    dialog = ConfigDialog(service)
    dialog.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
