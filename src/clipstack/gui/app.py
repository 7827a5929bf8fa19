"""Application entry point for the clipstack tray indicator.

Launch with:
    clipstack run    (after pip install -e .)
    python -m clipstack.gui.app
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtCore import QFileSystemWatcher, QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QApplication, QSystemTrayIcon

from clipstack.bootstrap import Container
from clipstack.domain.errors import ConfigurationError
from clipstack.gui.tray_menu import TrayMenu

logger = logging.getLogger(__name__)


def _open_settings(container: Container) -> None:
    """Open the settings file in the desktop's default editor."""
    manager = container.settings_manager
    if not manager.settings_path.exists():
        try:
            manager.save(manager.load())
        except ConfigurationError as exc:
            logger.warning("%s", exc)
            return
    QDesktopServices.openUrl(QUrl.fromLocalFile(str(manager.settings_path)))


def main(config_dir: Path | None = None, data_dir: Path | None = None) -> int:
    """Create the QApplication, start the indicator, and enter the event loop."""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("clipstack")
    app.setQuitOnLastWindowClosed(False)

    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.warning("No system tray available; the history menu will not be visible.")

    container = Container(config_dir=config_dir, data_dir=data_dir)
    indicator = container.qt_indicator()

    tray = TrayMenu(
        history=indicator.history,
        settings=lambda: indicator.settings,
        on_clear=indicator.clear_history,
        on_open_settings=lambda: _open_settings(container),
        on_quit=app.quit,
    )
    indicator.attach_view(tray)

    # Settings files are replaced atomically, so watch the directory.
    settings_dir = container.settings_manager.settings_path.parent
    settings_dir.mkdir(parents=True, exist_ok=True)
    watcher = QFileSystemWatcher([str(settings_dir)])
    watcher.directoryChanged.connect(lambda _path: container.settings_manager.reload())

    app.aboutToQuit.connect(indicator.destroy)
    app.aboutToQuit.connect(tray.hide)

    indicator.start()
    tray.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
