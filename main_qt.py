"""
Project Board Qt GUI Entry Point

Launches the drag-and-drop project board.
"""
import sys
from pathlib import Path

# Add project root to path so src is importable (needed before loading .env from paths)
sys.path.insert(0, str(Path(__file__).resolve().parent))

# Load environment variables before Log reads PROJECTBOARD_* settings.
# Priority: app-local .env -> user-data .env (highest).
from dotenv import load_dotenv
from src.utils.paths import get_app_install_dir, get_user_data_dir

_install_dir = get_app_install_dir()
if _install_dir and (_install_dir / ".env").exists():
    load_dotenv(_install_dir / ".env")

_user_env = get_user_data_dir() / ".env"
if _user_env.exists():
    load_dotenv(_user_env, override=True)

from src.application.bootstrap import initialize_services
from src.utils.message import Log
from ui.qt_gui.qt_application import QtProjectBoardApp


def main() -> int:
    """Main entry point for Qt GUI"""
    Log.info("=" * 60)
    Log.info("Project Board")
    Log.info("=" * 60)

    container = None
    try:
        container = initialize_services()

        qt_app = QtProjectBoardApp()
        qt_app.initialize(container)

        exit_code = qt_app.run()

        Log.info("Shutting down...")
        qt_app.shutdown()
        Log.info("Project Board exited successfully")
        return exit_code

    except Exception as e:
        Log.error(f"Fatal error: {e}")
        if container:
            container.cleanup()
        return 1


if __name__ == "__main__":
    sys.exit(main())
