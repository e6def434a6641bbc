import subprocess
import sys
from pathlib import Path

from podium.backend.app.core.config import settings


def run():
    pkg_dir = Path(__file__).resolve().parent
    main_path = pkg_dir / "main.py"
    if not main_path.exists():
        raise FileNotFoundError(f"No main.py found in {main_path}")

    api_cmd = [
        sys.executable,
        "-m", "uvicorn",
        "podium.backend.app.main:app",
        "--host", settings.API_HOST,
        "--port", str(settings.API_PORT),
        "--log-level", settings.LOG_LEVEL.lower(),
    ]

    print(f"Starting API on http://localhost:{settings.API_PORT}")
    api_proc = subprocess.Popen(api_cmd)
    return api_proc
