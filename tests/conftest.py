"""Point the database and notification file at a temp dir before the package is imported."""

import os
import sys
import tempfile
from pathlib import Path

_TMP = Path(tempfile.mkdtemp(prefix="resource_health_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP / 'test.sqlite'}"
os.environ["NOTIFICATIONS_PATH"] = str(_TMP / "notifications.json")
os.environ.setdefault("VERBOSE_LOGGING", "false")
os.environ.setdefault("OTEL_ENABLED", "false")

# Allow importing resource_health when running from project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))
