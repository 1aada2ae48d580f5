"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = PROJECT_ROOT / "output"
NOTIFICATIONS_PATH = Path(os.getenv("NOTIFICATIONS_PATH", str(OUTPUT_DIR / "notifications.json")))

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'resource_health.sqlite'}")

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Ensure log directory exists
LOG_DIR.mkdir(parents=True, exist_ok=True)

# OpenTelemetry
OTEL_ENABLED = os.getenv("OTEL_ENABLED", "false").lower() == "true"
OTEL_EXPORTER_OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318/v1/traces")
OTEL_SERVICE_NAME = os.getenv("OTEL_SERVICE_NAME", "resource-health")
DEPLOYMENT_ENVIRONMENT = os.getenv("DEPLOYMENT_ENVIRONMENT", "development")

# Supply runway -> health percentage (two-point linear scale, in weeks)
SUPPLY_CRITICAL_WEEKS = float(os.getenv("SUPPLY_CRITICAL_WEEKS", "0"))
SUPPLY_COMFORTABLE_WEEKS = float(os.getenv("SUPPLY_COMFORTABLE_WEEKS", "4"))

# Stock alerts fire below this runway (weeks)
LOW_STOCK_ALERT_WEEKS = float(os.getenv("LOW_STOCK_ALERT_WEEKS", "2"))

# Reorder suggestions: horizon (weeks of runway) and weeks of cover to order
REORDER_HORIZON_WEEKS = float(os.getenv("REORDER_HORIZON_WEEKS", "4"))
REORDER_BUFFER_WEEKS = float(os.getenv("REORDER_BUFFER_WEEKS", "2"))

# Health classes (percent, inclusive upper bounds)
HEALTH_CRITICAL_PERCENT = float(os.getenv("HEALTH_CRITICAL_PERCENT", "25"))
HEALTH_WARNING_PERCENT = float(os.getenv("HEALTH_WARNING_PERCENT", "60"))

# Funding risk tiers (percent remaining, exclusive upper bounds)
BUDGET_HIGH_PRIORITY_BELOW_PERCENT = float(os.getenv("BUDGET_HIGH_PRIORITY_BELOW_PERCENT", "10"))
BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT = float(os.getenv("BUDGET_MEDIUM_PRIORITY_BELOW_PERCENT", "25"))

# Low-balance warnings: default allocation threshold and throttle window
LOW_BALANCE_WARNING_PERCENT = float(os.getenv("LOW_BALANCE_WARNING_PERCENT", "25"))
LOW_BUDGET_THROTTLE_HOURS = float(os.getenv("LOW_BUDGET_THROTTLE_HOURS", "24"))

# Default currency for allocations and inventory without one
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "EUR")
