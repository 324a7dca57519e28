import os
from dotenv import load_dotenv

"""Configuration for the Prompt Optimizer."""

# Find the project root (where .env lives)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# History store (caller-owned key-value persistence)
HISTORY_DB_PATH = os.getenv(
    "HISTORY_DB_PATH",
    os.path.join(PROJECT_ROOT, "history.db"),
)
HISTORY_CAPACITY = int(os.getenv("HISTORY_CAPACITY", "5"))
HISTORY_KEY = os.getenv("HISTORY_KEY", "promptOptimizationResults")
USAGE_KEY = os.getenv("USAGE_KEY", "promptOptimizationUsage")

# Live analysis settle delay
ANALYSIS_DEBOUNCE_MS = int(os.getenv("ANALYSIS_DEBOUNCE_MS", "500"))

# Simulated latency for optimize requests (I/O layer only, never the engine)
OPTIMIZE_LATENCY_MS = int(os.getenv("OPTIMIZE_LATENCY_MS", "0"))

# Request defaults
DEFAULT_PLATFORM = os.getenv("DEFAULT_PLATFORM", "general")
DEFAULT_TONE = int(os.getenv("DEFAULT_TONE", "50"))
