"""
StudyPulse - energy-aware study analytics

Tracks self-reported energy over time, learns when a student studies best,
and turns that into small, actionable suggestions.

Packages:
    learning/: sample store, pattern analysis, optimal windows, persona, metrics
    suggestions/: rule-based suggestion generation and the suggestion queue
    context/: injected environment signals and the periodic context poller

Configuration: args/studypulse.yaml (validated by config_models.py)
"""

from pathlib import Path

__version__ = "0.3.0"

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
ARGS_DIR = PROJECT_ROOT / "args"

__all__ = [
    "__version__",
    "PROJECT_ROOT",
    "ARGS_DIR",
]
