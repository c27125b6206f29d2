"""Score thresholds and feedback messages for line evaluation."""
from __future__ import annotations

# Re-export ACCURATE_THRESHOLD from models.feedback for convenience
from ..models.feedback import ACCURATE_THRESHOLD

# Corrections are only reported below this score
CORRECTIONS_THRESHOLD = 90

# Rendered corrections per result before truncating with TRUNCATION_MARKER
MAX_CORRECTIONS = 5
TRUNCATION_MARKER = "..."
CORRECTIONS_SEPARATOR = "; "

# (min_score, message), checked top-down
FEEDBACK_BANDS = (
    (95, "Nailed it!"),
    (80, "Good — just a few words off."),
    (60, "Getting there — you have the idea, but check the exact wording."),
    (40, "Partial — you got part of it. Take another look at the full line."),
    (0, "Not quite — try reading the line again before your next attempt."),
)

NOTHING_TO_CHECK = "Nothing to check."
NO_SPEECH = "No speech detected."

# Caller policy for the word-similarity pre-screen
PERFECT_SIMILARITY = 1.0
CONFIDENT_PASS_SIMILARITY = 0.9
