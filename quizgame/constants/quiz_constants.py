"""Quiz-related constants shared across the core and UI layers."""

OPTIONS_PER_QUESTION: int = 4
FALLBACK_DIFFICULTY_NAME: str = "Easy"
