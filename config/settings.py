"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., RENDER_TIME_SCALE env var → Settings.RENDER_TIME_SCALE)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root
- Dict fields accept JSON, e.g. EFFECT_DURATIONS_MS='{"blur": 300, ...}'

Every module imports `settings` from here instead of hardcoding values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Render simulation ───────────────────────────────────────
    # Multiplier applied to simulated render times when the worker sleeps.
    # 1.0 = real time, 0.001 = a 1000ms render takes 1ms. The recorded
    # duration_ms is always the nominal value from the duration table.
    RENDER_TIME_SCALE: float = 1.0

    # Effect → simulated render time in milliseconds
    EFFECT_DURATIONS_MS: dict[str, int] = {
        "color_grade": 800,
        "blur": 600,
        "trim": 200,
        "speed_change": 500,
        "transition": 1000,
    }

    # ── Scheduler ───────────────────────────────────────────────
    # "fifo": arrival order, priority is metadata only
    # "priority_front": high priority jobs are inserted at the head of the queue
    ORDERING_POLICY: str = "fifo"

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton: import this everywhere
settings = Settings()
