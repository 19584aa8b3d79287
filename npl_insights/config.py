"""
Dashboard configuration
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "")
    try:
        return int(raw) if raw.strip() else default
    except ValueError:
        return default


class Settings:
    """Settings from environment variables"""

    # Dataset location (CSV exports of the league tables)
    DATA_DIR: str = os.getenv("DATA_DIR", "data")
    MASTER_FILE: str = os.getenv("MASTER_FILE", "npl_master.csv")
    TEAM_SUMMARY_FILE: str = os.getenv("TEAM_SUMMARY_FILE", "team_performance_summary.csv")
    TOSS_IMPACT_FILE: str = os.getenv("TOSS_IMPACT_FILE", "toss_impact.csv")
    MATCH_RESULTS_FILE: str = os.getenv("MATCH_RESULTS_FILE", "match_level_results.csv")

    # Extra CORS origins (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "")

    # Leaderboards
    DEFAULT_LEADERBOARD_LIMIT: int = _int_env("DEFAULT_LEADERBOARD_LIMIT", 15)
    PARETO_TOP_N: int = _int_env("PARETO_TOP_N", 10)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
