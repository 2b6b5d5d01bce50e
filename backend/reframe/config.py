# reframe journal configuration
# loads env vars for mongodb, the offline queue file and policy thresholds

import os
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# load .env from project root
load_dotenv(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # mongodb (remote store)
    MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "reframe_journal")

    # local offline queue (device-owned, survives restarts)
    OFFLINE_QUEUE_PATH: Path = Path(os.getenv("OFFLINE_QUEUE_PATH", str(Path.home() / ".reframe" / "pending_entries.json")))

    # cors
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:5173")

    # entry validation
    ENTRY_MIN_LENGTH: int = 1
    ENTRY_MAX_LENGTH: int = 10000

    # classifier only runs past this many characters (short input gives spurious matches)
    MIN_CLASSIFY_LENGTH: int = 20

    # therapist recommendation throttling
    RECOMMENDATION_COOLDOWN_DAYS: int = 7
    RECOMMENDATION_LOOKBACK: int = 10

    # how many recent entries feed the distress frequency signal
    DISTRESS_LOOKBACK: int = 10

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
