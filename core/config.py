import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)

LOG_FILE_PATH: str = os.getenv("INVENTORY_LOG_FILE", "logs.txt")
LOGGER_NAME: str   = os.getenv("INVENTORY_LOGGER_NAME", "inventory_lookup")
