import logging
import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

EDGE_ROUTING = os.getenv("ASSETGRAPH_EDGE_ROUTING", "first_instance")
LOG_LEVEL = os.getenv("ASSETGRAPH_LOG_LEVEL", "INFO")
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ASSETGRAPH_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
INCLUDE_LABEL_IDS = os.getenv("ASSETGRAPH_INCLUDE_LABEL_IDS", "true").lower() in ("1", "true", "yes")


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
