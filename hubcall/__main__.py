from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


def run() -> None:
    # Must load before get_settings() caches the process settings
    load_dotenv(ENV_PATH)
    settings = get_settings()
    uvicorn.run(
        "hubcall.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.is_development else "info",
    )


if __name__ == "__main__":
    run()
