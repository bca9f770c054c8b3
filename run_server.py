import os
import sys

import uvicorn

from city_weather.config import ConfigurationError, require_api_key, settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def check_api_key() -> None:
    """
    Refuse to start without an OpenWeather API key. Controlled by:
    - CITYWEATHER_API_KEY (required)
    """
    try:
        require_api_key(settings)
    except ConfigurationError as exc:
        logger.error("Startup aborted: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    setup_logging(level=settings.log_level)
    check_api_key()

    uvicorn.run(
        "city_weather.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=False,
    )
