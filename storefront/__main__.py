"""Run the storefront with uvicorn: ``python -m storefront``."""
import uvicorn

from storefront.config import Settings
from storefront.logging import get_logger

logger = get_logger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logger.info("Server listening on http://localhost:%s", settings.port)
    uvicorn.run("api.index:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
