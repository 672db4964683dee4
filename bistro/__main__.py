"""Run the API with uvicorn: ``python -m bistro``."""

import uvicorn

from bistro.config import settings


def main() -> None:
    uvicorn.run(
        "bistro.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_config=None,
    )


if __name__ == "__main__":
    main()
