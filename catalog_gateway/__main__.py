"""Run the gateway with uvicorn: python -m catalog_gateway"""

import uvicorn

from catalog_gateway.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog_gateway.main:app", host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    main()
