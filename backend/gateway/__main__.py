"""Run the gateway with uvicorn: python -m gateway"""

import uvicorn

from gateway.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("gateway.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
