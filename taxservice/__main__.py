"""Run the service: python -m taxservice"""
import uvicorn

from taxservice.config import settings


def main() -> None:
    uvicorn.run(
        "taxservice.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
