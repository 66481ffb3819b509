"""Run the API with uvicorn: ``python -m company_ledger``."""
import uvicorn

from company_ledger.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "company_ledger.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
