import uvicorn

from expense_tracker.core.config import config


def main() -> None:
    uvicorn.run(
        "expense_tracker.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
