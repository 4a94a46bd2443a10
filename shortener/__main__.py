"""
Run the short link service with uvicorn.

Usage:
    python -m shortener

Host and port come from the HOST and PORT settings.
"""
import uvicorn

from shortener.config import settings
from shortener.logging_config import setup_logging

logger = setup_logging()


def main() -> None:
    logger.info(f"Server starting at http://{settings.HOST}:{settings.PORT}")
    # 單一行程：store只存在記憶體中，多個worker會各自擁有一份不同的資料
    uvicorn.run(
        "shortener.main:app",
        host=settings.HOST,
        port=settings.PORT,
        workers=1,
    )


if __name__ == "__main__":
    main()
