"""
Run the chat relay with uvicorn: `python -m chat_relay`.
"""
import uvicorn

from .config import settings


def main():
    uvicorn.run(
        "chat_relay.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level="info",
    )


if __name__ == "__main__":
    main()
