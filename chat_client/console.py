"""
Terminal front end for the chat client.

Usage:
    python -m chat_client [--url http://127.0.0.1:8080]
"""
import argparse
import asyncio
import logging
import sys
from typing import Optional, TextIO

from .session import ChatSession
from .transport import RelayClient, relay_url_from_env

QUIT_COMMAND = "/quit"
PROMPT = "> "


class ConsoleView:
    """
    Session listener that prints each new turn once.

    New turns always land at the bottom of the terminal, which is all the
    scrolling a console needs.
    """

    def __init__(self, stream: TextIO = sys.stdout):
        self.stream = stream
        self._rendered = 0
        self._thinking_shown = False

    def __call__(self, session: ChatSession) -> None:
        turns = session.transcript
        for turn in turns[self._rendered:]:
            self._write(f"{turn.label}: {turn.text}")
        self._rendered = len(turns)

        if session.pending and not self._thinking_shown:
            self._write("Assistant: Thinking...")
        self._thinking_shown = session.pending

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()


async def run(url: str, stream: TextIO = sys.stdout) -> ChatSession:
    async with RelayClient(url) as relay:
        session = ChatSession(relay)
        view = ConsoleView(stream)
        session.subscribe(view)
        view(session)

        while True:
            try:
                line = await asyncio.to_thread(input, PROMPT)
            except EOFError:
                break
            if line.strip() == QUIT_COMMAND:
                break
            session.draft = line
            await session.submit()
        return session


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Chat with the relay service")
    parser.add_argument(
        "--url",
        default=relay_url_from_env(),
        help="relay base URL (default: $CHAT_RELAY_URL or http://127.0.0.1:8080)",
    )
    parser.add_argument("--verbose", action="store_true", help="log transport errors")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.ERROR,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        asyncio.run(run(args.url))
    except KeyboardInterrupt:
        pass
    return 0
