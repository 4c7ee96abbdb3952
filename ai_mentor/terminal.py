from __future__ import annotations

import argparse
import asyncio
from typing import Callable, Optional

from .config import client_base_url, configure_logging
from .conversation.store import ConversationStore
from .conversation.transport import HttpChatTransport


GREETING = "Hello! I'm your AI Mentor."
TAGLINE = "Ask me anything about AI, technology, and innovation."
SUGGESTIONS = [
    "Explain machine learning simply",
    "What are neural networks?",
    "How does AI generate images?",
    "Tell me about AI ethics",
]


class TerminalView:
    """Prints new messages and the thinking indicator as the store changes."""

    def __init__(self, write: Callable[[str], None] = print):
        self._write = write
        self._shown = 0
        self._was_pending = False

    def __call__(self, store: ConversationStore) -> None:
        messages = store.messages
        if len(messages) < self._shown:
            self._shown = 0
            self._write("(conversation cleared)")
        for msg in messages[self._shown:]:
            label = "you" if msg.role == "user" else "mentor"
            self._write(f"{label}> {msg.content}")
        self._shown = len(messages)
        if store.pending and not self._was_pending:
            self._write("mentor is thinking...")
        self._was_pending = store.pending


def intro() -> str:
    lines = [GREETING, TAGLINE, ""]
    lines += [f"  [{i}] {text}" for i, text in enumerate(SUGGESTIONS, start=1)]
    lines += ["", "Type a question, a suggestion number, /reset or /quit."]
    return "\n".join(lines)


def resolve_input(line: str) -> Optional[str]:
    """Map a typed line to the text to submit; a bare suggestion number picks that suggestion."""
    text = line.strip()
    if text.isdigit() and 1 <= int(text) <= len(SUGGESTIONS):
        return SUGGESTIONS[int(text) - 1]
    return text or None


async def run(store: ConversationStore, read_line: Callable[[], str], write: Callable[[str], None] = print) -> None:
    write(intro())
    while True:
        try:
            line = await asyncio.to_thread(read_line)
        except EOFError:
            break
        command = line.strip().lower()
        if command == "/quit":
            break
        if command == "/reset":
            store.reset()
            continue
        text = resolve_input(line)
        if text:
            await store.submit(text)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Chat with the AI Mentor from the terminal.")
    parser.add_argument("--url", default=None, help="Base URL of the AI Mentor server")
    args = parser.parse_args(argv)

    configure_logging("WARNING")
    store = ConversationStore(HttpChatTransport(args.url or client_base_url()))
    store.subscribe(TerminalView())
    try:
        asyncio.run(run(store, lambda: input("> ")))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
