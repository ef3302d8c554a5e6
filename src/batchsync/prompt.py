"""Yes/no confirmation prompt."""

from __future__ import annotations

from typing import Callable, Optional


def _ask(question: str) -> str:
    return input(question)


def confirm(message: str, max_tries: int, *, ask: Optional[Callable[[str], str]] = None) -> bool:
    """Ask *message* until the answer is exactly ``yes`` or ``no``.

    Answers are case-sensitive and not trimmed. After *max_tries* invalid
    answers (or end of input) the result is ``False``.
    """
    ask = ask or _ask
    question = f"{message} [yes/no]: "
    retries = max_tries - 1
    while True:
        try:
            answer = ask(question)
        except EOFError:
            return False
        if answer == "yes":
            return True
        if answer == "no":
            return False
        if retries <= 0:
            return False
        retries -= 1
