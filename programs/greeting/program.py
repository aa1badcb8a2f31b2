"""Greeting dialogue — pure action values, no I/O.

1. Ask for the user's name and greet them.
2. Quiz "What is 2 + 2?" until the answer is exactly "4".
"""

from ioaction import Action, read_line, write_line

NAME_PROMPT = "Enter your name"
QUIZ_INTRO = "OK time for a little test..."
QUESTION = "What is 2 + 2?"
RIGHT_ANSWER = "4"
CORRECT = "That's the right answer!"


def greeting(name: str) -> str:
    return "Hello " + name + ". It's nice to meet you."


def wrong_answer(answer: str) -> str:
    return f"{answer} sorry, we're not in Orwell's novel 1984. Please try again..."


def check_answer(answer: str) -> Action:
    """Finish on the right answer; otherwise apologise and ask again."""
    if answer == RIGHT_ANSWER:
        return write_line(CORRECT)
    return write_line(wrong_answer(answer)).bind(ask)


def ask(_: str = "") -> Action:
    """Pose the question, read the answer and check it."""
    return (
        write_line(QUESTION)
        .bind(lambda _: read_line())
        .bind(check_answer)
    )


def introduce(_: str = "") -> Action:
    """Ask for a name and greet it."""
    return (
        write_line(NAME_PROMPT)
        .bind(lambda _: read_line())
        .bind(lambda name: write_line(greeting(name)))
    )


def build_main() -> Action:
    """The whole dialogue: introductions, then the quiz."""
    return (
        introduce()
        .bind(lambda _: write_line(QUIZ_INTRO))
        .bind(ask)
    )


MAIN: Action = build_main()
