from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TextIO

from .scanner import Scanner

PROMPT_FULL_NAME = "Enter Full Name: "
PROMPT_AGE = "Enter your age: "
PROMPT_SALARY = "Enter your salary: "
PROMPT_MOOD = "Are you happy today? True/False: "

SUMMARY_KIND = "inputoutput.summary.v1"


@dataclass(frozen=True)
class PersonSummary:
    full_name: str
    age: int
    salary: float
    mood: bool

    def render(self) -> str:
        """Return the summary block: a leading blank line, no trailing newline.

        ``Salary`` has no separator before its value.
        """
        mood = "true" if self.mood else "false"
        return (
            "\n"
            f"Name: {self.full_name}\n"
            f"Age: {self.age}\n"
            f"Salary{self.salary}\n"
            f"Happy?: {mood}"
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "kind": SUMMARY_KIND,
            "fullName": self.full_name,
            "age": self.age,
            "salary": self.salary,
            "happy": self.mood,
        }


def _prompt(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def collect_summary(scanner: Scanner, out: TextIO) -> PersonSummary:
    """Prompt for and read the four fields in order.

    Parse failures propagate to the caller; nothing from the summary has been
    written at that point.
    """
    _prompt(out, PROMPT_FULL_NAME)
    full_name = scanner.next_line()

    _prompt(out, PROMPT_AGE)
    age = scanner.next_int()

    _prompt(out, PROMPT_SALARY)
    salary = scanner.next_float()

    _prompt(out, PROMPT_MOOD)
    mood = scanner.next_bool()

    return PersonSummary(full_name=full_name, age=age, salary=salary, mood=mood)


def run_sequence(
    source: TextIO,
    out: TextIO,
    *,
    emit: Callable[[PersonSummary], None] | None = None,
) -> PersonSummary:
    """Run the prompt/read steps, emit the summary, then close the input.

    The input is closed on every exit path, after the summary on success.
    """
    with Scanner(source) as scanner:
        summary = collect_summary(scanner, out)
        if emit is None:
            out.write(summary.render())
            out.flush()
        else:
            emit(summary)
    return summary
