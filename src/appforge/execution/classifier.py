from collections.abc import Callable
from dataclasses import dataclass, field

Predicate = Callable[[str], bool]
Responder = Callable[[str], str]


def _target(command: str) -> str:
    """First argument of a command that is not a flag."""
    for token in command.split()[1:]:
        if not token.startswith("-"):
            return token
    return ""


def _installed_packages(command: str) -> str:
    packages = command.replace("npm install", "", 1).strip()
    return f"Installed packages: {packages or 'none'}"


def starts_with(prefix: str) -> Predicate:
    return lambda command: command.startswith(prefix)


def contains(fragment: str) -> Predicate:
    return lambda command: fragment in command


def reply(message: str) -> Responder:
    return lambda command: message


DEFAULT_RULES: list[tuple[Predicate, Responder]] = [
    (starts_with("mkdir"), lambda c: f"Created directory {_target(c)}"),
    (starts_with("cd"), lambda c: f"Changed directory to {_target(c)}"),
    (contains("npm init"), reply("Initialized package.json")),
    (contains("npm install"), _installed_packages),
    (contains("create-react-app"), reply("Created React application with create-react-app")),
    (contains("create-next-app"), reply("Created Next.js application with create-next-app")),
    (contains("vue create"), reply("Created Vue application")),
    (contains("tailwindcss init"), reply("Initialized Tailwind CSS configuration")),
    (contains("tsc --init"), reply("Initialized TypeScript configuration")),
]


@dataclass
class CommandClassifier:
    """Maps a command to a human readable output line.

    Rules are tried in order and the first matching predicate answers.
    Commands no rule recognizes get a generic ``Executed: <command>``.
    """

    rules: list[tuple[Predicate, Responder]] = field(
        default_factory=lambda: list(DEFAULT_RULES)
    )

    def describe(self, command: str) -> str:
        for predicate, responder in self.rules:
            if predicate(command):
                return responder(command)
        return f"Executed: {command}"

    def add_rule(self, predicate: Predicate, responder: Responder) -> None:
        """Register a rule that takes precedence over the existing ones."""
        self.rules.insert(0, (predicate, responder))
