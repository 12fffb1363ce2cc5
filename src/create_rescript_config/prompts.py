"""Interactive question session.

Questions are declared as plain descriptors and asked strictly in order
through click's prompt helpers. A validator returns True to accept the
answer or an error string, which click prints before asking again.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

import click

from create_rescript_config.manifest import ProjectManifest
from create_rescript_config.naming import first_error
from create_rescript_config.settings import FILE_EXTENSIONS, MODULE_TYPES

# Validator(value, answers_so_far) -> True or an error message
Validator = Callable[[str, Dict[str, Any]], Union[bool, str]]

TEXT = "text"
CHOICE = "choice"
CONFIRM = "confirm"

DEFAULT_COMMANDS = {
    "build_command": "res:build",
    "watch_command": "res:watch",
    "clean_command": "res:clean",
}


@dataclass
class Question:
    """A single question descriptor."""
    kind: str
    key: str
    message: str
    default: Any = None
    choices: List[str] = field(default_factory=list)
    validate: Optional[Validator] = None
    suffix: str = ""


@dataclass(frozen=True)
class PromptAnswers:
    """Validated, trimmed answers."""
    name: str
    src: str
    module_type: str
    file_extension: str
    add_react: bool
    build_command: str
    watch_command: str
    clean_command: str

    @classmethod
    def from_dict(cls, data: dict) -> "PromptAnswers":
        def text(key: str) -> str:
            return str(data[key]).strip()

        return cls(
            name=text("name"),
            src=text("src"),
            module_type=data["module_type"],
            file_extension=data["file_extension"],
            add_react=bool(data["add_react"]),
            build_command=text("build_command"),
            watch_command=text("watch_command"),
            clean_command=text("clean_command"),
        )


def validate_name(value: str, answers: Dict[str, Any]) -> Union[bool, str]:
    error = first_error(value)
    return error if error else True


def validate_src(value: str, answers: Dict[str, Any]) -> Union[bool, str]:
    return True if value.strip() else "Source directory cannot be empty"


def command_validator(scripts: Dict[str, str]) -> Validator:
    """Build a validator rejecting empty names and existing scripts.

    Names picked earlier in the same session are rejected too, since
    every command gets its own script entry.
    """
    def validate(value: str, answers: Dict[str, Any]) -> Union[bool, str]:
        name = value.strip()
        if value in scripts or name in scripts:
            return f'Script "{value}" already exists, please pick another'
        if not name:
            return "Command name cannot be empty"
        for key in DEFAULT_COMMANDS:
            if key in answers and answers[key].strip() == name:
                return f'Script "{name}" is already used for another command'
        return True

    return validate


def build_questions(manifest: ProjectManifest, use_yarn: bool) -> List[Question]:
    """Declare the ordered question list for a manifest."""
    prefix = "yarn" if use_yarn else "npm run"
    validate_command = command_validator(manifest.scripts)

    questions = [
        Question(TEXT, "name", "Project name",
                 default=manifest.name, validate=validate_name),
        Question(TEXT, "src", "Source directory",
                 default="src", validate=validate_src),
        Question(CHOICE, "module_type", "Module type",
                 default=MODULE_TYPES[0], choices=list(MODULE_TYPES)),
        Question(CHOICE, "file_extension", "File extension",
                 default=FILE_EXTENSIONS[0], choices=list(FILE_EXTENSIONS)),
        Question(CONFIRM, "add_react", "Add React?", default=False),
    ]

    labels = {
        "build_command": "Build command",
        "watch_command": "Watch command",
        "clean_command": "Clean command",
    }
    for key, script in DEFAULT_COMMANDS.items():
        questions.append(Question(
            TEXT,
            key,
            labels[key],
            default="" if script in manifest.scripts else script,
            validate=validate_command,
            suffix=f' e.g. "{prefix} {script}"',
        ))

    return questions


def _value_proc(question: Question, answers: Dict[str, Any]):
    def proc(value):
        value = str(value)
        result = question.validate(value, answers)
        if result is not True:
            raise click.BadParameter(result or "Invalid value")
        return value
    return proc


def ask_question(question: Question, answers: Dict[str, Any]) -> Any:
    """Ask one question, re-prompting until the validator accepts."""
    text = question.message + question.suffix

    if question.kind == CONFIRM:
        return click.confirm(text, default=bool(question.default))

    if question.kind == CHOICE:
        return click.prompt(
            text,
            type=click.Choice(question.choices),
            default=question.default,
        )

    # An empty default makes the answer mandatory
    default = question.default if question.default else None
    proc = _value_proc(question, answers) if question.validate else None
    return click.prompt(text, default=default, value_proc=proc)


def run_questions(questions: List[Question]) -> Dict[str, Any]:
    """Ask questions sequentially and collect answers by key."""
    answers: Dict[str, Any] = {}
    for question in questions:
        answers[question.key] = ask_question(question, answers)
    return answers


def ask(manifest: ProjectManifest, use_yarn: bool) -> PromptAnswers:
    """Run the full question session for a loaded manifest."""
    return PromptAnswers.from_dict(run_questions(build_questions(manifest, use_yarn)))


def confirm_proceed() -> bool:
    return click.confirm("Continue?", default=True)
