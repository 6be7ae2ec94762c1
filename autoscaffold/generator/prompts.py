"""Interactive questions asked before scaffolding.

The flow is a fixed list of :class:`PromptStep` objects. Each step has a
``when`` predicate over the answers collected so far; a step whose predicate
is false is skipped and its answer stays ``None``. Prompting itself goes
through a :class:`Prompter`, so tests can script answers without a terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple

import typer
from pydantic import BaseModel
from rich.console import Console

from ..errors import OperationCancelled
from ..utils.fs import is_empty
from .catalog import TemplateGroup
from .names import is_valid_package_name, to_valid_package_name

logger = logging.getLogger(__name__)

console = Console()

Validator = Callable[[str], "bool | str"]


class ScaffoldAnswers(BaseModel):
    target_dir: str
    project_name: str
    package_name: Optional[str] = None
    template: TemplateGroup
    variant: Optional[str] = None
    overwrite: Optional[bool] = None
    package_manager: str

    @property
    def resolved_package_name(self) -> str:
        return self.package_name or self.project_name

    @property
    def template_id(self) -> str:
        return self.variant or self.template.name


class Prompter(Protocol):
    def text(self, message: str, default: str, validate: Optional[Validator] = None) -> str: ...

    def confirm(self, message: str) -> bool: ...

    def select(self, message: str, choices: Sequence[Tuple[str, Any]], initial: int = 0) -> Any: ...


class ConsolePrompter:
    """Terminal prompts; Ctrl-C or EOF on any of them cancels the flow."""

    def __init__(self, console: Console = console) -> None:
        self.console = console

    def text(self, message, default, validate=None):
        while True:
            value = self._ask(lambda: typer.prompt(message, default=default))
            result = validate(value) if validate else True
            if result is True:
                return value
            self.console.print(f"[red]{result}[/]")

    def confirm(self, message):
        return self._ask(lambda: typer.confirm(message, default=False))

    def select(self, message, choices, initial=0):
        self.console.print(f"[bold]?[/] {message}")
        for i, (title, _) in enumerate(choices, start=1):
            self.console.print(f"  {i}) {title}")
        while True:
            picked = self._ask(lambda: typer.prompt("Choice", default=initial + 1, type=int))
            if 1 <= picked <= len(choices):
                return choices[picked - 1][1]
            self.console.print(f"[red]Pick a number between 1 and {len(choices)}[/]")

    @staticmethod
    def _ask(fn):
        try:
            return fn()
        except (typer.Abort, KeyboardInterrupt, EOFError):
            raise OperationCancelled() from None


def clean_target(value: Optional[str], default: str) -> str:
    return (value or "").strip().rstrip("/") or default


def project_name_for(target_dir: str, cwd: Path) -> str:
    return Path(cwd).resolve().name if target_dir == "." else target_dir


@dataclass
class PromptStep:
    name: str
    ask: Callable[["FlowState"], Any]
    when: Callable[["FlowState"], bool] = lambda state: True


@dataclass
class FlowState:
    target_dir: str
    cwd: Path
    answers: Dict[str, Any] = field(default_factory=dict)

    @property
    def project_name(self) -> str:
        return project_name_for(self.target_dir, self.cwd)

    @property
    def target_path(self) -> Path:
        return Path(self.cwd) / self.target_dir


class FlowController:
    def __init__(
        self,
        catalog: Dict[str, TemplateGroup],
        prompter: Prompter,
        *,
        package_managers: Sequence[str] = ("npm", "yarn", "pnpm"),
        default_project: str = "default_project",
        cwd: Optional[Path] = None,
    ) -> None:
        self.catalog = catalog
        self.prompter = prompter
        self.package_managers = list(package_managers)
        self.default_project = default_project
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def steps(self, target_arg: Optional[str]) -> List[PromptStep]:
        return [
            PromptStep("project_name", self._ask_project_name, lambda s: not target_arg),
            PromptStep("overwrite", self._ask_overwrite, self._needs_overwrite),
            PromptStep("overwrite_check", self._check_overwrite, lambda s: s.answers.get("overwrite") is False),
            PromptStep(
                "package_name",
                self._ask_package_name,
                lambda s: not is_valid_package_name(s.project_name),
            ),
            PromptStep("template", self._ask_template),
            PromptStep("variant", self._ask_variant, lambda s: bool(s.answers["template"].variants)),
            PromptStep("package_manager", self._ask_package_manager),
        ]

    def run(self, target_arg: Optional[str] = None) -> ScaffoldAnswers:
        target = clean_target(target_arg, "") if target_arg else None
        state = FlowState(target_dir=target or self.default_project, cwd=self.cwd)

        for step in self.steps(target):
            if step.when(state):
                state.answers[step.name] = step.ask(state)
            else:
                state.answers[step.name] = None
            logger.debug("%s -> %r", step.name, state.answers[step.name])

        a = state.answers
        return ScaffoldAnswers(
            target_dir=state.target_dir,
            project_name=state.project_name,
            package_name=a["package_name"],
            template=a["template"],
            variant=a["variant"],
            overwrite=a["overwrite"],
            package_manager=a["package_manager"],
        )

    def _ask_project_name(self, state: FlowState) -> str:
        value = self.prompter.text("Project name:", default=self.default_project)
        state.target_dir = clean_target(value, self.default_project)
        return state.target_dir

    def _needs_overwrite(self, state: FlowState) -> bool:
        path = state.target_path
        return path.exists() and not is_empty(path)

    def _ask_overwrite(self, state: FlowState) -> bool:
        if state.target_dir == ".":
            message = "Current directory is not empty. Remove existing files and continue?"
        else:
            message = f"Target directory {state.target_dir} is not empty. Remove existing files and continue?"
        return self.prompter.confirm(message)

    def _check_overwrite(self, state: FlowState) -> None:
        raise OperationCancelled()

    def _ask_package_name(self, state: FlowState) -> str:
        return self.prompter.text(
            "Package name:",
            default=to_valid_package_name(state.project_name),
            validate=lambda name: is_valid_package_name(name) or "Invalid package.json name",
        )

    def _ask_template(self, state: FlowState) -> TemplateGroup:
        choices = [(f"[{g.color}]{g.display or g.name}[/]", g) for g in self.catalog.values()]
        return self.prompter.select("Select a template:", choices)

    def _ask_variant(self, state: FlowState) -> str:
        group: TemplateGroup = state.answers["template"]
        choices = [(f"[{v.color}]{v.display or v.name}[/]", v.name) for v in group.variants]
        return self.prompter.select("Select a variant:", choices)

    def _ask_package_manager(self, state: FlowState) -> str:
        choices = [(pm, pm) for pm in self.package_managers]
        return self.prompter.select("Select a package manager:", choices, initial=0)
