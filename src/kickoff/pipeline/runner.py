"""Provisioning pipeline: the ordered steps that bootstrap a project.

Steps run strictly in order against an explicit project root path:

1. create_root          exclusive mkdir; conflict if it already exists
2. create_environment   fatal, rolls back
3. install_dependencies warning by default, fatal when strict
4. write_boilerplate    fatal, rolls back
5. commit               warning
6. publish_remote       optional, gated; never fatal
7. completion report

Fatal errors unwind the compensation stack, so an aborted run leaves
no project directory behind.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from kickoff.models.config import KickoffConfig
from kickoff.pipeline.compensation import CompensationStack, remove_tree
from kickoff.pipeline.errors import (
    ProjectConflictError,
    ProvisionError,
    ProvisionInterrupted,
    ProvisioningError,
    UsageError,
)
from kickoff.pipeline.result import ProvisionResult, StepStatus
from kickoff.providers.base import (
    EnvironmentProvider,
    RemoteHostingProvider,
    VersionControlProvider,
)
from kickoff.providers.github import INSTALL_HINT
from kickoff.providers.shell import CommandResult
from kickoff.providers.venv import activate_command
from kickoff.scaffold.boilerplate import write_boilerplate

STEP_CREATE_ROOT = "create_root"
STEP_CREATE_ENV = "create_environment"
STEP_INSTALL = "install_dependencies"
STEP_BOILERPLATE = "write_boilerplate"
STEP_COMMIT = "commit"
STEP_REMOTE = "publish_remote"

# Lines of tool output shown when a command fails
_TOOL_OUTPUT_LINES = 10


def validate_project_name(name: str | None) -> str:
    """Check that name is usable as a single directory name.

    Raises:
        UsageError: If name is empty, blank, or not a single path component.
    """
    if name is None or not name.strip():
        raise UsageError("Project name is required.")
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators) or name in (".", ".."):
        raise UsageError(
            f"Invalid project name '{name}': must be a single directory name."
        )
    return name


def _dedupe(items: list[str]) -> list[str]:
    seen: set[str] = set()
    unique: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            unique.append(item)
    return unique


class Pipeline:
    """Run the provisioning steps for one new project.

    Args:
        environment: Creates the virtual environment and installs packages.
        vcs: Initializes the repository and commits.
        remote: Creates the hosted repository and pushes.
        confirm: Asks the operator a yes/no question.
        config: Tool configuration (packages, branch, remote policy, ...).
        console: Rich console for operator-facing output.
        base_dir: Directory the project is created in. Defaults to cwd.
    """

    def __init__(
        self,
        environment: EnvironmentProvider,
        vcs: VersionControlProvider,
        remote: RemoteHostingProvider,
        confirm: Callable[[str], bool],
        config: KickoffConfig | None = None,
        console: Console | None = None,
        base_dir: Path | None = None,
    ) -> None:
        self.environment = environment
        self.vcs = vcs
        self.remote = remote
        self.confirm = confirm
        self.config = config or KickoffConfig()
        self.console = console or Console()
        self.base_dir = base_dir
        self._current_step: str | None = None

    def provision(self, project_name: str | None) -> ProvisionResult:
        """Bootstrap project_name under base_dir.

        Returns:
            ProvisionResult; its exit_code is 0 unless a fatal error
            aborted the run.
        """
        result = ProvisionResult(project_name=project_name or "")
        stack = CompensationStack()
        try:
            name = validate_project_name(project_name)
            root = (self.base_dir or Path.cwd()).resolve() / name
            result.root = root

            env_path = self._environment_path(root)

            self._create_root(root, stack, result)
            self._create_environment(env_path, result)
            self._install_dependencies(env_path, result)
            self._write_boilerplate(root, result)
            # Nothing after this point is fatal; keep the project.
            stack.discard()

            committed = self._commit(root, result)
            self._publish_remote(root, name, committed, result)
            self._report_completion(root, result)
        except ProvisionError as exc:
            self._abort(exc, stack, result)
        except KeyboardInterrupt:
            self._abort(ProvisionInterrupted(self._current_step), stack, result)
        finally:
            self._current_step = None
        return result

    # -- steps ----------------------------------------------------------

    def _environment_path(self, root: Path) -> Path:
        env_path = root / self.config.env_dir
        if root not in env_path.resolve().parents:
            raise ProvisioningError(
                f"Virtual environment directory '{self.config.env_dir}' "
                "must be inside the project directory.",
                step=STEP_CREATE_ENV,
            )
        return env_path

    def _create_root(
        self, root: Path, stack: CompensationStack, result: ProvisionResult
    ) -> None:
        self._begin(STEP_CREATE_ROOT, f"Creating project directory: {root}")
        try:
            root.mkdir()
        except FileExistsError:
            raise ProjectConflictError(root) from None
        except OSError as exc:
            raise ProvisioningError(
                f"Failed to create directory '{root}': {exc}", step=STEP_CREATE_ROOT
            ) from exc
        stack.push(f"remove {root}", remove_tree(root))
        result.record(STEP_CREATE_ROOT, StepStatus.OK, str(root))

    def _create_environment(self, env_path: Path, result: ProvisionResult) -> None:
        self._begin(STEP_CREATE_ENV, f"Setting up virtual environment ({env_path.name})")
        outcome = self.environment.create(env_path)
        if not outcome.ok:
            raise ProvisioningError(
                "Failed to create virtual environment.",
                step=STEP_CREATE_ENV,
                result=outcome,
            )
        result.record(STEP_CREATE_ENV, StepStatus.OK, str(env_path))

    def _install_dependencies(self, env_path: Path, result: ProvisionResult) -> None:
        packages = _dedupe(self.config.packages)
        if not packages:
            result.record(STEP_INSTALL, StepStatus.SKIPPED, "no packages declared")
            return

        self._begin(STEP_INSTALL, f"Installing packages ({', '.join(packages)})")
        outcome = self.environment.install(env_path, packages)
        if outcome.ok:
            result.record(STEP_INSTALL, StepStatus.OK, ", ".join(packages))
            return

        if self.config.strict_install:
            raise ProvisioningError(
                "Failed to install dependencies.", step=STEP_INSTALL, result=outcome
            )
        self._warn(
            "Failed to install dependencies. main.py will not run until you "
            f"install them manually: pip install {' '.join(packages)}",
            outcome,
        )
        result.record(STEP_INSTALL, StepStatus.WARNING, f"exit {outcome.returncode}")

    def _write_boilerplate(self, root: Path, result: ProvisionResult) -> None:
        self._begin(STEP_BOILERPLATE, "Writing boilerplate files")
        try:
            created = write_boilerplate(
                root, self.config.extra_imports, out=self.console
            )
        except OSError as exc:
            raise ProvisioningError(
                f"Failed to write boilerplate files: {exc}", step=STEP_BOILERPLATE
            ) from exc
        result.record(STEP_BOILERPLATE, StepStatus.OK, ", ".join(created))

    def _commit(self, root: Path, result: ProvisionResult) -> bool:
        self._begin(STEP_COMMIT, "Initializing Git repository")
        commands: list[tuple[str, Callable[[], CommandResult]]] = [
            ("init", lambda: self.vcs.init(root, self.config.default_branch)),
            ("stage", lambda: self.vcs.stage_all(root)),
            ("commit", lambda: self.vcs.commit(root, self.config.commit_message)),
        ]
        for label, command in commands:
            outcome = command()
            if not outcome.ok:
                self._warn(
                    f"Git {label} failed. Please check Git configuration.", outcome
                )
                result.record(STEP_COMMIT, StepStatus.WARNING, f"{label} failed")
                return False
        result.record(STEP_COMMIT, StepStatus.OK, self.config.commit_message)
        return True

    def _publish_remote(
        self, root: Path, name: str, committed: bool, result: ProvisionResult
    ) -> None:
        self._current_step = STEP_REMOTE
        remote_cfg = self.config.remote
        provider = self.remote.provider_name()

        if not committed:
            result.record(STEP_REMOTE, StepStatus.SKIPPED, "commit did not succeed")
            return
        if remote_cfg.mode == "never":
            result.record(STEP_REMOTE, StepStatus.SKIPPED, "disabled")
            return
        if not self.remote.is_available():
            self.console.print(
                f"[bold]--- {provider} CLI not found. "
                f"Skipping {provider} repository creation. ---[/bold]"
            )
            self.console.print(INSTALL_HINT)
            result.record(STEP_REMOTE, StepStatus.SKIPPED, "CLI not found")
            return
        if remote_cfg.mode == "prompt" and not self.confirm(
            f"Do you want to create a {provider} repository named '{name}'?"
        ):
            self.console.print(f"[bold]--- Skipping {provider} repository creation. ---[/bold]")
            result.record(STEP_REMOTE, StepStatus.SKIPPED, "declined")
            return

        self._begin(STEP_REMOTE, f"Creating {provider} repository")
        outcome = self.remote.create_and_push(
            root,
            name,
            remote_cfg.visibility,
            remote_cfg.render_description(name),
        )
        if outcome.ok:
            self.console.print(
                f"[green]--- {provider} repository created and initial commit "
                "pushed successfully. ---[/green]"
            )
            result.record(STEP_REMOTE, StepStatus.OK, remote_cfg.visibility)
            return

        self.console.print(
            f"[bold red]Error:[/bold red] Failed to create or push to {provider} repository."
        )
        self._tool_output(outcome)
        self.console.print(
            f"You may need to create it manually on {provider} and run:\n"
            "  git remote add origin <your-repo-url>\n"
            f"  git push -u origin {self.config.default_branch}",
            markup=False,
        )
        result.record(STEP_REMOTE, StepStatus.FAILED, f"exit {outcome.returncode}")

    def _report_completion(self, root: Path, result: ProvisionResult) -> None:
        self._current_step = None
        lines = [
            f"Project '{escape(result.project_name)}' setup complete!",
            f"Location: {escape(str(root))}",
            "",
            "To activate the virtual environment, run:",
            f"  cd {escape(root.name)}",
            f"  {escape(activate_command(self.config.env_dir))}",
            "",
            "To open this project in VS Code:",
            "  code .",
        ]
        if result.warnings:
            lines += ["", f"[yellow]Completed with {len(result.warnings)} warning(s).[/yellow]"]
        self.console.print()
        self.console.print(Panel("\n".join(lines), border_style="green", expand=False))

    # -- output helpers -------------------------------------------------

    def _begin(self, step: str, message: str) -> None:
        self._current_step = step
        self.console.print(f"[bold]--- {escape(message)} ---[/bold]")

    def _warn(self, message: str, outcome: CommandResult | None = None) -> None:
        self.console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")
        if outcome is not None:
            self._tool_output(outcome)

    def _tool_output(self, outcome: CommandResult) -> None:
        self.console.print(f"  [dim]$ {escape(outcome.command_line)}[/dim]")
        text = (outcome.stderr or outcome.stdout).strip()
        if not text:
            return
        tail = text.splitlines()[-_TOOL_OUTPUT_LINES:]
        for line in tail:
            self.console.print(f"  [dim]{escape(line)}[/dim]")

    def _abort(
        self, exc: ProvisionError, stack: CompensationStack, result: ProvisionResult
    ) -> None:
        result.error = exc
        self.console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if isinstance(exc, ProvisioningError) and exc.result is not None:
            self._tool_output(exc.result)
        if not len(stack):
            return

        failures = stack.unwind()
        for failure in failures:
            self.console.print(f"[bold yellow]Cleanup failed:[/bold yellow] {escape(failure)}")
        if not failures:
            result.rolled_back = True
            self.console.print(f"Removed partially created project '{escape(str(result.root))}'.")
