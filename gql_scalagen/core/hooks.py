"""Hooks around Scala generation.

A pre-generate hook sees the parsed schema IR before the writer runs and may
prune or rewrite it. A post-generate hook receives the rendered Scala source
and returns the text to write, e.g. to prepend a license or run scalafmt.

    runner = HookRunner()
    runner.add_pre_hook(FilterTypesHook(exclude_prefix="_"))
    runner.add_post_hook(ScalafmtHook(config_path=".scalafmt.conf"))

    ir = runner.run_pre_hooks(ir)
    source = runner.run_post_hooks("Api.scala", SchemaWriter().write(ir))
"""

import subprocess
from typing import Protocol, runtime_checkable

from .ir import IRSchema


@runtime_checkable
class PreGenerateHook(Protocol):
    """Transforms the schema IR before any Scala is written."""

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        """Return the schema the writer should render; may mutate ``ir`` in place."""
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Transforms the rendered Scala document before it is saved."""

    def post_generate(self, filename: str, content: str) -> str:
        """Return the source to save as ``filename`` (e.g. ``Api.scala``)."""
        ...


class AddHeaderHook:
    """Prepends a comment block, such as a license, to the Scala file."""

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        # exactly one blank line between header and the document
        header = self.header if self.header.endswith("\n") else self.header + "\n"
        return header + "\n" + content


class FilterTypesHook:
    """Drops schema definitions whose names fail the prefix and suffix rules.

    Applies to every definition kind. Removing an object type that a union
    still lists makes the writer raise ``UnknownTypeError``.

        FilterTypesHook(exclude_prefix="_", exclude_suffix="Internal")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, ir: IRSchema) -> IRSchema:
        ir.definitions = [d for d in ir.definitions if self._should_include(d.name)]
        return ir


class ScalafmtHook:
    """Built-in hook that formats generated code with the scalafmt CLI.

    Failures (missing binary, non-zero exit) are raised to the caller as-is.

    Example:
        hook = ScalafmtHook(config_path=".scalafmt.conf")
    """

    def __init__(self, executable: str = "scalafmt", config_path: str | None = None):
        self.executable = executable
        self.config_path = config_path

    def post_generate(self, _filename: str, content: str) -> str:
        """Pipe the content through scalafmt and return its output."""
        command = [self.executable, "--stdin", "--non-interactive"]
        if self.config_path:
            command.extend(["--config", self.config_path])
        result = subprocess.run(
            command,
            input=content,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout


class HookRunner:
    """Applies pre hooks to the IR and post hooks to each generated file, in registration order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        self.post_hooks.append(hook)

    def run_pre_hooks(self, ir: IRSchema) -> IRSchema:
        for hook in self.pre_hooks:
            ir = hook.pre_generate(ir)
        return ir

    def run_post_hooks(self, filename: str, content: str) -> str:
        # later hooks see the output of earlier ones
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
