# Base class for Fabric binary command builders

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from fabricweaver.shared.modules.command.enums.fabric_binary_enum import FabricBinary
from fabricweaver.shared.modules.command.errors import CommandExecutionError, InvalidCommandError
from fabricweaver.shared.modules.command.models.argument_map import ArgumentMap, ArgValue
from fabricweaver.shared.modules.command.models.command_spec import CommandSpec
from fabricweaver.shared.modules.command.models.fabric_options import FabricOptions
from fabricweaver.shared.modules.command.services.argument_serializer import map_parser
from fabricweaver.shared.modules.config.settings import WeaverSettings
from fabricweaver.shared.modules.log.logger import get_logger
from fabricweaver.shared.modules.process.process_runner import ProcessRunner


class BaseCommandBuilder(ABC):
    """
    Base class for command builders. Accumulates subcommand-scoped options
    and renders them into a single binary invocation.

    Subclasses declare:
        binary:             which Fabric executable they drive
        command_enum:       the subcommand enum
        default_command:    active subcommand on construction
        base_command:       fixed token(s) between binary and subcommand, if any
        readiness_patterns: subcommand -> regex that marks the process as up

    Every option-group setter goes through `_apply_options`, which checks the
    active subcommand once, before anything is written.
    """

    @property
    @abstractmethod
    def binary(self) -> FabricBinary:
        """Fabric executable driven by this builder."""

    @property
    @abstractmethod
    def command_enum(self) -> Type[Enum]:
        """Enum of the subcommands this builder accepts."""

    @property
    @abstractmethod
    def default_command(self) -> Enum:
        """Active subcommand on construction."""

    base_command: Optional[str] = None
    readiness_patterns: Dict[Enum, str] = {}

    def __init__(self, logger=None, runner=None, settings: Optional[WeaverSettings] = None):
        self.logger = logger or get_logger(type(self).__name__)
        self.runner = runner or ProcessRunner(logger=get_logger("ProcessRunner", self.binary.value))
        self.settings = settings or WeaverSettings.from_env()
        self.command = self.default_command
        self.args = ArgumentMap()

    # --- Subcommand state ---
    def set_command(self, command: Optional[Union[Enum, str]]):
        """Replace the active subcommand. Arguments stored for other subcommands are kept but not rendered."""
        if command is None:
            return self
        command = self._coerce_command(command)
        self.logger.debug(f"Setting command: {command.value}")
        self.command = command
        return self

    def get_command(self) -> str:
        return self.command.value

    def get_binary(self) -> str:
        return self.binary.value

    def get_base_command(self) -> Optional[str]:
        return self.base_command

    # --- Rendering ---
    def get_args(self) -> List[str]:
        """Subcommand, positionals and serialized flags, ready for spawning."""
        return [
            *self._get_command_tokens(),
            *self._get_positionals(),
            *map_parser(self.args.get(self.command)),
            *self._get_trailing_args(),
        ]

    def get_invocation(self) -> List[str]:
        """Everything after the binary: base command, subcommand and flags."""
        prefix = self.base_command.split() if self.base_command else []
        return [*prefix, *self.get_args()]

    def build(self) -> str:
        command_line = " ".join([self.get_binary(), *self.get_invocation()])
        self.logger.debug(f"Built command: {command_line}")
        return command_line

    def get_readiness_pattern(self) -> Optional[str]:
        return self.readiness_patterns.get(self.command)

    def to_command_spec(
        self,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> CommandSpec:
        return CommandSpec(
            program=self.settings.resolve_binary(self.get_binary()),
            args=self.get_invocation(),
            cwd=cwd,
            env=env,
            readiness_pattern=self.get_readiness_pattern(),
            timeout=timeout,
        )

    def execute(
        self,
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        """
        Run the built command through the process runner.

        Returns:
            CompletedProcess for commands that exit, or the running Popen for
            servers once their readiness marker is seen.

        Raises:
            CommandExecutionError: spawn failure, non-zero exit or timeout.
            The error is logged here; the caller decides the exit code.
        """
        spec = self.to_command_spec(cwd=cwd, env=env, timeout=timeout)
        try:
            return self.runner.run(spec)
        except CommandExecutionError as e:
            self.logger.error(f"Failed to execute the command: {e}")
            raise

    # --- Option plumbing ---
    def _apply_options(
        self,
        options: Optional[Union[FabricOptions, Mapping[str, Any]]],
        model_cls: Type[FabricOptions],
        *allowed: Enum,
    ):
        if options is None:
            return self
        self._assert_command(*allowed)
        if not isinstance(options, model_cls):
            options = model_cls.model_validate(options)
        for key, value in options.to_arguments().items():
            self._set_command_arg(self.command, key, value)
        return self

    def _set_option(self, key: str, value: Optional[ArgValue], *allowed: Enum):
        if value is None:
            return self
        self._assert_command(*allowed)
        self._set_command_arg(self.command, key, value)
        return self

    def _set_command_arg(self, command: Enum, key: str, value: Optional[ArgValue]) -> None:
        if value is None:
            return
        self.logger.debug(f"Setting {command.value} argument {key}: {value}")
        self.args.set(command, key, value)

    def _assert_command(self, *allowed: Enum) -> None:
        if self.command not in allowed:
            raise InvalidCommandError(self.command.value, [c.value for c in allowed])

    def _coerce_command(self, command: Union[Enum, str]) -> Enum:
        try:
            return self.command_enum(command)
        except ValueError:
            raise InvalidCommandError(
                str(getattr(command, "value", command)), [c.value for c in self.command_enum]
            ) from None

    def _get_command_tokens(self) -> List[str]:
        return [self.get_command()]

    def _get_positionals(self) -> List[str]:
        return []

    def _get_trailing_args(self) -> List[str]:
        """Flags rendered after the option map, e.g. repeated flags that cannot be comma-joined."""
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.build()})"
