import os
import queue
import re
import subprocess
import threading
import time
from typing import Dict, List, Optional, Union

from fabricweaver.shared.modules.command.errors import (
    BinaryNotFoundError,
    CommandExecutionError,
    CommandTimeoutError,
)
from fabricweaver.shared.modules.command.models.command_spec import CommandSpec
from fabricweaver.shared.modules.log.logger import get_logger

# Sentinel pushed by the output pump once the child closes its stdout
_EOF = None


class ProcessRunner:
    """
    Spawns Fabric binaries from a CommandSpec.

    Without a readiness pattern the call blocks until the process exits and
    succeeds on exit code 0. With a pattern, stdout and stderr are merged and
    streamed line by line; the call returns the live Popen as soon as a line
    matches, which is how long-running servers (CA server, configtxlator,
    orderer, peer) are considered "up".
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger("ProcessRunner")

    def run(self, spec: CommandSpec) -> Union[subprocess.CompletedProcess, subprocess.Popen]:
        self.logger.info(f"🚀 Running command: {spec.display()}")
        if spec.readiness_pattern is None:
            return self._run_to_completion(spec)
        return self._run_until_ready(spec)

    def _run_to_completion(self, spec: CommandSpec) -> subprocess.CompletedProcess:
        argv = spec.to_subprocess()
        try:
            result = subprocess.run(
                argv,
                cwd=spec.cwd,
                env=self._merge_env(spec.env),
                capture_output=True,
                text=True,
                timeout=spec.timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise self._not_found(spec, argv) from e
        except subprocess.TimeoutExpired as e:
            self.logger.error(f"❌ Command timed out after {spec.timeout}s")
            raise CommandTimeoutError(argv, spec.timeout, _decode(e.stdout) + _decode(e.stderr)) from e
        except OSError as e:
            raise CommandExecutionError(argv, exit_code=126, reason=str(e)) from e

        if result.stdout:
            self.logger.info(f"   STDOUT: {result.stdout.rstrip()}")
        if result.returncode != 0:
            self.logger.error(f"❌ Command failed with return code {result.returncode}")
            if result.stderr:
                self.logger.error(f"   STDERR: {result.stderr.rstrip()}")
            raise CommandExecutionError(argv, result.returncode, output=result.stderr or result.stdout)

        self.logger.info("✅ Command executed successfully")
        return result

    def _run_until_ready(self, spec: CommandSpec) -> subprocess.Popen:
        argv = spec.to_subprocess()
        pattern = re.compile(spec.readiness_pattern)
        try:
            process = subprocess.Popen(
                argv,
                cwd=spec.cwd,
                env=self._merge_env(spec.env),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                bufsize=1,
            )
        except FileNotFoundError as e:
            raise self._not_found(spec, argv) from e
        except OSError as e:
            raise CommandExecutionError(argv, exit_code=126, reason=str(e)) from e

        lines: "queue.Queue[Optional[str]]" = queue.Queue()
        ready = threading.Event()
        pump = threading.Thread(
            target=self._pump_output,
            args=(process, lines, ready),
            name=f"output-{os.path.basename(spec.program)}-{process.pid}",
            daemon=True,
        )
        pump.start()

        deadline = None if spec.timeout is None else time.monotonic() + spec.timeout
        seen: List[str] = []
        while True:
            remaining = None if deadline is None else max(deadline - time.monotonic(), 0)
            try:
                line = lines.get(timeout=remaining)
            except queue.Empty:
                process.kill()
                process.wait()
                self.logger.error(f"❌ Readiness marker not seen within {spec.timeout}s")
                raise CommandTimeoutError(argv, spec.timeout, "".join(seen))

            if line is _EOF:
                returncode = process.wait()
                if returncode == 0:
                    self.logger.info("✅ Process exited cleanly before the readiness marker")
                    return process
                self.logger.error(f"❌ Process exited with code {returncode}")
                raise CommandExecutionError(argv, returncode, output="".join(seen))

            seen.append(line)
            if pattern.search(line):
                ready.set()
                self.logger.info(f"✅ Readiness marker matched: {pattern.pattern}")
                return process

    def _pump_output(self, process: subprocess.Popen, lines: queue.Queue, ready: threading.Event) -> None:
        # keeps draining after readiness so the child never blocks on a full pipe
        with process.stdout:
            for line in process.stdout:
                self.logger.info(line.rstrip())
                if not ready.is_set():
                    lines.put(line)
        lines.put(_EOF)

    @staticmethod
    def _not_found(spec: CommandSpec, argv: List[str]) -> CommandExecutionError:
        # Popen reports a missing cwd with the same FileNotFoundError as a missing binary
        if spec.cwd is not None and not os.path.isdir(spec.cwd):
            return CommandExecutionError(argv, exit_code=None, reason=f"Working directory not found: {spec.cwd}")
        return BinaryNotFoundError(argv)

    @staticmethod
    def _merge_env(env: Optional[Dict[str, str]]) -> Optional[Dict[str, str]]:
        if not env:
            return None
        merged = os.environ.copy()
        merged.update(env)
        return merged


def run_command(
    command: str,
    args: Optional[List[str]] = None,
    options: Optional[Dict[str, object]] = None,
    log_match: Optional[Union[str, "re.Pattern[str]"]] = None,
    logger=None,
) -> Union[subprocess.CompletedProcess, subprocess.Popen]:
    """
    Run a binary with an argv list.

    Args:
        command: Binary name or path
        args: Arguments after the binary
        options: Spawn options, `cwd`, `env` and `timeout` are honoured
        log_match: Readiness regex (string or compiled)

    Returns:
        CompletedProcess when waiting for exit, the running Popen when a
        readiness pattern matched.
    """
    options = dict(options or {})
    if isinstance(log_match, re.Pattern):
        log_match = log_match.pattern
    spec = CommandSpec(
        program=command,
        args=list(args or []),
        cwd=options.pop("cwd", None),
        env=options.pop("env", None),
        timeout=options.pop("timeout", None),
        readiness_pattern=log_match,
    )
    if options:
        raise TypeError(f"Unsupported spawn options: {', '.join(sorted(options))}")
    return ProcessRunner(logger=logger).run(spec)


def _decode(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data
