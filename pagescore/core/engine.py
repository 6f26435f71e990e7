import asyncio
import json
import logging
import os
import shutil
import tempfile
from typing import Any, Dict, List, Optional

from ..audit.profiles import engine_config
from ..config import LIGHTHOUSE_LOG_LEVEL, LIGHTHOUSE_PATH
from ..errors import EngineInvocationError
from ..models.schema import DeviceProfile

log = logging.getLogger("pagescore")

STDERR_TAIL = 2000


def find_lighthouse() -> Optional[List[str]]:
    """Command prefix for the Lighthouse CLI, or None if it is not installed."""
    if LIGHTHOUSE_PATH and os.path.exists(LIGHTHOUSE_PATH):
        return [LIGHTHOUSE_PATH]
    lh = shutil.which("lighthouse")
    if lh:
        return [lh]
    npx = shutil.which("npx")
    if npx:
        return [npx, "--yes", "lighthouse"]
    return None


class LighthouseRunner:
    """Runs the Lighthouse CLI against an already running Chromium."""

    def __init__(self, command: Optional[List[str]] = None,
                 log_level: str = LIGHTHOUSE_LOG_LEVEL):
        self.command = command
        self.log_level = log_level

    def build_args(self, url: str, port: int, config_path: str) -> List[str]:
        args = [
            url,
            f"--port={port}",
            "--output=json",
            "--output-path=stdout",
            f"--config-path={config_path}",
        ]
        if self.log_level == "verbose":
            args.append("--verbose")
        elif self.log_level != "info":
            args.append("--quiet")
        return args

    async def run(self, url: str, port: int, profile: DeviceProfile) -> Dict[str, Any]:
        command = self.command or find_lighthouse()
        if not command:
            raise EngineInvocationError(
                "lighthouse CLI not found; install with `npm i -g lighthouse` "
                "or set LIGHTHOUSE_PATH"
            )

        fd, config_path = tempfile.mkstemp(prefix="lighthouse-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(engine_config(profile), f)

            try:
                proc = await asyncio.create_subprocess_exec(
                    *command, *self.build_args(url, port, config_path),
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            except OSError as e:
                raise EngineInvocationError(f"Could not start lighthouse: {e}") from e
            stdout, stderr = await proc.communicate()
        finally:
            try:
                os.unlink(config_path)
            except OSError:
                pass

        err_text = stderr.decode("utf-8", "replace").strip()
        if err_text:
            log.warning("lighthouse stderr: %s", err_text[-STDERR_TAIL:])

        if proc.returncode != 0 and not stdout.strip():
            raise EngineInvocationError(
                f"lighthouse exited with {proc.returncode}: {err_text[-STDERR_TAIL:] or 'no output'}"
            )

        return parse_report(stdout)


def parse_report(raw: bytes) -> Dict[str, Any]:
    try:
        report = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EngineInvocationError(f"Unparseable lighthouse report: {e}") from e
    if not isinstance(report, dict):
        raise EngineInvocationError(
            f"Expected a JSON object from lighthouse, got {type(report).__name__}"
        )

    runtime_error = report.get("runtimeError")
    if isinstance(runtime_error, dict) and runtime_error.get("code"):
        raise EngineInvocationError(
            f"lighthouse runtime error {runtime_error.get('code')}: {runtime_error.get('message', '')}"
        )
    return report
