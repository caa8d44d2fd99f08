import logging
import subprocess
from typing import Protocol

from docker.errors import DockerException  # type: ignore
from requests.exceptions import Timeout

from app.core.config import settings
from app.services.docker import exec_in_container
from app.services.status.errors import DumpCommandError

logger = logging.getLogger(__name__)


class DumpCommand(Protocol):
    def execute_dump(self) -> str: ...


class LocalDumpCommand:
    """`wg show all dump` на этой машине."""

    def __init__(self, wg_bin: str = "wg", timeout: int = 10):
        self.wg_bin = wg_bin
        self.timeout = timeout

    @property
    def args(self) -> list[str]:
        return [self.wg_bin, "show", "all", "dump"]

    def execute_dump(self) -> str:
        logger.debug("CMD: %s", " ".join(self.args))
        try:
            result = subprocess.run(
                self.args,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            logger.error("wg binary not found: %s", self.wg_bin)
            raise DumpCommandError(f"{self.wg_bin} not found") from e
        except subprocess.TimeoutExpired as e:
            logger.error("wg dump timed out after %ss", self.timeout)
            raise DumpCommandError(f"{self.wg_bin} timed out after {self.timeout}s") from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.error("wg dump failed: exit code %s, stderr: %s", e.returncode, stderr)
            raise DumpCommandError(stderr or f"{self.wg_bin} exited with code {e.returncode}") from e
        except UnicodeDecodeError as e:
            logger.error("wg dump is not valid UTF-8: %s", e)
            raise DumpCommandError(f"{self.wg_bin} output is not valid UTF-8: {e}") from e

        return result.stdout


class DockerDumpCommand:
    """`wg show all dump` внутри контейнера (AmneziaWG и т.п.)."""

    def __init__(self, container: str, wg_bin: str = "wg", timeout: int = 10):
        self.container = container
        self.wg_bin = wg_bin
        self.timeout = timeout

    def execute_dump(self) -> str:
        logger.debug("CMD (%s): %s show all dump", self.container, self.wg_bin)
        try:
            return exec_in_container(
                self.container,
                [self.wg_bin, "show", "all", "dump"],
                timeout=self.timeout,
            )
        except Timeout as e:
            logger.error("wg dump in %s timed out after %ss", self.container, self.timeout)
            raise DumpCommandError(
                f"{self.wg_bin} in {self.container} timed out after {self.timeout}s"
            ) from e
        except DockerException as e:
            logger.error("docker error in %s: %s", self.container, e)
            raise DumpCommandError(f"docker: {e}") from e
        except UnicodeDecodeError as e:
            logger.error("wg dump in %s is not valid UTF-8: %s", self.container, e)
            raise DumpCommandError(f"{self.wg_bin} output is not valid UTF-8: {e}") from e
        except RuntimeError as e:
            logger.error("wg dump failed in %s: %s", self.container, e)
            raise DumpCommandError(str(e) or f"{self.wg_bin} failed in {self.container}") from e


def get_dump_command() -> DumpCommand:
    if settings.DOCKER_CONTAINER:
        return DockerDumpCommand(settings.DOCKER_CONTAINER, settings.WG_BIN, settings.WG_DUMP_TIMEOUT)
    return LocalDumpCommand(settings.WG_BIN, settings.WG_DUMP_TIMEOUT)
