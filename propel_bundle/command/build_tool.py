# ==============================================
# BuildTool
# ==============================================
#
# PURPOSE:
#   Runs the external model generator. The generator expects a
#   project directory holding the schema files and a
#   build.properties file, plus the name of the target to build:
#
#     propel-gen <project dir> om
#
# CLASS: BuildTool
# ----------------
#   - __init__(config: BuildConfig, runner=subprocess.run)
#   - prepare(workdir, schemas) -> None
#       Copy every schema under its temp name, write build.properties.
#   - call(target, schemas) -> subprocess.CompletedProcess
#       prepare() in a temporary directory, then run the generator.
#       Raises BuildError on a non-zero exit or a missing generator.
#       The generator is run once; failures are not retried.
#
# ==============================================

import shlex
import shutil
import subprocess as sp
import tempfile
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from ..config import BuildConfig


class BuildError(Exception):
    """The external generator failed."""

    def __init__(self, message: str, returncode: int = 1, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class BuildTool:
    def __init__(self, config: BuildConfig, runner: Optional[Callable[..., Any]] = None):
        self.config = config
        self.runner = runner or sp.run

    def build_properties(self) -> Dict[str, str]:
        output_dir = str(Path(self.config.output_dir).resolve())
        return {
            "propel.project": self.config.project_name,
            "propel.database": self.config.database_adapter,
            "propel.output.dir": output_dir,
            "propel.php.dir": output_dir,
            "propel.packageObjectModel": "true",
        }

    def prepare(self, workdir: Path, schemas: Dict[str, Dict[str, Any]]) -> None:
        for temp_name, details in schemas.items():
            shutil.copyfile(details["path"], workdir / temp_name)

        lines = [f"{name} = {value}" for name, value in self.build_properties().items()]
        (workdir / "build.properties").write_text("\n".join(lines) + "\n")

    def command(self, workdir: Path, target: str) -> list:
        return shlex.split(self.config.generator_command) + [str(workdir), target]

    def call(self, target: str, schemas: Dict[str, Dict[str, Any]]) -> sp.CompletedProcess:
        with tempfile.TemporaryDirectory(prefix="propel-") as tmp:
            workdir = Path(tmp)
            self.prepare(workdir, schemas)
            command = self.command(workdir, target)

            try:
                result = self.runner(command, stdout=sp.PIPE, stderr=sp.STDOUT, text=True)
            except FileNotFoundError:
                raise BuildError(f"Generator not found: {command[0]}", returncode=127) from None

            if result.returncode != 0:
                raise BuildError(
                    f'Target "{target}" failed with exit status {result.returncode}',
                    returncode=result.returncode,
                    output=result.stdout or "",
                )
            return result
