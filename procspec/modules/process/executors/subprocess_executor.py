import subprocess

from procspec.modules.process.exceptions import ProcessExecutionError, ProcessTimeoutError
from procspec.modules.process.executors.process_executor import ProcessExecutor
from procspec.modules.process.models.command_spec import CommandSpec
from procspec.modules.process.models.process_result import ProcessResult
from procspec.modules.process.process_utils import input_to_bytes


class SubprocessExecutor(ProcessExecutor):
    """
    Runs a CommandSpec with subprocess.run, without a shell.

    The spec's options are forwarded as keyword arguments to subprocess.run,
    e.g. `start_new_session=True`.
    """

    @property
    def supports_environment_inheritance(self) -> bool:
        return True

    @property
    def supports_output_disable(self) -> bool:
        return True

    def _run(self, spec: CommandSpec) -> ProcessResult:
        self.logger.info(f"🚀 Executing: {spec.command_line}")

        output = subprocess.DEVNULL if spec.output_disabled else subprocess.PIPE
        try:
            result = subprocess.run(
                spec.to_subprocess(),
                input=input_to_bytes(spec.input),
                stdout=output,
                stderr=output,
                cwd=spec.cwd,
                env=spec.resolve_environment(),
                timeout=spec.timeout,
                check=False,
                **spec.options,
            )
        except subprocess.TimeoutExpired:
            self.logger.error(f"❌ Command timed out after {spec.timeout}s: {spec.command_line}")
            raise ProcessTimeoutError(
                f"Command timed out after {spec.timeout} seconds: {spec.command_line}", spec.timeout
            ) from None
        except OSError as e:
            self.logger.error(f"❌ Failed to start command: {e}")
            raise ProcessExecutionError(f"Failed to start command {spec.command_line}: {e}") from e

        if result.returncode != 0:
            self.logger.error(f"❌ Command failed with return code {result.returncode}")
        else:
            self.logger.info("✅ Command executed successfully")

        return ProcessResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
