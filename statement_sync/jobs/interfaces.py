"""Typed interfaces for job-layer orchestration responsibilities."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class JobExecutionResult:
    """Result contract for one import workflow execution.

    Attributes:
        job_name: Job identifier.
        status: Final execution state (`success` or `failed`).
        transaction_count: Number of transactions read from the statement.
        uploaded_count: Number of pages created upstream.
        batch_count: Number of batches that completed.
    """

    job_name: str
    status: str
    transaction_count: int = 0
    uploaded_count: int = 0
    batch_count: int = 0


@dataclass(frozen=True)
class BatchUploadResult:
    """Result contract for one batched upload.

    Attributes:
        batch_sizes: Size of every completed batch in execution order.
    """

    batch_sizes: tuple[int, ...]

    @property
    def batch_count(self) -> int:
        return len(self.batch_sizes)

    @property
    def record_count(self) -> int:
        return sum(self.batch_sizes)


class JobOrchestratorPort(Protocol):
    """Port definition for orchestrating statement import jobs."""

    def job_supported_names(self) -> tuple[str, ...]:
        """Return the set of workflow names this orchestrator can execute.

        Returns:
            tuple[str, ...]: Deterministic list of supported job names.

        Raises:
            RuntimeError: Raised when supported job metadata is unavailable.
        """

    async def job_execute(self, job_name: str) -> JobExecutionResult:
        """Execute one named workflow in the job layer.

        Args:
            job_name: Workflow name.

        Returns:
            JobExecutionResult: Final execution status payload.

        Raises:
            ValueError: Raised when the job name is unsupported.
        """
