"""Job layer package for workflow orchestration boundaries."""

from .batch_upload import DEFAULT_UPLOAD_BATCH_SIZE, job_partition_batches, job_upload_in_batches
from .import_orchestrator import StatementImportConfig, StatementImportOrchestrator
from .interfaces import BatchUploadResult, JobExecutionResult, JobOrchestratorPort

__all__ = [
	"BatchUploadResult",
	"DEFAULT_UPLOAD_BATCH_SIZE",
	"JobExecutionResult",
	"JobOrchestratorPort",
	"StatementImportConfig",
	"StatementImportOrchestrator",
	"job_partition_batches",
	"job_upload_in_batches",
]
