"""Retention run coordinator."""

import logging
from typing import Optional

from .classifier import RetentionClassifier
from .events import EventSink, LoggingEventSink
from .executor import ExecutionEngine
from .metadata import MetadataLoader
from .models import PipelineState, RunResult
from .store import Clock, FileStore, LocalFileStore, SystemClock
from ..config.config_manager import RetentionConfig
from ..errors import AuditLogError, MetadataError
from ..reporters.audit_logger import AuditLogger


class RetentionPipeline:
    """Loads backup metadata, applies the retention policy and writes audit logs.

    The run moves strictly forward through ``PipelineState``. Unreadable
    metadata or an unwritable log ends it in ``ABORTED``; per-item failures
    while deleting or copying never do.
    """

    def __init__(self, config: RetentionConfig, store: Optional[FileStore] = None,
                 clock: Optional[Clock] = None, events: Optional[EventSink] = None,
                 loader: Optional[MetadataLoader] = None, audit_logger: Optional[AuditLogger] = None):
        """Initialize retention pipeline.

        Args:
            config: Paths and retention window for the run.
            store: File store; defaults to the configured local directories.
            clock: Reference time source; defaults to the system clock.
            events: Sink for per-artifact events; defaults to the log.
            loader: Metadata source; defaults to the configured JSON file.
            audit_logger: Audit log writer.
        """
        self.config = config
        self.store = store or LocalFileStore(config.source_dir, config.destination_dir)
        self.clock = clock or SystemClock()
        self.events = events or LoggingEventSink()
        self.loader = loader or MetadataLoader(config.metadata_file)
        self.audit_logger = audit_logger or AuditLogger()
        self.classifier = RetentionClassifier(config.retention_days)
        self.state = PipelineState.START
        self.logger = logging.getLogger(__name__)

    def run(self) -> RunResult:
        """Run the pipeline to completion.

        Returns:
            RunResult in state DONE, or ABORTED with the fatal error attached.
        """
        result = RunResult(state=PipelineState.START)
        self._enter(PipelineState.START)
        self.logger.info("Starting retention run")

        try:
            self.store.ensure_locations()
        except OSError as e:
            # Store operations below report their own failures per artifact
            self.logger.warning(f"Could not create storage locations: {e}")

        try:
            self._enter(PipelineState.LOAD_METADATA)
            result.records = self.loader.load()

            self._enter(PipelineState.LOG_FULL_SET)
            self.audit_logger.write_log(result.records, self.config.full_log)

            self._enter(PipelineState.CLASSIFY)
            result.classification = self.classifier.classify(result.records, self.clock.now())

            engine = ExecutionEngine(self.store, self.events)
            self._enter(PipelineState.DELETE_PHASE)
            result.execution = engine.execute_deletions(result.classification)
            self._enter(PipelineState.COPY_PHASE)
            engine.execute_copies(result.classification, result.execution)

            # Records the copy plan, including items whose copy failed
            self._enter(PipelineState.LOG_COPIED_SET)
            self.audit_logger.write_log(result.classification.to_copy, self.config.copied_log)

        except (MetadataError, AuditLogError) as e:
            result.failed_stage = self.state
            result.error = e
            result.state = self._enter(PipelineState.ABORTED)
            self.logger.error(f"Retention run aborted during {result.failed_stage.value}: {e}")
            return result

        result.state = self._enter(PipelineState.DONE)
        self.logger.info("Retention run completed")
        return result

    def _enter(self, state: PipelineState) -> PipelineState:
        self.state = state
        self.logger.debug(f"Pipeline state: {state.value}")
        return state
