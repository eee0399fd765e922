"""Run-level pipeline: file discovery, parallel aggregation and manifest output."""

from .discovery import discover_documents
from .aggregator import Aggregator, Manifest
from .manifest_writer import render_manifest, write_manifest
from .pipeline_orchestrator import PipelineOrchestrator

__all__ = [
    'discover_documents',
    'Aggregator',
    'Manifest',
    'render_manifest',
    'write_manifest',
    'PipelineOrchestrator',
]
