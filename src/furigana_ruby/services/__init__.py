"""High level services that orchestrate the annotation workflow."""

from .annotator import AnnotationOptions, annotate_sentence
from .pipeline import PipelineDependencies, ProcessingPipeline

__all__ = ["AnnotationOptions", "PipelineDependencies", "ProcessingPipeline", "annotate_sentence"]
