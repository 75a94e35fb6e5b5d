"""File eligibility, content validation, extraction and orchestration."""

from processors.amount_extractor import AmountExtractor
from processors.content_validator import ContentValidator
from processors.eligibility import EligibilityFilter
from processors.pipeline import DocumentPipeline

__all__ = ["EligibilityFilter", "ContentValidator", "AmountExtractor", "DocumentPipeline"]
