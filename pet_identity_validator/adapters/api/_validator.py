# pet_identity_validator/adapters/api/_validator.py

"""High-level entry points combining extraction, validation and routing"""

# Standard library imports
from datetime import date
from logging import getLogger

# Local imports
from pet_identity_validator.adapters.api._routing import RoutingAction
from pet_identity_validator.adapters.api._routing import route_verdict
from pet_identity_validator.adapters.diagnostics import format_validation_summary
from pet_identity_validator.adapters.diagnostics import format_verdict
from pet_identity_validator.application.processing.validation_engine import PetValidator
from pet_identity_validator.core.domain.attributes import ExtractedAttributes
from pet_identity_validator.core.domain.attributes import RegisteredPet
from pet_identity_validator.core.domain.verdict import ValidationVerdict
from pet_identity_validator.core.types.protocols import DocumentInput
from pet_identity_validator.core.types.protocols import PetInfoExtractor
from pet_identity_validator.infrastructure.config import ConfigLoader
from pet_identity_validator.infrastructure.config import get_config

logger = getLogger(__name__)

# Validator bound to the default configuration, built on first use
_default_validator: PetValidator | None = None


def _get_default_validator() -> PetValidator:
    global _default_validator

    if _default_validator is None:
        _default_validator = PetValidator(get_config())

    return _default_validator


def validate(
    extracted: ExtractedAttributes,
    pet: RegisteredPet,
    today: date | None = None,
    config: ConfigLoader | None = None,
) -> ValidationVerdict:
    """Validate extracted document attributes against a registered pet

    Args:
        extracted: Attributes read from the document
        pet: Pet the document is claimed to belong to
        today: Reference date for age checks, defaults to the current date
        config: Configuration loader, the process-wide default if omitted

    Returns:
        Immutable validation verdict
    """
    validator = PetValidator(config) if config is not None else _get_default_validator()
    return validator.validate(extracted, pet, today=today)


class DocumentValidator:
    """Validates uploaded documents for a pet before they are filed

    Wraps an external extraction step and the validator so the ingestion
    pipeline gets a verdict, an explanation and a routing action from one
    object.
    """

    def __init__(
        self, config: ConfigLoader | None = None, extractor: PetInfoExtractor | None = None
    ) -> None:
        """Initialize with configuration and an optional extraction step

        Args:
            config: Configuration loader
            extractor: Reads pet attributes from document bytes
        """
        self.config: ConfigLoader = config if config is not None else get_config()
        self.extractor = extractor
        self.validator = PetValidator(self.config)

    def validate(
        self, extracted: ExtractedAttributes, pet: RegisteredPet, today: date | None = None
    ) -> ValidationVerdict:
        """Validate already-extracted attributes against a pet"""
        return self.validator.validate(extracted, pet, today=today)

    def validate_document(
        self, document: DocumentInput, pet: RegisteredPet, today: date | None = None
    ) -> ValidationVerdict:
        """Extract attributes from a document and validate them against a pet

        Args:
            document: Uploaded document
            pet: Pet the document was sent for
            today: Reference date for age checks

        Returns:
            Immutable validation verdict

        Raises:
            ValueError: If no extractor was configured
        """
        if self.extractor is None:
            raise ValueError("DocumentValidator needs an extractor to validate raw documents")

        logger.info(f"Extracting pet info from {document.filename} ({document.mime_type})")
        extracted = self.extractor.extract(document)
        logger.debug(
            f"Extraction confidence for {document.filename}: {extracted.extraction_confidence}"
        )

        verdict = self.validate(extracted, pet, today=today)
        logger.info(f"{document.filename}:\n{format_validation_summary(verdict)}")
        if not verdict.is_valid:
            logger.warning(f"{document.filename}: {format_verdict(verdict)}")
        return verdict

    @staticmethod
    def explain(verdict: ValidationVerdict) -> str:
        """Human-readable explanation of a verdict"""
        return format_verdict(verdict)

    @staticmethod
    def route(verdict: ValidationVerdict) -> RoutingAction:
        """Routing action for a verdict"""
        return route_verdict(verdict)
