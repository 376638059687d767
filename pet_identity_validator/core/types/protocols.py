# pet_identity_validator/core/types/protocols.py

"""Protocol definitions for the collaborators that sit outside the validator."""

# Standard library imports
from typing import Protocol
from typing import TYPE_CHECKING

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

if TYPE_CHECKING:
    # Local imports
    from pet_identity_validator.core.domain.attributes import ExtractedAttributes


class DocumentInput(BaseModel):
    """An uploaded document as handed over by the ingestion pipeline"""

    model_config = ConfigDict(frozen=True)

    filename: str
    mime_type: str
    content: bytes = Field(repr=False)
    email_subject: str = ""


# ============================================================================
# Extraction Protocols
# ============================================================================


class PetInfoExtractor(Protocol):
    """Protocol for the external OCR/LLM step that reads pet attributes from a document.

    Implementations return best-effort ``None`` fields instead of raising when a
    document cannot be read.
    """

    def extract(self, document: DocumentInput) -> "ExtractedAttributes": ...


__all__ = ["DocumentInput", "PetInfoExtractor"]
