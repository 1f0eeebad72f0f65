"""
Pydantic schemas for storydoc.

All models produced by the extraction engine are frozen: a DocumentData is
built once per stories file and never mutated afterwards.

Architecture:
- ConfigurationInfo: Component description from the `meta` block
- ExportRecord: One story export (example or API reference)
- DocumentData: Complete extraction result for a stories file
- ComponentResult: Outcome of generating one component's Markdown
- GenerationSummary: Outcome of a batch run
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal, Tuple


REFERENCE_EXPORT_NAME = "API"


# ============================================================================
# EXTRACTION SCHEMAS
# ============================================================================

class ConfigurationInfo(BaseModel):
    """Component-level information taken from the `meta` configuration block."""
    description: Optional[str] = Field(
        None,
        description="Long-quoted text following the component: key"
    )

    model_config = ConfigDict(frozen=True)


class ExportRecord(BaseModel):
    """
    One recognized story export.

    Exports named exactly "API" are reference records carrying the API
    documentation text; every other export is an example record.
    """
    export_name: str = Field(description="Bound name of the export in the source")
    kind: Literal["example", "reference"] = Field(description="Record type")

    # Example fields
    display_name: Optional[str] = Field(None, description="Value of the name: field")
    description: Optional[str] = Field(None, description="Value of the story: field")
    example_code: Optional[str] = Field(
        None,
        description="Markup returned by the story's render logic"
    )

    # Reference fields
    reference_text: Optional[str] = Field(
        None,
        description="Long-quoted API documentation body"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "export_name": "Primary",
                "kind": "example",
                "display_name": "Primary Button",
                "description": "The primary button is used for main actions.",
                "example_code": "<Button primary>Click me</Button>",
                "reference_text": None
            }
        },
    )

    @property
    def is_reference(self) -> bool:
        return self.kind == "reference"


class DocumentData(BaseModel):
    """Complete extraction result for one stories file."""
    configuration: Optional[ConfigurationInfo] = Field(
        None,
        description="Present only when a meta block with a component description was found"
    )
    exports: Tuple[ExportRecord, ...] = Field(
        default_factory=tuple,
        description="Story exports in source order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def examples(self) -> List[ExportRecord]:
        """Example records in source order."""
        return [record for record in self.exports if not record.is_reference]

    @property
    def reference(self) -> Optional[ExportRecord]:
        """First reference record, if any."""
        for record in self.exports:
            if record.is_reference:
                return record
        return None


# ============================================================================
# GENERATION OUTPUT SCHEMAS
# ============================================================================

class ComponentResult(BaseModel):
    """Outcome of generating documentation for one component."""
    component_name: str = Field(description="Component (package directory) name")
    success: bool = Field(description="Whether the Markdown file was written")
    stories_path: str = Field(description="Path of the stories file")
    output_path: Optional[str] = Field(None, description="Path of the written Markdown file")
    error: Optional[str] = Field(None, description="Error message when generation failed")

    # Statistics
    total_exports: int = Field(default=0, description="Number of story exports found")
    total_examples: int = Field(default=0, description="Number of example records")
    has_description: bool = Field(default=False, description="Component description found")
    has_reference: bool = Field(default=False, description="API reference text found")


class GenerationSummary(BaseModel):
    """Outcome of a batch generation run."""
    timestamp: str = Field(description="ISO timestamp of the run")
    results: List[ComponentResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> List[ComponentResult]:
        return [result for result in self.results if result.success]

    @property
    def failed(self) -> List[ComponentResult]:
        return [result for result in self.results if not result.success]
