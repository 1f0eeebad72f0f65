"""Tests for Markdown rendering."""

from storydoc.extractors import extract_document
from storydoc.formatters import MarkdownFormatter, generate_markdown
from storydoc.schemas import ConfigurationInfo, DocumentData, ExportRecord


def example(name, **fields):
    return ExportRecord(export_name=name, kind="example", **fields)


def reference(text):
    return ExportRecord(export_name="API", kind="reference", reference_text=text)


def test_title_only():
    assert generate_markdown(DocumentData(), "Button") == "# Button\n\n"


def test_full_document():
    data = DocumentData(
        configuration=ConfigurationInfo(description="A button."),
        exports=(
            example("Primary", display_name="Main", description="desc", example_code="<X/>"),
            reference("## Props"),
        ),
    )
    assert generate_markdown(data, "Button") == (
        "# Button\n\n"
        "A button.\n\n"
        "## Examples\n\n"
        "### Main\n\n"
        "desc\n\n"
        "```tsx\n<X/>\n```\n\n"
        "## Props\n"
    )


def test_example_heading_falls_back_to_export_name():
    data = DocumentData(exports=(example("Secondary", example_code="<Y/>"),))
    assert generate_markdown(data, "Button") == (
        "# Button\n\n"
        "## Examples\n\n"
        "### Secondary\n\n"
        "```tsx\n<Y/>\n```\n\n"
    )


def test_absent_fields_render_nothing():
    data = DocumentData(
        configuration=ConfigurationInfo(description=None),
        exports=(example("Bare"), reference(None)),
    )
    assert generate_markdown(data, "Button") == "# Button\n\n## Examples\n\n### Bare\n\n"


def test_reference_only_has_no_examples_section():
    data = DocumentData(exports=(reference("API text"),))
    markdown = generate_markdown(data, "Button")
    assert "## Examples" not in markdown
    assert markdown == "# Button\n\nAPI text\n"


def test_reference_is_rendered_last_regardless_of_position():
    data = DocumentData(exports=(reference("Docs"), example("A", example_code="<A/>")))
    markdown = generate_markdown(data, "Button")
    assert markdown.index("### A") < markdown.index("Docs")
    assert markdown.endswith("Docs\n")


def test_only_first_reference_is_rendered():
    data = DocumentData(exports=(reference("First"), reference("Second")))
    markdown = generate_markdown(data, "Button")
    assert "First" in markdown
    assert "Second" not in markdown


def test_examples_keep_source_order():
    data = DocumentData(exports=(example("B"), example("A"), example("C")))
    markdown = generate_markdown(data, "X")
    assert markdown.index("### B") < markdown.index("### A") < markdown.index("### C")


def test_custom_heading_and_language():
    data = DocumentData(exports=(example("A", example_code="<A/>"),))
    markdown = MarkdownFormatter(examples_heading="示例", code_language="jsx").format(data, "X")
    assert "## 示例\n\n" in markdown
    assert "```jsx\n<A/>\n```" in markdown


def test_render_extracted_stories(button_stories):
    markdown = generate_markdown(extract_document(button_stories), "Button")
    assert markdown.startswith(
        "# Button\n\n"
        "A versatile button component with multiple variants and sizes.\n\n"
        "## Examples\n\n"
        "### Primary Button\n\n"
        "The primary button is used for main actions.\n\n"
        "```tsx\n"
    )
    assert "### Secondary\n\n```tsx\n<Button secondary>Secondary</Button>\n```\n\n## Props" in markdown
    assert markdown.endswith("\\`\\`\\`\n")
