"""Tests for brace-balanced body capture."""

from storydoc.extractors.balancer import BraceBalancer, brace_delta


def test_captures_through_closing_line():
    lines = [
        "export const Primary: Story = {",
        "  args: {",
        "    size: 'small',",
        "  },",
        "};",
        "export const Next: Story = {",
    ]
    capture = BraceBalancer().capture(lines, 1)
    assert capture.text == "\n".join(lines[1:5])
    assert capture.lines_consumed == 5


def test_lines_consumed_counts_header():
    lines = ["header {", "};"]
    capture = BraceBalancer().capture(lines, 1)
    assert capture.text == "};"
    assert capture.lines_consumed == 2


def test_unterminated_nest_runs_to_end_of_file():
    lines = ["header {", "  render: () => {", "    return <X/>;"]
    capture = BraceBalancer().capture(lines, 1)
    assert capture.text == "  render: () => {\n    return <X/>;"
    assert capture.lines_consumed == 3


def test_start_past_end_captures_nothing():
    capture = BraceBalancer().capture(["header {"], 1)
    assert capture.text == ""
    assert capture.lines_consumed == 1


def test_braces_in_strings_are_counted():
    lines = ["header {", "  label: '}',", "  size: 'small',", "};"]
    capture = BraceBalancer().capture(lines, 1)
    # The quoted brace closes the body early
    assert capture.text == "  label: '}',"
    assert capture.lines_consumed == 2


def test_initial_depth():
    lines = ["header { {", "  a: 1", "  },", "};", "after"]
    capture = BraceBalancer().capture(lines, 1, initial_depth=2)
    assert capture.text == "  a: 1\n  },\n};"
    assert capture.lines_consumed == 4


def test_brace_delta():
    assert brace_delta("() => {") == 1
    assert brace_delta("{ return <X/>; };") == 0
    assert brace_delta(" return <Y/>; };") == -1
