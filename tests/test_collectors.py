from docspot.collectors import collect_brace_body, collect_indent_body, strip_literals


def test_brace_body_simple_function():
    lines = ["function add(a, b) {", "  return a + b;", "}"]

    span = collect_brace_body(lines, 0)

    assert span.start_line == 0
    assert span.end_line == 2
    assert span.body == "function add(a, b) {\n  return a + b;\n}\n"


def test_brace_body_nested_blocks():
    lines = [
        "void run() {",
        "  if (ready) {",
        "    go();",
        "  }",
        "}",
        "int other() {",
        "}",
    ]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 4


def test_brace_body_opening_brace_on_next_line():
    lines = ["public int Add(int a, int b)", "{", "    return a + b;", "}"]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 3
    assert span.body.startswith("public int Add(int a, int b)\n{\n")


def test_brace_body_single_line_function():
    lines = ["function one() { return 1; }", "function two() {", "}"]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 0
    assert span.body == "function one() { return 1; }\n"


def test_brace_body_unbalanced_runs_to_end_of_buffer():
    lines = ["function f() {", "  if (x) {", "  }"]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 2


def test_brace_body_without_any_brace_runs_to_end_of_buffer():
    lines = ["run(task)", "  step one", "  step two"]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 2
    assert span.body == "run(task)\n  step one\n  step two\n"


def test_brace_body_starts_at_header_line():
    lines = ["const x = 1;", "function f() {", "}", "const y = 2;"]

    span = collect_brace_body(lines, 1)

    assert span.start_line == 1
    assert span.end_line == 2


def test_brace_in_string_desynchronizes_count():
    lines = ["function f() {", '  const s = "}";', "  return s;", "}"]

    span = collect_brace_body(lines, 0)

    assert span.end_line == 1


def test_skip_literals_ignores_braces_in_strings_and_comments():
    lines = [
        "function f() {",
        '  const s = "}";',
        "  // } closing in a comment",
        "  /* } */ return s;",
        "}",
    ]

    span = collect_brace_body(lines, 0, skip_literals=True)

    assert span.end_line == 4


def test_strip_literals_removes_strings_and_comments():
    lines = [
        "a /* { */ b",
        "x // {",
        "'{' \"}\" `{",
        "}` c",
    ]

    assert strip_literals(lines) == ["a  b", "x ", "  ", " c"]


def test_strip_literals_handles_escaped_quotes():
    assert strip_literals(['x = "a\\"{" + y']) == ["x =  + y"]


def test_strip_literals_block_comment_spans_lines():
    assert strip_literals(["a /* {", "} still comment", "*/ b {"]) == ["a ", "", " b {"]


def test_indent_body_simple_function():
    lines = ["def add(a, b):", "    return a + b"]

    span = collect_indent_body(lines, 0)

    assert span.start_line == 0
    assert span.end_line == 1
    assert span.body == "def add(a, b):\n    return a + b\n"


def test_indent_body_includes_blank_lines_and_stops_at_dedent():
    lines = [
        "def f():",
        "    x = 1",
        "",
        "    return x",
        "",
        "def g():",
        "    pass",
    ]

    span = collect_indent_body(lines, 0)

    assert span.end_line == 4


def test_indent_body_method_stops_at_sibling_method():
    lines = [
        "class A:",
        "    def m(self):",
        "        return 1",
        "    def n(self):",
        "        pass",
    ]

    span = collect_indent_body(lines, 1)

    assert span.start_line == 1
    assert span.end_line == 2


def test_indent_body_whitespace_only_line_is_blank():
    lines = ["def f():", "    a = 1", "  ", "    b = 2", "x = 1"]

    span = collect_indent_body(lines, 0)

    assert span.end_line == 3


def test_indent_body_header_on_last_line():
    span = collect_indent_body(["def f():"], 0)

    assert span.end_line == 0
    assert span.body == "def f():\n"
