from shadercomp.graphics.shaders.directives import parse_chunk


def test_parse_extracts_requirements_in_order():
    text = (
        "#require <uniforms/common>\n"
        "#require <functions/light-model_2>\n"
        "\n"
        "void main() {}\n"
    )

    chunk = parse_chunk(text)

    assert chunk.required == ("uniforms/common", "functions/light-model_2")
    assert chunk.body == "void main() {}"


def test_parse_keeps_duplicates():
    chunk = parse_chunk("#require <a>\n#require <b>\n#require <a>\nbody")

    assert chunk.required == ("a", "b", "a")
    assert chunk.body == "body"


def test_parse_accepts_crlf_line_endings():
    chunk = parse_chunk("#require <uniforms/common>\r\nfloat x;\r\n")

    assert chunk.required == ("uniforms/common",)
    assert chunk.body == "float x;"


def test_malformed_directives_stay_in_body():
    text = "\n".join(
        [
            "  #require <indented>",
            "#require <has space>",
            "#require <ok> trailing",
            '#require "quoted"',
            "#include <other>",
        ]
    )

    chunk = parse_chunk(text)

    assert chunk.required == ()
    assert chunk.body == text.strip()


def test_requirement_in_middle_of_source():
    chunk = parse_chunk("float a;\n#require <structs/light>\nfloat b;")

    assert chunk.required == ("structs/light",)
    assert chunk.body == "float a;\n\nfloat b;"


def test_parsing_body_again_is_a_no_op():
    first = parse_chunk("#require <x>\n#require <y/z>\n\n  vec3 f();  \n")
    second = parse_chunk(first.body)

    assert second.required == ()
    assert second.body == first.body
