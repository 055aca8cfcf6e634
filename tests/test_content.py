from tuxpdf.content import Content, Operation
from tuxpdf.objects import Name, PdfString


def test_operation_without_arguments():
    assert Operation("BT").encode() == b"BT"


def test_operation_with_arguments():
    assert Operation("Tf", [Name("F1"), 48]).encode() == b"/F1 48 Tf"


def test_string_operand():
    literal = PdfString.literal("Hello World!")
    encoded = Operation("Tj", [literal]).encode()
    assert encoded == literal.encode() + b" Tj"


def test_hello_world_content():
    operations = [
        Operation("BT"),
        Operation("Tf", [Name("F1"), 48]),
        Operation("Td", [100, 600]),
        Operation("Tj", [PdfString.literal("Hello World!")]),
        Operation("ET"),
    ]
    encoded = Content(operations).encode()
    lines = encoded.split(b"\n")
    assert len(lines) == len(operations)
    assert lines[0] == b"BT"
    assert lines[-1] == b"ET"
    assert lines[1] == Operation("Tf", [Name("F1"), 48]).encode()
    assert not encoded.endswith(b"\n")


def test_empty_content():
    assert Content().encode() == b""


def test_single_operation_content_has_no_newline():
    operation = Operation("Td", [100, 600])
    assert Content([operation]).encode() == operation.encode()


def test_operation_default_arguments_are_independent():
    first = Operation("q")
    second = Operation("Q")
    first.arguments.append(1)
    assert second.arguments == []
    assert second.encode() == b"Q"