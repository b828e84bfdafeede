from sumchecker.errors import (
    ChecksumMismatchError,
    ChecksumParseError,
    ErrorKind,
    NoChecksumFoundError,
    SumcheckerError,
)


def test_error_kinds_and_payloads():
    parse = ChecksumParseError(4, "bad line")
    missing = NoChecksumFoundError("a.txt")
    mismatch = ChecksumMismatchError("b.txt")

    assert [err.kind for err in (parse, missing, mismatch)] == [
        ErrorKind.PARSE,
        ErrorKind.NO_CHECKSUM,
        ErrorKind.MISMATCH,
    ]
    assert (parse.line_number, parse.line) == (4, "bad line")
    assert missing.filename == "a.txt"
    assert mismatch.filename == "b.txt"
    assert all(isinstance(err, SumcheckerError) for err in (parse, missing, mismatch))


def test_error_messages():
    assert str(ChecksumParseError(1, "invalid")) == "Could not parse checksum file at line 1: invalid"
    assert str(NoChecksumFoundError("x")) == 'No checksum found in checksum file for "x".'
    assert str(ChecksumMismatchError("y")) == 'Generated checksum for "y" did not match expected checksum.'
    assert ChecksumMismatchError("y").message == str(ChecksumMismatchError("y"))
