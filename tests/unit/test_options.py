import pytest

from sumchecker.config.options import ChecksumOptions, ValidatorConfig, options_from_env
from sumchecker.services.validator import BINARY_ENCODING, ChecksumValidator


def test_not_specifying_a_text_encoding_defaults_to_utf8():
    validator = ChecksumValidator("sha256", "nonexistent.sha256sum")
    assert validator.encoding(False) == "utf8"


def test_specifying_a_text_encoding_overrides_the_default():
    validator = ChecksumValidator(
        "sha256", "nonexistent.sha256sum", ChecksumOptions(default_text_encoding="hex")
    )
    assert validator.encoding(False) == "hex"


@pytest.mark.parametrize("encoding", [None, "hex", "utf-16"])
def test_binary_encoding_ignores_configuration(encoding):
    options = ChecksumOptions(default_text_encoding=encoding) if encoding else None
    validator = ChecksumValidator("sha256", "nonexistent.sha256sum", options)
    assert validator.encoding(True) == BINARY_ENCODING
    assert bytes(range(256)).decode(BINARY_ENCODING).encode(BINARY_ENCODING) == bytes(range(256))


def test_validator_stores_arguments_verbatim():
    validator = ChecksumValidator("not-checked-yet", "sums.txt")
    assert validator.algorithm == "not-checked-yet"
    assert validator.checksum_filename == "sums.txt"
    assert validator.default_text_encoding == "utf8"
    assert len(validator.checksums) == 0


def test_config_is_immutable():
    config = ValidatorConfig.build("sha256", "sums.txt")
    with pytest.raises(AttributeError):
        config.algorithm = "md5"  # type: ignore[misc]


def test_chunk_size_must_be_positive():
    with pytest.raises(ValueError):
        ChecksumOptions(chunk_size=0)


def test_options_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SUMCHECKER_DEFAULT_TEXT_ENCODING", "latin-1")
    monkeypatch.setenv("SUMCHECKER_CHUNK_SIZE", "4096")
    options = options_from_env()
    assert options == ChecksumOptions(default_text_encoding="latin-1", chunk_size=4096)


def test_options_from_env_falls_back_on_bad_values(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SUMCHECKER_DEFAULT_TEXT_ENCODING", raising=False)
    monkeypatch.setenv("SUMCHECKER_CHUNK_SIZE", "lots")
    assert options_from_env() == ChecksumOptions()

    monkeypatch.setenv("SUMCHECKER_CHUNK_SIZE", "-5")
    assert options_from_env() == ChecksumOptions()
