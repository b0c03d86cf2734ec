import pytest

from cryptohctl.config import Config


def test_missing_file_gives_defaults(tmp_path):
    config = Config.load(tmp_path / "missing.toml")
    config.validate()

    assert config.hash.algorithm == "sha512"
    assert config.signing.algorithm == "sha256"
    assert config.salt.length == 16
    assert config.log_level == "WARNING"
    assert config.config_path == tmp_path / "missing.toml"


def test_load_from_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'log_level = "debug"\n'
        "\n"
        "[hash]\n"
        'algorithm = "SHA256"\n'
        "\n"
        "[signing]\n"
        'algorithm = "sha512"\n'
        "\n"
        "[salt]\n"
        "length = 32\n"
    )

    config = Config.load(path)
    config.validate()

    assert config.log_level == "DEBUG"
    assert config.hash.algorithm == "SHA256"
    assert config.signing.algorithm == "sha512"
    assert config.salt.length == 32


def test_partial_file_keeps_other_defaults(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[salt]\nlength = 8\n")

    config = Config.load(path)

    assert config.salt.length == 8
    assert config.hash.algorithm == "sha512"


def test_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[hash\nalgorithm = ")

    with pytest.raises(ValueError, match="Invalid TOML"):
        Config.load(path)


@pytest.mark.parametrize("body,message", [
    ('[hash]\nalgorithm = "sha384"\n', "hash algorithm"),
    ('[signing]\nalgorithm = "blake2b"\n', "signing algorithm"),
    ("[salt]\nlength = 0\n", "salt length"),
    ('log_level = "loud"\n', "log level"),
])
def test_validate_rejects_bad_values(tmp_path, body, message):
    path = tmp_path / "config.toml"
    path.write_text(body)

    config = Config.load(path)
    with pytest.raises(ValueError, match=message):
        config.validate()


@pytest.mark.parametrize("body", [
    'hash = "sha256"\n',
    "hash = 5\n",
    'signing = ["sha256"]\n',
    "salt = 16\n",
])
def test_section_must_be_a_table(tmp_path, body):
    path = tmp_path / "config.toml"
    path.write_text(body)

    with pytest.raises(ValueError, match="expected a table"):
        Config.load(path)


@pytest.mark.parametrize("value", ["1.9", "true", '"16"'])
def test_salt_length_must_be_an_integer(tmp_path, value):
    path = tmp_path / "config.toml"
    path.write_text(f"[salt]\nlength = {value}\n")

    with pytest.raises(ValueError, match="expected an integer"):
        Config.load(path)
