from pathlib import Path

import pytest

from yc_provisioner.create_instances.credentials import AUTH_TOKEN_ENV, SSH_PUBLIC_KEY_PATH_ENV, Credentials
from yc_provisioner.errors import ConfigurationError


def test_load_from_env_reads_token_and_key(tmp_path: Path):
    key_path = tmp_path / "id_rsa.pub"
    key_path.write_bytes(b"ssh-rsa AAAA... alice@host\n")

    creds = Credentials.load_from_env({AUTH_TOKEN_ENV: "t1.token", SSH_PUBLIC_KEY_PATH_ENV: str(key_path)})

    assert creds.iam_token == "t1.token"
    assert creds.ssh_public_key == b"ssh-rsa AAAA... alice@host\n"


def test_load_from_process_env(monkeypatch, tmp_path: Path):
    key_path = tmp_path / "id.pub"
    key_path.write_bytes(b"ssh-ed25519 K")
    monkeypatch.setenv(AUTH_TOKEN_ENV, "t1.env")
    monkeypatch.setenv(SSH_PUBLIC_KEY_PATH_ENV, str(key_path))

    creds = Credentials.load_from_env()
    assert creds.iam_token == "t1.env"


@pytest.mark.parametrize("missing", [AUTH_TOKEN_ENV, SSH_PUBLIC_KEY_PATH_ENV])
def test_missing_env_raises(tmp_path: Path, missing):
    key_path = tmp_path / "id.pub"
    key_path.write_bytes(b"key")
    environ = {AUTH_TOKEN_ENV: "t1", SSH_PUBLIC_KEY_PATH_ENV: str(key_path)}
    del environ[missing]

    with pytest.raises(ConfigurationError) as exc_info:
        Credentials.load_from_env(environ)
    assert missing in str(exc_info.value)
    assert exc_info.value.step == "credentials"


def test_empty_token_raises(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        Credentials.load_from_env({AUTH_TOKEN_ENV: "", SSH_PUBLIC_KEY_PATH_ENV: str(tmp_path / "id.pub")})


def test_unreadable_key_file_raises(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        Credentials.load_from_env({AUTH_TOKEN_ENV: "t1", SSH_PUBLIC_KEY_PATH_ENV: str(tmp_path / "missing.pub")})


def test_repr_hides_secrets():
    creds = Credentials(iam_token="t1.secret", ssh_public_key=b"ssh-rsa SECRET")
    assert "t1.secret" not in repr(creds)
    assert "SECRET" not in repr(creds)


def test_non_utf8_key_file_rejected_at_load(tmp_path: Path):
    key_path = tmp_path / "id.pub"
    key_path.write_bytes(b"\xff\xfe\x00binary")

    with pytest.raises(ConfigurationError) as exc_info:
        Credentials.load_from_env({AUTH_TOKEN_ENV: "t1", SSH_PUBLIC_KEY_PATH_ENV: str(key_path)})
    assert exc_info.value.step == "credentials"
