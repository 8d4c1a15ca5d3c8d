import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..errors import ConfigurationError

AUTH_TOKEN_ENV = "YC_AUTH_TOKEN"
SSH_PUBLIC_KEY_PATH_ENV = "SSH_PUBLIC_KEY_PATH"


@dataclass(frozen=True)
class Credentials:
    iam_token: str = field(repr=False)
    ssh_public_key: bytes = field(repr=False)

    @classmethod
    def load_from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Credentials':
        if environ is None:
            environ = os.environ

        iam_token = environ.get(AUTH_TOKEN_ENV)
        if not iam_token:
            raise ConfigurationError(f"Environment variable {AUTH_TOKEN_ENV} is not set", step="credentials")

        key_path = environ.get(SSH_PUBLIC_KEY_PATH_ENV)
        if not key_path:
            raise ConfigurationError(f"Environment variable {SSH_PUBLIC_KEY_PATH_ENV} is not set", step="credentials")

        return cls(iam_token=iam_token, ssh_public_key=read_public_key(key_path))


def read_public_key(path: str) -> bytes:
    try:
        with open(os.path.expanduser(path), "rb") as f:
            key = f.read()
    except OSError as e:
        raise ConfigurationError(f"Cannot read SSH public key {path}: {e}", step="credentials") from e

    # 渲染 metadata 时按文本替换，这里先确认能解码
    try:
        key.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"SSH public key {path} is not valid UTF-8 text: {e}", step="credentials") from e
    return key
