from typing import Dict, Union

from ..errors import ConfigurationError

USERNAME_TOKEN = "USERNAME"
SSH_PUBLIC_KEY_TOKEN = "SSH_PUBLIC_KEY"


def render_metadata(template: Dict[str, str], username: str, ssh_public_key: Union[bytes, str]) -> Dict[str, str]:
    """Substitute ``USERNAME`` then ``SSH_PUBLIC_KEY`` in every template value.

    Replacement is plain text, username first. A username that itself contains
    ``SSH_PUBLIC_KEY`` is therefore rewritten by the second pass.
    """
    if isinstance(ssh_public_key, bytes):
        try:
            ssh_public_key = ssh_public_key.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"SSH public key is not valid UTF-8 text: {e}", step="render_metadata") from e

    return {
        key: value.replace(USERNAME_TOKEN, username).replace(SSH_PUBLIC_KEY_TOKEN, ssh_public_key)
        for key, value in template.items()
    }
