"""Fernet encryption of stored token secrets.

The key comes from ``MMF_ENCRYPTION_KEY``. Without it a key is generated once
and kept in ``Config.ENCRYPTION_KEY_PATH`` so that tokens stored by one CLI
run can still be read by the next.
"""

import logging
import os

from cryptography.fernet import Fernet, InvalidToken

from mapmyfitness.config import Config
from mapmyfitness.exceptions import SecretDecryptionError

logger = logging.getLogger(__name__)


def _read_key_file():
    path = Config.ENCRYPTION_KEY_PATH
    if not path.exists():
        return None
    key = path.read_text(encoding="utf-8").strip()
    return key or None


def _write_key_file(key: str):
    path = Config.ENCRYPTION_KEY_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(key)


def get_or_create_key() -> bytes:
    """Configured key, else the key file, else a newly generated key."""
    key = Config.ENCRYPTION_KEY or _read_key_file()

    if not key:
        key = Fernet.generate_key().decode()
        _write_key_file(key)
        logger.warning(
            f"MMF_ENCRYPTION_KEY not set. Generated a new key in {Config.ENCRYPTION_KEY_PATH}"
        )

    Config.ENCRYPTION_KEY = key
    return key.encode() if isinstance(key, str) else key


def get_fernet() -> Fernet:
    return Fernet(get_or_create_key())


def encrypt_secret(secret: str) -> str:
    """Encrypt a token secret. Empty secrets are stored as ``""``."""
    if not secret:
        return ""
    return get_fernet().encrypt(secret.encode()).decode()


def decrypt_secret(encrypted_secret: str) -> str:
    """Decrypt a token secret.

    Raises:
        SecretDecryptionError: The secret was encrypted under another key
            or is corrupted.
    """
    if not encrypted_secret:
        return ""

    try:
        return get_fernet().decrypt(encrypted_secret.encode()).decode()
    except InvalidToken as e:
        logger.error("Failed to decrypt token secret")
        raise SecretDecryptionError(
            "Stored token secret cannot be decrypted with the current key"
        ) from e
