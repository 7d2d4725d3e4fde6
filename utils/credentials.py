import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from utils.exceptions import CredentialsError


@dataclass(frozen=True)
class Credential:
    username: str
    password: str
    expected_url: Optional[str] = None


def _read_json(path) -> dict:
    path = Path(path)
    if not path.exists():
        raise CredentialsError(f"Test credentials file not found at path: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CredentialsError(f"Invalid JSON in credentials file {path}: {e}") from e
    if not isinstance(data, dict):
        raise CredentialsError(f"Credentials file {path} must hold a JSON object")
    return data


def _to_credential(raw: dict, where: str) -> Credential:
    if not isinstance(raw, dict):
        raise CredentialsError(f"{where} must be an object, got {type(raw).__name__}")
    username = raw.get("username")
    password = raw.get("password")
    if not username or not password:
        raise CredentialsError(f"Test data is missing or invalid for {where}.")
    return Credential(username=username, password=password, expected_url=raw.get("expectedUrl") or None)


def load_users(path) -> list[Credential]:
    """
    Load the user list for multi-user scenarios.

    Accepts {"users": [{username, password, expectedUrl}]} or the shared-password
    form {"usernames": [...], "password": "..."}.
    """
    data = _read_json(path)
    if "users" in data:
        users = [_to_credential(raw, f"users[{i}]") for i, raw in enumerate(data["users"])]
    elif "usernames" in data:
        password = data.get("password")
        if not password:
            raise CredentialsError("Test data is missing or invalid for usernames: no shared password.")
        users = [Credential(username=name, password=password) for name in data["usernames"]]
    else:
        raise CredentialsError(f"No 'users' or 'usernames' entry in {path}")

    logger.debug(f"loaded {len(users)} users from {path}")
    return users


def load_valid_user(path) -> Credential:
    """Load the single {"validUser": {username, password}} record."""
    data = _read_json(path)
    if "validUser" not in data:
        raise CredentialsError("Test data is missing or invalid for validUser.")
    return _to_credential(data["validUser"], "validUser")
