"""
Saving and restoring a randomised distribution.

A saved distribution is the DistributionStore as a versioned JSON
document. `encode` packs it into a base64 string so it can sit in a
config file; `SaveFile` writes it to disk as plain JSON.

Usage:
    SaveFile("randomiser_save.json").save(store)
    store = SaveFile("randomiser_save.json").load()
"""

import base64
import binascii
import json
import logging
from pathlib import Path
from typing import Union

from .errors import ConfigurationError
from .state.distribution import DistributionStore

logger = logging.getLogger(__name__)

# Bump whenever the saved layout changes
SAVE_VERSION = 1


def to_document(store: DistributionStore) -> dict:
    return {"version": SAVE_VERSION, "distribution": store.to_dict()}


def from_document(document: dict) -> DistributionStore:
    """
    Raises:
        ConfigurationError: if the document is from another save version
            or is missing its distribution
    """
    if not isinstance(document, dict):
        raise ConfigurationError("Saved distribution is not a JSON object")
    version = document.get("version")
    if version != SAVE_VERSION:
        raise ConfigurationError(
            f"Saved distribution has version {version}, expected {SAVE_VERSION}. "
            f"Please randomise again."
        )
    try:
        return DistributionStore.from_dict(document["distribution"])
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigurationError(f"Malformed saved distribution: {e}") from e


def encode(store: DistributionStore) -> str:
    """Pack a distribution into a base64 string."""
    raw = json.dumps(to_document(store), sort_keys=True).encode("utf-8")
    return base64.b64encode(raw).decode("utf-8")


def decode(raw_b64: str) -> DistributionStore:
    """Unpack a distribution from a base64 string."""
    try:
        document = json.loads(base64.b64decode(raw_b64, validate=True).decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Saved distribution string is corrupt: {e}") from e
    return from_document(document)


class SaveFile:
    """Persistence collaborator backed by a JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def save(self, store: DistributionStore):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(to_document(store), indent=2, sort_keys=True), encoding="utf-8")
        logger.info(f"Saved distribution for {len(store)} fragments to {self.path}")

    def load(self) -> DistributionStore:
        """
        Raises:
            ConfigurationError: if the file is missing, corrupt or outdated
        """
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise ConfigurationError(f"No saved distribution at {self.path}") from None
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Saved distribution at {self.path} is corrupt: {e}") from e
        return from_document(document)
