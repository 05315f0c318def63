# (c) Copyright IBM Corp. 2025

from collections import defaultdict
from typing import Any, DefaultDict, Optional


def nested_dictionary() -> DefaultDict[str, Any]:
    return defaultdict(DictionaryOfStan)


# Simple implementation of a nested dictionary.
DictionaryOfStan: DefaultDict[str, Any] = nested_dictionary


def mask_secret(secret: Optional[str], visible: int = 8) -> str:
    """
    Shortens a secret for logging: the first <visible> characters followed
    by an ellipsis.

    :param secret: the token to mask
    :param visible: how many leading characters are kept
    :return: the masked string
    """
    if not secret:
        return ""
    return f"{secret[:visible]}..."
