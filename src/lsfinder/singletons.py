# (c) Copyright IBM Corp. 2025

import threading
from typing import Optional

from lsfinder.finder import ProcessFinder

finder = None
_finder_lock = threading.Lock()


def get_finder() -> ProcessFinder:
    """
    Retrieve the globally configured finder, creating it on first use
    @return: The ProcessFinder singleton
    """
    global finder
    with _finder_lock:
        if finder is None:
            finder = ProcessFinder()
        return finder


def set_finder(new_finder: Optional[ProcessFinder]) -> None:
    """
    Set the global finder for the lsfinder package.  This is used for the
    test suite only currently.

    @param new_finder: finder to replace current singleton
    @return: None
    """
    global finder
    finder = new_finder
