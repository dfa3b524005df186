import logging
import re
from collections import Counter

from ..utils.misc import normalize_host

__all__ = ['URL_PATTERN', 'extract_hosts', 'count_hosts']


# A scheme followed by the authority, which runs up to the first path,
# query or fragment separator.
URL_PATTERN = re.compile(
    r"(?P<scheme>[a-z][a-z0-9+.-]*)://(?P<host>[^/?#]+)")


def extract_hosts(text):
    """
    Pull the host component out of every URL-like piece of ``text``.

    Parameters
    ----------
    text : str
        Arbitrary training text. Whitespace separates the pieces; each
        piece gives at most one host, taken from its first
        ``scheme://host``. Other pieces are skipped.

    Returns
    -------
    list
        Host strings in order of appearance, repeats included.
    """
    if text is None:
        return []

    hosts = []

    for piece in normalize_host(text).split():
        match = URL_PATTERN.search(piece)

        if match is not None:
            hosts.append(match.group('host'))

    return hosts


def count_hosts(text):
    counts = Counter(extract_hosts(text))

    logging.debug("Extracted %d hosts (%d distinct) from %d characters.",
                  sum(counts.values()), len(counts), len(text or ''))

    return counts
