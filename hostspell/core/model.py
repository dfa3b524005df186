import logging
from collections import Counter
from types import MappingProxyType

from .tokenizer import count_hosts
from ..utils.misc import normalize_host, unique_chars
from ..utils.spelling_corrector import SpellingCorrector

__all__ = ['HostModel', 'DEFAULT_ALPHABET', 'MAX_DISTANCE']


DEFAULT_ALPHABET = "1234567890._-@abcdefghijklmnopqrstuvwxyz"
MAX_DISTANCE = 2


class HostModel:
    """
    Frequency table of hosts seen during training, paired with the alphabet
    used to generate edit candidates.

    Usage is a two step process: call `train` one or more times with large
    blocks of text, then call `correct` to look up the most probable host
    for a possibly misspelled one.

    Parameters
    ----------
    alphabet : str or iterable
        Characters that may be substituted or inserted while generating
        candidates, e.g. ``"1234567890._-@abcdefghijklmnopqrstuvwxyz"``.
    """
    def __init__(self, alphabet=DEFAULT_ALPHABET):
        self._alphabet = unique_chars(alphabet)
        self._counts = Counter()
        self._corrector = SpellingCorrector(self._counts, self._alphabet)

    def __repr__(self):
        return "<HostModel: {} hosts, {} observations, alphabet={!r}>".format(
            len(self._counts), sum(self._counts.values()), self._alphabet)

    def __len__(self):
        return len(self._counts)

    def __contains__(self, host):
        return isinstance(host, str) and normalize_host(host) in self._counts

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def counts(self):
        """Read-only view of the host frequency table."""
        return MappingProxyType(self._counts)

    @classmethod
    def from_counts(cls, counts, alphabet=DEFAULT_ALPHABET):
        """
        Restore a model from a previously trained frequency table, such as
        one read back from a `~hostspell.io.registries.HostRegistry`.
        """
        model = cls(alphabet)

        for host, count in dict(counts).items():
            if isinstance(count, bool) or int(count) != count or count < 0:
                raise ValueError("Count for host '{}' must be a non-negative "
                                 "integer, got {!r}.".format(host, count))

            host = normalize_host(host)

            if count > 0:
                model._counts[host] += int(count)

        return model

    def train(self, text):
        """
        Extract the hosts from every URL in ``text`` and add them to the
        frequency table. Repeated calls extend the training.
        """
        new_counts = count_hosts(text)
        self._counts.update(new_counts)

        logging.debug("Model now holds %d hosts after training on %d URLs.",
                      len(self._counts), sum(new_counts.values()))

    def correct(self, query):
        """
        Most probable host within two edits of ``query``.

        An exact match always wins. Otherwise the most frequent host at
        distance one is returned, then the most frequent at distance two,
        with equal counts going to the lexicographically smallest host.

        Returns
        -------
        str or None
            The corrected host, or `None` if nothing in the table is close
            enough.
        """
        query = normalize_host(query)
        result = self._corrector.correction(query)

        logging.debug("Corrected '%s' to %r.", query, result)

        return result

    def candidates(self, query):
        """
        Edit distance of the nearest tier of known hosts, and that tier.
        ``(None, set())`` when no host lies within two edits.
        """
        return self._corrector.candidates(normalize_host(query))

    def most_likely_replacements(self, query, num_res=10):
        return self._corrector.most_likely_replacements(
            normalize_host(query), num_res=num_res)

    def probability(self, host):
        return self._corrector.P(normalize_host(host))

    def snapshot(self):
        """
        Independent copy of this model. Training the original afterwards
        does not affect the copy, so it can be handed to concurrent readers.
        """
        return self.from_counts(self._counts, self._alphabet)
