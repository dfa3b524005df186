import logging

import numpy as np
from astropy.table import Table

from ..core.model import HostModel, DEFAULT_ALPHABET
from ..utils.misc import normalize_host
from ..utils.spelling_corrector import SpellingCorrector

__all__ = ['HostRegistry']


class HostRegistry(Table):
    """
    Tabular form of a trained frequency table, with one ``host`` and one
    ``count`` column. The model's alphabet travels in ``meta['alphabet']``
    so that an ECSV round trip restores the same model.
    """
    def __init__(self, *args, **kwargs):
        super(HostRegistry, self).__init__(*args, **kwargs)

    @classmethod
    def from_model(cls, model):
        rows = sorted(model.counts.items(), key=lambda r: (-r[1], r[0]))

        hosts = np.array([r[0] for r in rows], dtype=str)
        counts = np.array([r[1] for r in rows], dtype=np.int64)

        registry = cls([hosts, counts], names=('host', 'count'))
        registry.meta['alphabet'] = model.alphabet

        return registry

    @property
    def alphabet(self):
        return self.meta.get('alphabet', DEFAULT_ALPHABET)

    def as_dict(self):
        return {str(row['host']): int(row['count']) for row in self}

    def to_model(self, alphabet=None):
        return HostModel.from_counts(self.as_dict(),
                                     alphabet=alphabet or self.alphabet)

    def with_name(self, name):
        name = normalize_host(name)
        host = next((row for row in self if row['host'] == name), None)

        if host is None:
            name = self.correct(name)
            host = next((row for row in self if row['host'] == name), None)

            if host is None:
                raise LookupError("No such host with name '{}' in "
                                  "registry.".format(name))

        return host

    def correct(self, name):
        name = normalize_host(name)
        _corrector = SpellingCorrector(self.as_dict(), self.alphabet)
        correct_name = _corrector.correction(name)

        if correct_name is None:
            logging.error("No host within two edits of '{}'.".format(name))
            return name

        if correct_name != name:
            logging.info(
                "Found host with name '{}' from given name '{}'.".format(
                    correct_name, name))

        return correct_name

    def load(self, path):
        new_table = HostRegistry.read(path, format='ascii.ecsv')

        # Swap whole columns; add_row would truncate hosts longer than the
        # current string dtype.
        if self.colnames:
            self.remove_columns(self.colnames)

        self.add_columns([new_table['host'], new_table['count']])
        self.meta.update(new_table.meta)
