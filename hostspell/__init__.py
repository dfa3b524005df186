"""Top-level package for hostspell."""

import logging

__author__ = """hostspell developers"""
__version__ = '0.1.0'

logging.basicConfig(format='hostspell [%(levelname)-8s]: %(message)s',
                    level=logging.INFO)

from .core.model import HostModel, DEFAULT_ALPHABET  # noqa: E402
from .core.batch import correct_many  # noqa: E402

__all__ = ['HostModel', 'DEFAULT_ALPHABET', 'correct_many']
