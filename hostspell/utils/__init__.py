from .misc import normalize_host, unique_chars
from .spelling_corrector import SpellingCorrector
