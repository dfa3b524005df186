from collections import Counter

__all__ = ['SpellingCorrector']


class SpellingCorrector:
    """
    Norvig-style corrector over a table of host frequencies. The table is
    only ever read; callers may keep training it between corrections.

    Parameters
    ----------
    counts : dict-like
        Mapping of host string to the number of times it was seen.
    alphabet : str
        Characters used for substitutions and insertions.
    """
    def __init__(self, counts, alphabet):
        self._counts = counts if counts is not None else Counter()
        self._alphabet = alphabet

    def P(self, word):
        "Probability of `word`."
        N = sum(self._counts.values())

        if N == 0:
            return 0.0

        return self._counts.get(word, 0) / N

    def correction(self, word):
        "Most probable spelling correction for word, or None."
        _, known = self.candidates(word)

        if not known:
            return None

        # Equal counts resolve to the lexicographically smallest host
        return min(known, key=lambda w: (-self._counts[w], w))

    def candidates(self, word):
        """
        Generate possible spelling corrections for word. Returns the edit
        distance of the first tier holding known hosts along with that tier.
        """
        if word in self._counts:
            return 0, {word}

        known = self.known(self.edits1(word))

        if known:
            return 1, known

        known = self.known(self.edits2(word))

        if known:
            return 2, known

        return None, set()

    def most_likely_replacements(self, word, num_res=10):
        "The best `num_res` candidates of the nearest tier, best first."
        _, known = self.candidates(word)

        return sorted(known, key=lambda w: (-self._counts[w], w))[:num_res]

    def known(self, words):
        "The subset of `words` that appear in the table of hosts."
        return set(w for w in words if w in self._counts)

    def edits1(self, word):
        "All edits that are one edit away from `word`."
        letters = self._alphabet
        splits = [(word[:i], word[i:]) for i in range(len(word) + 1)]
        deletes = [L + R[1:] for L, R in splits if R]
        transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
        replaces = [L + c + R[1:] for L, R in splits if R for c in letters]
        inserts = [L + c + R for L, R in splits for c in letters]
        return set(deletes + transposes + replaces + inserts)

    def edits2(self, word):
        "All edits that are two edits away from `word`."
        return (e2 for e1 in self.edits1(word) for e2 in self.edits1(e1))
