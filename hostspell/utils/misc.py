__all__ = ['normalize_host', 'unique_chars']


def normalize_host(value):
    """
    Case policy shared by training and querying: hosts are compared
    lower-cased.
    """
    if not isinstance(value, str):
        raise TypeError("Expected a string, got {}.".format(
            type(value).__name__))

    return value.lower()


def unique_chars(chars):
    """
    Collapse a string or iterable of single characters into a string with
    each character kept once, in first-seen order.
    """
    if isinstance(chars, str):
        chars = list(chars)

    for c in chars:
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError("Alphabet entries must be single characters, "
                             "got {!r}.".format(c))

    return ''.join(dict.fromkeys(chars))
