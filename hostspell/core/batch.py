import logging

from pathos.multiprocessing import Pool

__all__ = ['correct_many']


def correct_many(model, queries, nprocs=None):
    """
    Correct a batch of queries against a frozen copy of ``model``.

    The model is snapshotted first, so training it while the batch runs
    has no effect on the results.

    Parameters
    ----------
    model : `~hostspell.core.model.HostModel`
        Trained model.
    queries : iterable of str
        Hosts to correct.
    nprocs : int, optional
        Number of worker processes. `None` or 1 corrects sequentially.

    Returns
    -------
    list
        One result per query, in input order; `None` where no correction
        exists.
    """
    frozen = model.snapshot()
    queries = list(queries)

    if nprocs is None or nprocs <= 1 or len(queries) < 2:
        return [frozen.correct(q) for q in queries]

    logging.debug("Correcting %d queries over %d processes.",
                  len(queries), nprocs)

    with Pool(nprocs) as pool:
        results = pool.map(frozen.correct, queries)

    return list(results)
