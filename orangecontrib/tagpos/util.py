from math import floor
from numbers import Integral
from typing import Any, Sequence, Tuple

import numpy as np

from orangecontrib.tagpos.missing import is_na

__all__ = ['DEFAULT_ELEMENTS', 'REFERENCE_LENGTH', 'check_chunk_size',
           'chunk_size', 'chunk_ranges']


# number of documents in a chunk when documents are REFERENCE_LENGTH long
DEFAULT_ELEMENTS = 2000
REFERENCE_LENGTH = 23.5


def check_chunk_size(size: Any) -> int:
    """ Return size as int or raise ValueError if it is not a positive integer. """
    if isinstance(size, bool) or not isinstance(size, Integral) or size < 1:
        raise ValueError(
            "Chunk size must be a positive integer, got {!r}.".format(size))
    return int(size)


def chunk_size(documents: Sequence[Any], elements: int = DEFAULT_ELEMENTS,
               reference_length: float = REFERENCE_LENGTH) -> int:
    """
    Number of documents in a chunk such that a chunk holds roughly as many
    characters as `elements` documents of `reference_length` characters.

    Parameters
    ----------
    documents
        Documents to be tagged. Undefined documents are ignored when
        computing the mean length.
    elements
        Chunk size for documents of the reference length.
    reference_length
        Mean document length that `elements` is calibrated for.

    Returns
    -------
    Positive number of documents per chunk.
    """
    lengths = np.array([np.nan if is_na(doc) else len(doc)
                        for doc in documents], dtype=float)
    lengths = lengths[~np.isnan(lengths)]
    if not lengths.size:
        raise ValueError("Cannot compute chunk size: no document has a length.")
    mean_length = float(lengths.mean())
    if mean_length <= 0:
        raise ValueError("Cannot compute chunk size: mean document length is 0.")
    size = floor(elements * (reference_length / mean_length))
    if size < 1:
        raise ValueError(
            "Computed chunk size {} is not positive (mean document length "
            "{:.1f}); set the chunk size explicitly.".format(size, mean_length))
    return size


def chunk_ranges(n: int, size: int) -> Tuple[np.ndarray, np.ndarray]:
    """ Splits n positions into contiguous chunks of fixed size.
    The last chunk may be truncated.

    Returns two arrays, `starts` and `ends`, such that the i-th chunk covers
    positions ``starts[i]:ends[i]``. Chunks cover ``range(n)`` exactly once.
    """
    size = check_chunk_size(size)
    starts = np.arange(0, n, size, dtype=int)
    ends = np.minimum(starts + size, n)
    return starts, ends
