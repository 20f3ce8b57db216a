""" Handling of absent and blank documents.

Taggers are never asked to tag an empty string: missing documents are
replaced by a placeholder before tagging and their results are overwritten
with the missing marker (``None``) afterwards::

    >>> docs = ["The dog runs", "", None, "Cats sleep"]
    >>> missing = find_missing(docs)
    >>> missing
    [1, 2]
    >>> fill_missing(docs, missing)
    ['The dog runs', '.', '.', 'Cats sleep']

"""
import math
from numbers import Real
from typing import Any, List, Sequence

__all__ = ['PLACEHOLDER', 'is_na', 'is_missing', 'find_missing',
           'fill_missing', 'restore_missing']


# the shortest text every tagger accepts
PLACEHOLDER = '.'


def is_na(document: Any) -> bool:
    """ True for undefined documents (``None`` or a NaN of any real type). """
    return document is None or \
        (isinstance(document, Real) and math.isnan(document))


def is_missing(document: Any) -> bool:
    """ True for undefined documents and strings of whitespace only. """
    if is_na(document):
        return True
    return isinstance(document, str) and not document.strip()


def find_missing(documents: Sequence[Any]) -> List[int]:
    """ Sorted positions of missing documents. """
    return [i for i, doc in enumerate(documents) if is_missing(doc)]


def fill_missing(documents: Sequence[Any], missing: Sequence[int],
                 placeholder: str = PLACEHOLDER) -> List[str]:
    """
    Return a copy of documents with a placeholder on missing positions.

    :param documents: documents to tag
    :param missing: positions of missing documents, see `find_missing`
    :param placeholder: text used instead of missing documents
    :return: list of texts safe to pass to a tagger
    """
    filled = list(documents)
    for i in missing:
        filled[i] = placeholder
    return filled


def restore_missing(tagged: Sequence[Any], missing: Sequence[int]) -> list:
    """
    Return a copy of tagged documents with ``None`` on missing positions.
    Positions not in `missing` are left as they are, so applying it twice
    gives the same result as applying it once.
    """
    restored = list(tagged)
    for i in missing:
        restored[i] = None
    return restored
