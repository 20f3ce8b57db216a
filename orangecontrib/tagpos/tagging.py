"""
Chunked POS tagging of document collections.

Taggers may use a lot of memory on large inputs, so documents are tagged in
chunks, one after another, and memory is reclaimed between chunks. A chunk
holds roughly the same number of characters regardless of document length::

    >>> from orangecontrib.tagpos import tag_pos
    >>> tagged = tag_pos(["The dog runs", "", None, "Cats sleep"], chunk_size=2)
    >>> print(tagged)
    1. The/DT dog/NN runs/VBZ
    2. NA
    3. NA
    4. Cats/NNS sleep/VBP

A failure of the tagger on any chunk aborts the whole call; there are no
partial results.
"""
import gc
import logging
from typing import Any, Callable, Iterable, List, Optional

from Orange.util import dummy_callback

from orangecontrib.tagpos.collection import TaggedCollection, TaggedToken
from orangecontrib.tagpos.missing import find_missing, fill_missing, \
    restore_missing
from orangecontrib.tagpos.tag import POSTagger, get_engine
from orangecontrib.tagpos.util import check_chunk_size, chunk_ranges, \
    chunk_size as default_chunk_size

__all__ = ['tag_pos', 'tag_chunks']

log = logging.getLogger(__name__)


def tag_chunks(tagger: POSTagger, documents: List[str], chunk_size: int,
               callback: Callable = None) -> List[List[TaggedToken]]:
    """
    Tag documents chunk by chunk with a tagger that is opened for the
    duration of the call and closed afterwards, also on errors.

    :param tagger: tagging backend
    :param documents: texts; none of them may be empty
    :param chunk_size: number of documents tagged at once
    :param callback: progress callback function
    :return: tagged tokens of each document, in the order of documents
    """
    if callback is None:
        callback = dummy_callback
    starts, ends = chunk_ranges(len(documents), chunk_size)
    log.debug("Tagging %d documents in %d chunks of at most %d documents",
              len(documents), len(starts), chunk_size)

    tagged = []
    with tagger:
        for i, (start, end) in enumerate(zip(starts, ends)):
            callback(i / len(starts), "POS Tagging...")
            chunk = documents[start:end]
            result = tagger.tag_batch(chunk)
            if len(result) != len(chunk):
                raise RuntimeError(
                    "{} returned {} documents for a chunk of {}.".format(
                        tagger.name, len(result), len(chunk)))
            tagged.extend(result)
            log.debug("Tagged documents %d-%d", start + 1, end)
            # chunk data must be unreachable before collecting
            del chunk, result
            gc.collect()
    callback(1)
    return tagged


def tag_pos(documents: Iterable[Any], engine: str = "local",
            chunk_size: Optional[int] = None, callback: Callable = None,
            **kwargs) -> TaggedCollection:
    """
    Tag documents with parts of speech.

    Parameters
    ----------
    documents
        Texts to tag. ``None``, NaN and blank strings are not tagged; their
        position in the result holds ``None``.
    engine
        ``"local"`` for NLTK's averaged perceptron tagger or ``"external"``
        for the Stanford POS Tagger.
    chunk_size
        Number of documents tagged at once. By default
        ``floor(2000 * 23.5 / mean document length)``.
    callback
        Progress callback function.
    kwargs
        Passed to the tagger, e.g. `stanford_dir` and `java_path` for the
        Stanford POS Tagger.

    Returns
    -------
    Tagged documents, one for each input document.
    """
    tagger_cls = get_engine(engine)
    if chunk_size is not None:
        chunk_size = check_chunk_size(chunk_size)

    documents = list(documents)
    missing = find_missing(documents)
    working = fill_missing(documents, missing)
    if not working:
        return TaggedCollection([])
    if chunk_size is None:
        chunk_size = default_chunk_size(working)
    if missing:
        log.debug("%d of %d documents are missing", len(missing), len(working))

    tagged = tag_chunks(tagger_cls(**kwargs), working, chunk_size, callback)
    return TaggedCollection(restore_missing(tagged, missing))
