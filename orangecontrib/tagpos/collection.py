import shutil
import textwrap
from collections.abc import Sequence
from itertools import chain
from typing import Callable, Iterable, List, NamedTuple, Optional

import nltk

__all__ = ['TaggedToken', 'TaggedCollection', 'plot_counts', 'MISSING_REPR']


MISSING_REPR = 'NA'
ELLIPSIS = ('.', '.', '.')


class TaggedToken(NamedTuple):
    word: str
    tag: str

    def __str__(self):
        return '{}/{}'.format(self.word, self.tag)


def plot_counts(tag_sequences: List[List[str]], item_name: str = 'POS Tag',
                by: Optional[Iterable] = None, show: bool = True):
    """
    Plot tag frequencies with NLTK (requires matplotlib).

    :param tag_sequences: tag names of each document
    :param item_name: plot title
    :param by: group label of each document; one line per group if given
    :param show: show the figure
    :return: matplotlib axes
    """
    if by is None:
        dist = nltk.FreqDist(chain.from_iterable(tag_sequences))
    else:
        by = list(by)
        if len(by) != len(tag_sequences):
            raise ValueError("Grouping has {} values for {} documents.".format(
                len(by), len(tag_sequences)))
        dist = nltk.ConditionalFreqDist(
            (group, tag) for group, tags in zip(by, tag_sequences)
            for tag in tags)
    return dist.plot(title=item_name, show=show)


class TaggedCollection(Sequence):
    """
    POS tagged documents in the order of the input documents.

    Each element is a tuple of `TaggedToken` or ``None`` for documents that
    were missing or blank. The collection is immutable.

        >>> tagged = TaggedCollection([[('dog', 'NN'), ('runs', 'VBZ')], None])
        >>> tagged.as_word_tag()
        ['dog/NN runs/VBZ', None]
        >>> tagged.tags()
        [['NN', 'VBZ'], None]
    """

    def __init__(self, documents: Iterable):
        self._documents = tuple(
            None if doc is None else tuple(TaggedToken(*t) for t in doc)
            for doc in documents)

    def __len__(self):
        return len(self._documents)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return TaggedCollection(self._documents[key])
        return self._documents[key]

    def __eq__(self, other):
        if not isinstance(other, TaggedCollection):
            return NotImplemented
        return self._documents == other._documents

    def __hash__(self):
        return hash(self._documents)

    def __repr__(self):
        return '<TaggedCollection: {} documents>'.format(len(self))

    def __str__(self):
        return self.render()

    @property
    def missing(self) -> List[int]:
        """ Positions of documents without tags. """
        return [i for i, doc in enumerate(self._documents) if doc is None]

    def words(self) -> List[Optional[List[str]]]:
        return [None if doc is None else [t.word for t in doc]
                for doc in self._documents]

    def tags(self) -> List[Optional[List[str]]]:
        return [None if doc is None else [t.tag for t in doc]
                for doc in self._documents]

    def as_word_tag(self) -> List[Optional[str]]:
        """ Documents as space separated ``word/tag`` strings. """
        return [None if doc is None else ' '.join(map(str, doc))
                for doc in self._documents]

    def render(self, n: int = 5, width: Optional[int] = None) -> str:
        """
        Render documents one per line, numbered from 1.

        Collections with more than ``2 * n`` documents show only the first
        and the last `n` documents, each cut to the first line of its
        wrapping at `width` characters.

        :param n: number of documents shown at the head and at the tail
        :param width: wrapping width; 70 % of the terminal width by default
        :return: rendered text
        """
        if n < 1:
            raise ValueError("n must be at least 1.")
        if width is None:
            width = int(.7 * shutil.get_terminal_size().columns)
        lines = [MISSING_REPR if line is None else line
                 for line in self.as_word_tag()]
        pad = len(str(len(lines))) + 1
        numbers = ['{}.'.format(i).ljust(pad) for i in range(1, len(lines) + 1)]

        if len(lines) <= 2 * n:
            return '\n'.join(' '.join(pair) for pair in zip(numbers, lines))

        head = [' '.join((num, _first_line(line, width)))
                for num, line in zip(numbers[:n], lines[:n])]
        tail = [' '.join((num, _first_line(line, width)))
                for num, line in zip(numbers[-n:], lines[-n:])]
        return '\n'.join(chain(head, ELLIPSIS, tail))

    def plot(self, plotter: Callable = None, item_name: str = 'POS Tag',
             by: Optional[Iterable] = None, **kwargs):
        """
        Plot tag counts with `plotter` (`plot_counts` by default).

        The plotter receives the list of tag names of each document (an empty
        list for missing documents), `item_name` and `by`.
        """
        if plotter is None:
            plotter = plot_counts
        tag_sequences = [[] if tags is None else tags for tags in self.tags()]
        return plotter(tag_sequences, item_name=item_name, by=by, **kwargs)


def _first_line(text: str, width: int) -> str:
    wrapped = textwrap.wrap(text, width=width)
    if not wrapped:
        return ''
    if len(wrapped) > 1:
        return wrapped[0] + ' ...'
    return wrapped[0]
