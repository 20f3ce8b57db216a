"""

A module with the tagging backends used by :func:`orangecontrib.tagpos.tag_pos`.

Taggers turn texts into lists of :class:`TaggedToken`::

    >>> from orangecontrib.tagpos.tag import AveragedPerceptronTagger
    >>> with AveragedPerceptronTagger() as tagger:
    ...     tagged = tagger.tag_batch(["They refuse to permit us to obtain the refuse permit"])
    >>> [t.tag for t in tagged[0]]
    ['PRP', 'VBP', 'TO', 'VB', 'PRP', 'TO', 'VB', 'DT', 'NN', 'NN']

Backends are selected by name through ``ENGINES``: ``"local"`` tags in
process with NLTK, ``"external"`` runs the Stanford POS Tagger with Java.

"""

from .pos import *
