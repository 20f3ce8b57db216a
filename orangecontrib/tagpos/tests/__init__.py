import unittest
import os

from nltk.tag import DefaultTagger, UnigramTagger


def suite(loader=unittest.TestLoader(), pattern='test*.py'):
    """Loads all tagpos tests."""
    dir_ = os.path.dirname(os.path.dirname(__file__))
    top_level = os.path.realpath(os.path.join(dir_, "..", ".."))
    all_tests = loader.discover(dir_, pattern, top_level_dir=top_level)
    return unittest.TestSuite(all_tests)


TRAIN = [
    [("The", "DT"), ("dog", "NN"), ("runs", "VBZ"), (".", ".")],
    [("Cats", "NNS"), ("sleep", "VBP"), (".", ".")],
]


def small_tagger():
    """ Data-free NLTK tagger that tags unknown words as nouns. """
    return UnigramTagger(TRAIN, backoff=DefaultTagger("NN"))
