import logging
import os
from typing import Iterable, List, Optional, Type

import nltk
from nltk import tokenize
from nltk.internals import find_file, find_jar
from nltk.tag import stanford

from orangecontrib.tagpos.collection import TaggedToken
from orangecontrib.tagpos.misc import wait_nltk_data


__all__ = ["POSTagger", "AveragedPerceptronTagger", "StanfordPOSTagger",
           "StanfordPOSTaggerError", "ENGINES", "get_engine"]

log = logging.getLogger(__name__)


class StanfordPOSTaggerError(Exception):
    pass


class POSTagger:
    """
    Base class for tagging backends.

    A tagger is opened once, tags any number of batches and is closed
    afterwards; use it as a context manager::

        >>> with AveragedPerceptronTagger() as tagger:
        ...     tagger.tag_batch(["The dog runs."])
        [[TaggedToken(word='The', tag='DT'), TaggedToken(word='dog', tag='NN'), ...]]

    Subclasses implement `_load`, which returns the loaded tagging engine,
    and `_tag`, which tags a list of texts with it.
    """
    name = NotImplemented

    sentence_tokenizer = tokenize.PunktSentenceTokenizer()
    word_tokenizer = tokenize.NLTKWordTokenizer()

    def __init__(self):
        self.tagger = None

    def __str__(self):
        return self.name

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def is_open(self) -> bool:
        return self.tagger is not None

    def open(self) -> "POSTagger":
        if self.tagger is None:
            self.tagger = self._load()
            log.info("%s loaded", self.name)
        return self

    def close(self):
        if self.tagger is not None:
            self.tagger = None
            log.info("%s released", self.name)

    def tokenize(self, text: str) -> List[List[str]]:
        """ Split text into sentences of word tokens. """
        sentences = (self.word_tokenizer.tokenize(s)
                     for s in self.sentence_tokenizer.tokenize(text))
        return [s for s in sentences if s]

    def tag_batch(self, texts: Iterable[str]) -> List[List[TaggedToken]]:
        """ Tag texts; returns a list of tagged tokens for every text. """
        if self.tagger is None:
            raise RuntimeError("{} is not open.".format(self.name))
        return self._tag(list(texts))

    def _load(self):
        raise NotImplementedError

    def _tag(self, texts: List[str]) -> List[List[TaggedToken]]:
        raise NotImplementedError


class AveragedPerceptronTagger(POSTagger):
    """
    Tags in process with NLTK. By default NLTK's averaged perceptron model
    is loaded; any `nltk.TaggerI` can be passed instead.
    """
    name = 'Averaged Perceptron Tagger'

    def __init__(self, tagger: Optional[nltk.TaggerI] = None):
        super().__init__()
        self.__model = tagger

    def _load(self):
        if self.__model is not None:
            return self.__model
        return self._load_perceptron()

    @staticmethod
    @wait_nltk_data
    def _load_perceptron():
        return nltk.PerceptronTagger()

    def _tag(self, texts: List[str]) -> List[List[TaggedToken]]:
        return [[TaggedToken(word, tag)
                 for sent in self.tagger.tag_sents(self.tokenize(text))
                 for word, tag in sent]
                for text in texts]


class StanfordPOSTagger(POSTagger):
    """
    Tags with the Stanford POS Tagger run by Java. Every batch is written to
    a file, one document per line, and tagged by a single Java process.

    :param stanford_dir: directory of the Stanford POS Tagger distribution;
        if not given, the jar is searched for in STANFORD_POSTAGGER and
        CLASSPATH and the model in STANFORD_MODELS
    :param model: model file name (found in ``stanford_dir/models``) or path
    :param java_path: Java installation directory or binary
    :param java_options: options passed to Java
    :param encoding: encoding of the files exchanged with the tagger
    """
    name = 'Stanford POS Tagger'

    jar_pattern = r'^stanford-postagger(-[0-9.]+)?\.jar$'
    default_model = 'english-left3words-distsim.tagger'

    def __init__(self, stanford_dir: Optional[str] = None,
                 model: Optional[str] = None,
                 java_path: Optional[str] = None,
                 java_options: str = '-mx1000m', encoding: str = 'utf8'):
        super().__init__()
        self.stanford_dir = stanford_dir
        self.model = model or self.default_model
        self.java_path = java_path
        self.java_options = java_options
        self.encoding = encoding
        self.__java_home = None

    def _find_jar(self) -> str:
        searchpath = (self.stanford_dir,) if self.stanford_dir else ()
        return find_jar(self.jar_pattern, searchpath=searchpath,
                        env_vars=('STANFORD_POSTAGGER', 'CLASSPATH'),
                        is_regex=True, verbose=False)

    def _find_model(self) -> str:
        searchpath = (os.path.join(self.stanford_dir, 'models'),) \
            if self.stanford_dir else ()
        return find_file(self.model, searchpath=searchpath,
                         env_vars=('STANFORD_MODELS',), verbose=False)

    def _load(self):
        try:
            jar, model = self._find_jar(), self._find_model()
        except LookupError as e:
            raise StanfordPOSTaggerError(
                "Could not find Stanford POS Tagger jar or model "
                "'{}'.".format(self.model)) from e
        log.debug("Stanford POS Tagger jar %s, model %s", jar, model)
        tagger = stanford.StanfordPOSTagger(
            model, path_to_jar=jar, encoding=self.encoding,
            java_options=self.java_options)
        # nltk's tag_sents calls config_java, which reads JAVAHOME on every run
        if self.java_path:
            self.__java_home = os.environ.get('JAVAHOME')
            os.environ['JAVAHOME'] = self.java_path
        return tagger

    def close(self):
        if self.tagger is not None and self.java_path:
            if self.__java_home is None:
                os.environ.pop('JAVAHOME', None)
            else:
                os.environ['JAVAHOME'] = self.__java_home
            self.__java_home = None
        super().close()

    def _tag(self, texts: List[str]) -> List[List[TaggedToken]]:
        documents = [[word for sent in self.tokenize(text) for word in sent]
                     for text in texts]
        return [[TaggedToken(word, tag) for word, tag in doc]
                for doc in self.tagger.tag_sents(documents)]


ENGINES = {
    "local": AveragedPerceptronTagger,
    "external": StanfordPOSTagger,
}


def get_engine(engine: str) -> Type[POSTagger]:
    """ Tagger class for an engine name; ValueError for unknown names. """
    try:
        return ENGINES[engine]
    except (KeyError, TypeError):
        raise ValueError("`engine` must be either {}.".format(
            " or ".join('"{}"'.format(e) for e in ENGINES))) from None
