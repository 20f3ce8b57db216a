# Set where NLTK data is downloaded
import os

from orangecontrib.tagpos.misc import nltk_data_dir
os.environ['NLTK_DATA'] = nltk_data_dir()

from .collection import TaggedToken, TaggedCollection
from .tagging import tag_pos

from .version import git_revision as __git_revision__
from .version import version as __version__
