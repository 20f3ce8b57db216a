from .nltk_data_download import *
