from .Dictionary import Dictionary
