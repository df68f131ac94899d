"""Backend for the StudyHub study-guide site."""

__version__ = "0.1.0"
