"""ScrapeSOU: concurrent extraction of State of the Union addresses."""

__version__ = "1.0.0"
