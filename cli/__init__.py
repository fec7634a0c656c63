"""ScrapeSOU command-line interface."""
