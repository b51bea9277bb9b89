"""HN newest – collect the Hacker News /newest listing and check its order."""

__version__ = "1.0.0"
