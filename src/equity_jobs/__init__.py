"""Equity Jobs - directory of Australian startups offering equity"""

__version__ = "0.1.0"
