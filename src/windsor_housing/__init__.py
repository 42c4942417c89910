"""
Descriptive statistics for the Windsor (Canada) housing dataset.

Sample, tabulate, fit and plot the 546 house sales in one run.
"""

__version__ = "0.1.0"
