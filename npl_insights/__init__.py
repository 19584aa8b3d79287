"""
NPL Insights - aggregation and derived-metrics engine for a cricket league dashboard
"""
__version__ = "0.1.0"
