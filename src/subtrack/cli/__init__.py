"""
Command Line Interface Package

Entry point `subtrack`:
- subtrack version / config: utility commands
- subtrack stats: totals, renewal timeline, categories and insights
- subtrack upcoming: renewals due within a window
- subtrack report: JSON or CSV statistics report
"""
